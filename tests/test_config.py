"""Tests for configuration and logging setup."""

import json
from pathlib import Path

import pytest
import structlog

from grottos.config import Config
from grottos.engine.screens import main_menu_screen
from grottos.logging import add_screen_name, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


ENV_VARS = ("GROTTOS_LOG_LEVEL", "GROTTOS_LOG_FILE", "GROTTOS_JSON_LOGS", "GROTTOS_SEED")


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config.log_level == "INFO"
    assert config.log_file == Path("grottos.log")
    assert not config.json_logs
    assert config.seed is None
    assert (config.display_width, config.display_height) == (80, 24)


def test_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("GROTTOS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GROTTOS_LOG_FILE", str(tmp_path / "game.log"))
    monkeypatch.setenv("GROTTOS_JSON_LOGS", "yes")
    monkeypatch.setenv("GROTTOS_SEED", "17")
    config = Config.from_env()
    assert config.log_level == "DEBUG"
    assert config.log_file == tmp_path / "game.log"
    assert config.json_logs
    assert config.seed == 17


def test_screen_name_processor():
    screen = main_menu_screen()
    event = add_screen_name(None, "info", {"event": "x", "screen": screen})
    assert event["screen"] == "MenuScreen"


def test_json_logs_written_to_file(tmp_path: Path):
    log_file = tmp_path / "grottos.log"
    configure_logging(log_level="INFO", log_file=log_file, json_logs=True)
    logger = get_logger("test")
    logger.debug("hidden_event")
    logger.info("visible_event", value=3)

    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "visible_event"
    assert record["value"] == 3
    assert record["level"] == "info"
