"""Configuration for Grottos."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.state import DISPLAY_HEIGHT, DISPLAY_WIDTH


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "INFO"
    log_file: Path | None = Path("grottos.log")
    json_logs: bool = False
    seed: int | None = None
    # Fixed; not read from the environment
    display_width: int = DISPLAY_WIDTH
    display_height: int = DISPLAY_HEIGHT

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("GROTTOS_LOG_FILE")
        seed = os.getenv("GROTTOS_SEED")

        return cls(
            log_level=os.getenv("GROTTOS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else cls.log_file,
            json_logs=os.getenv("GROTTOS_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            seed=int(seed) if seed else None,
        )
