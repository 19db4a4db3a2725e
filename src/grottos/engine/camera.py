"""Scrolling camera over a tile grid.

The camera centres on a focus point (the player) and pins to the map edges
instead of scrolling past them, so near an edge the focus slides off-centre.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .grid import Point, TileGrid


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Viewport:
    """A fixed-size window onto the map, in screen cells."""

    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"viewport dimensions must be positive, got {self.width}x{self.height}"
            )

    def origin(self, grid_width: int, grid_height: int, focus: Point) -> Point:
        """World coordinate shown in the viewport's top-left cell.

        The grid is expected to be at least as large as the viewport. When it
        is not, the origin stays at 0 on that axis and the excess is blank.
        """
        x = _clamp(focus.x - self.width // 2, 0, max(grid_width - self.width, 0))
        y = _clamp(focus.y - self.height // 2, 0, max(grid_height - self.height, 0))
        return Point(x, y)

    def to_screen(self, origin: Point, point: Point) -> Point:
        """Translate a world point to viewport cells, kept inside the viewport."""
        return Point(
            _clamp(point.x - origin.x, 0, self.width - 1),
            _clamp(point.y - origin.y, 0, self.height - 1),
        )

    def cells(self, grid: TileGrid, origin: Point) -> Iterator[tuple[int, int, str]]:
        """Yield ``(vx, vy, tile)`` for every viewport cell backed by the grid."""
        for vy in range(self.height):
            for vx in range(self.width):
                tile = grid.get_tile(origin.x + vx, origin.y + vy)
                if tile is not None:
                    yield vx, vy, tile
