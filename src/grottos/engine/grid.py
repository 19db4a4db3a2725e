"""Tile grid and procedural map generation.

Generation works per cell: fill the grid from a small symbol alphabet, then
optionally run cellular-automaton smoothing passes over it. Every pass reads
from a snapshot of the previous generation, so results depend only on the
input grid and the injected random source.
"""

import random
from dataclasses import dataclass

WALL = "#"
FLOOR = "."
GRASS = (",", '"')
TREE = "T"
RABBIT = "r"

# A cell turns to wall when at least this many of the 9 cells in its
# neighbourhood (itself included) are walls or off the map.
WALL_THRESHOLD = 5
CAVE_SMOOTHING_PASSES = 3

TREE_CHANCE = 0.05
RABBIT_CHANCE = 0.01

NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


@dataclass(frozen=True)
class Point:
    """An integer map or screen coordinate."""

    x: int
    y: int


class TileGrid:
    """A fixed-size rectangle of tile symbols indexed ``tiles[y][x]``."""

    def __init__(self, width: int, height: int, fill: str = FLOOR):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.tiles: list[list[str]] = [[fill] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"TileGrid(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return self.tiles == other.tiles

    @classmethod
    def from_rows(cls, rows: list[str]) -> "TileGrid":
        """Build a grid from equal-length strings, one per row.

        Used to lay out fixed maps in tests; the game itself only generates.
        """
        if not rows or not rows[0]:
            raise ValueError("grid needs at least one non-empty row")
        grid = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            if len(row) != grid.width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {grid.width}")
            grid.tiles[y] = list(row)
        return grid

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.tiles]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> str | None:
        """Return the tile at (x, y), or None when it lies outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> bool:
        """Overwrite one tile. Returns False (and changes nothing) off the grid."""
        if not self.in_bounds(x, y):
            return False
        self.tiles[y][x] = tile
        return True

    def is_wall(self, x: int, y: int) -> bool:
        """Off-grid cells count as wall."""
        tile = self.get_tile(x, y)
        return tile is None or tile == WALL

    def wall_neighbor_count(self, x: int, y: int) -> int:
        """Count walls among the cell and its 8 neighbours, edges included."""
        count = sum(1 for dx, dy in NEIGHBOR_OFFSETS if self.is_wall(x + dx, y + dy))
        if self.get_tile(x, y) == WALL:
            count += 1
        return count

    def randomize(self, rng: random.Random) -> None:
        """Assign every cell to wall or floor with equal probability."""
        self._fill(rng, (FLOOR, WALL))

    def grasslands(self, rng: random.Random) -> None:
        self._fill(rng, GRASS)

    def scatter_trees(self, rng: random.Random, chance: float = TREE_CHANCE) -> None:
        self._scatter(rng, TREE, chance)

    def scatter_rabbits(self, rng: random.Random, chance: float = RABBIT_CHANCE) -> None:
        self._scatter(rng, RABBIT, chance)

    def smooth(self) -> None:
        """Run one cellular-automaton generation over the whole grid.

        The next generation is built in a separate buffer from the current
        tiles and swapped in once complete.
        """
        next_tiles = [
            [
                WALL if self.wall_neighbor_count(x, y) >= WALL_THRESHOLD else FLOOR
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]
        self.tiles = next_tiles

    def carve_caves(
        self, rng: random.Random, passes: int = CAVE_SMOOTHING_PASSES
    ) -> None:
        """Random fill followed by ``passes`` smoothing generations."""
        self.randomize(rng)
        for _ in range(passes):
            self.smooth()

    def count(self, tile: str) -> int:
        return sum(row.count(tile) for row in self.tiles)

    def _fill(self, rng: random.Random, alphabet: tuple[str, ...]) -> None:
        for row in self.tiles:
            for x in range(self.width):
                row[x] = rng.choice(alphabet)

    def _scatter(self, rng: random.Random, tile: str, chance: float) -> None:
        for row in self.tiles:
            for x in range(self.width):
                if rng.random() < chance:
                    row[x] = tile
