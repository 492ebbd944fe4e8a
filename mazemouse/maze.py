"""Wall map of a 16 x 16 maze, kept in (row, column) grid coordinates.

Row 0 is the top of the maze; the simulator counts y from the bottom, so a
cell (row, col) is shown at simulator position (col, 15 - row).
"""

from __future__ import annotations

from .api import SimulatorAPI

MAZE_SIZE = 16
_LAST = MAZE_SIZE - 1

# For each heading, the absolute sides seen by the front, right and left sensors.
_SENSED_SIDES = {
    "N": ("n", "e", "w"),
    "E": ("e", "s", "n"),
    "W": ("w", "n", "s"),
    "S": ("s", "w", "e"),
}


def _empty_grid() -> list[list[bool]]:
    return [[False] * MAZE_SIZE for _ in range(MAZE_SIZE)]


class Maze:
    """Known walls of every cell, with the outer boundary walled from the start."""

    def __init__(self, api: SimulatorAPI | None = None):
        self.api = api if api is not None else SimulatorAPI()
        self.north = _empty_grid()
        self.south = _empty_grid()
        self.east = _empty_grid()
        self.west = _empty_grid()
        for y in range(MAZE_SIZE):
            row = _LAST - y
            for x in range(MAZE_SIZE):
                if x == 0:
                    self.west[row][x] = True
                    self.api.set_wall(x, y, "w")
                if x == _LAST:
                    self.east[row][x] = True
                    self.api.set_wall(x, y, "e")
                if y == 0:
                    self.south[row][x] = True
                    self.api.set_wall(x, y, "s")
                if y == _LAST:
                    self.north[row][x] = True
                    self.api.set_wall(x, y, "n")

    def _grid(self, side: str) -> list[list[bool]]:
        return {"n": self.north, "s": self.south, "e": self.east, "w": self.west}[side]

    def read_walls(self, node: tuple[int, int], direction: str) -> None:
        """Sense the walls around `node` while facing `direction` and record them."""
        sides = _SENSED_SIDES.get(direction)
        if sides is None:
            return
        row, col = node
        sensors = (self.api.wall_front, self.api.wall_right, self.api.wall_left)
        for sense, side in zip(sensors, sides):
            if sense():
                self.api.set_wall(col, _LAST - row, side)
                self._grid(side)[row][col] = True

    def color_path(self, node: tuple[int, int]) -> None:
        """Colour a cell of the solved path blue."""
        row, col = node
        self.api.set_color(col, _LAST - row, "b")