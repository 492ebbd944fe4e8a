"""Greedy scoring solver for 16 x 16 micromouse mazes.

The mouse starts in the lower-left corner facing north and always heads
for the reachable neighbour with the highest score. Scores start high near
the centre; travelling, looping and dead ends lower them.
"""

from __future__ import annotations

import logging

from .api import SimulatorAPI

LOOP_COST = 20
TRAVEL_COST = 5
BRANCH_REWARD = 5
MAZE_SIZE = 16
DEAD_END = -16383

_REACHABLE = -8191
_HEADINGS = "nesw"
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_WALL_OFFSETS = {"l": -1, "r": 1}

log = logging.getLogger(__name__)


def initial_score(i: int, j: int) -> int:
    """Starting score of a cell: highest in the centre, falling towards the edges."""
    return 128 - (abs(2 * i - 15) + abs(2 * j - 15)) // 2


class GreedySolver:
    """Drives the mouse through the maze one decision at a time."""

    def __init__(self, api):
        self.api = api
        self.score = [[initial_score(i, j) for j in range(MAZE_SIZE)] for i in range(MAZE_SIZE)]
        self.history = [[[0, 0, 0] for _ in range(MAZE_SIZE)] for _ in range(MAZE_SIZE)]
        self.x = 0
        self.y = 0
        self.facing = 0
        self.move_count = 1
        self.in_dead_end = False

    @property
    def in_centre(self) -> bool:
        return 7 <= self.x <= 8 and 7 <= self.y <= 8

    def _show(self, x: int, y: int) -> None:
        self.api.set_text(x, y, str(self.score[x][y]))

    def _neighbour_score(self, heading: int) -> int:
        dx, dy = _STEPS[heading]
        u, v = self.x + dx, self.y + dy
        if not (0 <= u < MAZE_SIZE and 0 <= v < MAZE_SIZE):
            return DEAD_END
        return self.score[u][v]

    def set_wall(self, facing: int, relative: str) -> None:
        """Report a wall on the given side ('f', 'l' or 'r') of the current cell."""
        heading = (facing + _WALL_OFFSETS.get(relative, 0)) % 4
        self.api.set_wall(self.x, self.y, _HEADINGS[heading])

    def think(self) -> None:
        """Sense the walls around the current cell and make one move."""
        front = self.api.wall_front()
        left = self.api.wall_left()
        right = self.api.wall_right()
        for present, side in ((front, "f"), (left, "l"), (right, "r")):
            if present:
                self.set_wall(self.facing, side)
        wall_count = front + left + right

        history = self.history[self.x][self.y]
        history[:] = [history[1], history[2], self.move_count]
        if history[1] - history[0] == history[2] - history[1]:
            log.info("looping")
            self.score[self.x][self.y] -= LOOP_COST
            self._show(self.x, self.y)

        if wall_count == 3:
            log.info("Help :(")
            self.in_dead_end = True
            self.move("b")
            return
        if wall_count == 2:
            self.move("f" if not front else "l" if not left else "r")
            return

        self.in_dead_end = False
        score_f = DEAD_END if front else self._neighbour_score(self.facing)
        score_r = DEAD_END if right else self._neighbour_score((self.facing + 1) % 4)
        score_l = DEAD_END if left else self._neighbour_score((self.facing + 3) % 4)

        if history[0] == 0 and history[1] == 0:
            self.score[self.x][self.y] += BRANCH_REWARD * (2 - wall_count)
            self._show(self.x, self.y)

        if score_f > _REACHABLE and score_f >= score_r and score_f >= score_l:
            log.info("go ahead")
            self.move("f")
        elif score_r > _REACHABLE and score_r >= score_l:
            log.info("take a right")
            self.move("r")
        elif score_l > _REACHABLE:
            log.info("take a left")
            self.move("l")
        else:
            self.in_dead_end = True
            self.move("b")

    def move(self, relative: str) -> None:
        """Turn towards 'f', 'l', 'r' or 'b' and step one cell forward."""
        self.score[self.x][self.y] -= TRAVEL_COST
        self._show(self.x, self.y)
        self.move_count += 1

        if self.in_dead_end:
            self.score[self.x][self.y] = DEAD_END
            self.api.set_text(self.x, self.y, "X")

        if relative == "b":
            self.api.turn_right()
            self.api.turn_right()
            self.facing = (self.facing + 2) % 4
        elif relative == "r":
            self.api.turn_right()
            self.facing = (self.facing + 1) % 4
        elif relative == "l":
            self.api.turn_left()
            self.facing = (self.facing + 3) % 4

        self.api.move_forward()
        dx, dy = _STEPS[self.facing]
        self.x += dx
        self.y += dy

    def run(self) -> None:
        """Display the initial scores and move until a centre cell is reached."""
        log.info("Running...")
        self.api.set_color(0, 0, "G")
        self.api.set_text(0, 0, "abc")
        for i in range(MAZE_SIZE):
            for j in range(MAZE_SIZE):
                self._show(i, j)
        while not self.in_centre:
            self.think()


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GreedySolver(SimulatorAPI()).run()
    return 0