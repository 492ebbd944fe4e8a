"""Land-based robots that move through the maze by driving the simulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .api import SimulatorAPI

log = logging.getLogger(__name__)


@dataclass
class LandBasedRobot:
    """A ground robot with a position in the maze grid and a heading.

    The position is a (row, column) grid cell, row 0 being the top of the
    maze; the heading is one of 'N', 'E', 'S' or 'W'.
    """

    name: str = ""
    speed: float = 0.0
    width: float = 0.0
    length: float = 0.0
    height: float = 0.0
    capacity: float = 0.0
    x: int = 15
    y: int = 0
    direction: str = "N"
    api: SimulatorAPI = field(default_factory=SimulatorAPI, repr=False, compare=False)

    def _trace(self, action: str) -> None:
        log.info("%s.%s is called", type(self).__name__, action)

    def move_forward(self, x: int, y: int, direction: str) -> None:
        """Step one cell forward and record the new cell and heading."""
        self._trace("move_forward")
        self.api.move_forward()
        self.x = x
        self.y = y
        self.direction = direction

    def turn_left(self) -> None:
        """Rotate 90 degrees counter-clockwise in the simulator."""
        self._trace("turn_left")
        self.api.turn_left()

    def turn_right(self) -> None:
        """Rotate 90 degrees clockwise in the simulator."""
        self._trace("turn_right")
        self.api.turn_right()

    def pick_up(self, item: str) -> None:
        """Pick up a payload."""
        log.info("%s: picking up the payload %s", type(self).__name__, item)

    def release(self, item: str) -> None:
        """Release a payload."""
        log.info("%s: releasing the payload %s", type(self).__name__, item)