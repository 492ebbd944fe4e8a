"""Concrete land-based robots: a tracked vehicle and a wheeled vehicle."""

from __future__ import annotations

from dataclasses import dataclass

from .robot import LandBasedRobot


@dataclass
class LandBasedTracked(LandBasedRobot):
    """A robot that drives on tracks."""

    track_type: str | None = None

    def move_forward(self, x: int, y: int, direction: str) -> None:
        """Step one cell forward and record the new cell and heading."""
        super().move_forward(x, y, direction)

    def turn_left(self) -> None:
        """Rotate 90 degrees counter-clockwise."""
        super().turn_left()

    def turn_right(self) -> None:
        """Rotate 90 degrees clockwise."""
        super().turn_right()

    def pick_up(self, item: str) -> None:
        """Pick up a payload."""
        super().pick_up(item)

    def release(self, item: str) -> None:
        """Release a payload."""
        super().release(item)


@dataclass
class LandBasedWheeled(LandBasedRobot):
    """A robot that drives on wheels."""

    wheel_number: int = 0
    wheel_type: str | None = None

    def move_forward(self, x: int, y: int, direction: str) -> None:
        """Step one cell forward and record the new cell and heading."""
        super().move_forward(x, y, direction)

    def turn_left(self) -> None:
        """Rotate 90 degrees counter-clockwise."""
        super().turn_left()

    def turn_right(self) -> None:
        """Rotate 90 degrees clockwise."""
        super().turn_right()

    def pick_up(self, item: str) -> None:
        """Pick up a payload."""
        super().pick_up(item)

    def release(self, item: str) -> None:
        """Release a payload."""
        super().release(item)