"""Line-oriented client for the micromouse simulator protocol.

Commands are written one per line to the simulator; replies are read back
as whitespace-separated tokens.
"""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SimulatorError(RuntimeError):
    """Raised when the simulator rejects a command or stops answering."""


def _atoi(text: str) -> int:
    """Parse a leading integer, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class SimulatorAPI:
    """Talks to the simulator over a pair of text streams (stdin/stdout by default)."""

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None):
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout
        self._pending: deque[str] = deque()

    def _send(self, *parts: object) -> None:
        self._writer.write(" ".join(str(part) for part in parts) + "\n")
        self._writer.flush()

    def _receive(self) -> str:
        while not self._pending:
            line = self._reader.readline()
            if not line:
                raise SimulatorError("simulator closed the connection")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _query(self, *parts: object) -> str:
        self._send(*parts)
        return self._receive()

    def maze_width(self) -> int:
        return _atoi(self._query("mazeWidth"))

    def maze_height(self) -> int:
        return _atoi(self._query("mazeHeight"))

    def wall_front(self) -> bool:
        return self._query("wallFront") == "true"

    def wall_right(self) -> bool:
        return self._query("wallRight") == "true"

    def wall_left(self) -> bool:
        return self._query("wallLeft") == "true"

    def move_forward(self, distance: int = 1) -> None:
        """Move forward; the distance is only sent when it is not 1."""
        if distance != 1:
            response = self._query("moveForward", distance)
        else:
            response = self._query("moveForward")
        if response != "ack":
            raise SimulatorError(response)

    def turn_right(self) -> None:
        self._query("turnRight")

    def turn_left(self) -> None:
        self._query("turnLeft")

    def set_wall(self, x: int, y: int, direction: str) -> None:
        self._send("setWall", x, y, direction)

    def clear_wall(self, x: int, y: int, direction: str) -> None:
        self._send("clearWall", x, y, direction)

    def set_color(self, x: int, y: int, color: str) -> None:
        self._send("setColor", x, y, color)

    def clear_color(self, x: int, y: int) -> None:
        self._send("clearColor", x, y)

    def clear_all_color(self) -> None:
        self._send("clearAllColor")

    def set_text(self, x: int, y: int, text: str) -> None:
        self._send("setText", x, y, text)

    def clear_text(self, x: int, y: int) -> None:
        self._send("clearText", x, y)

    def clear_all_text(self) -> None:
        self._send("clearAllText")

    def was_reset(self) -> bool:
        return self._query("wasReset") == "true"

    def ack_reset(self) -> None:
        self._query("ackReset")