"""Keyboard and touch-gesture input mapping."""

from __future__ import annotations

from dataclasses import dataclass

from lead_snake.snake import Direction

KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

NAMED_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


@dataclass(frozen=True)
class Point:
    """A touch coordinate in screen pixels."""

    x: float
    y: float


def direction_for_key(key: str) -> Direction | None:
    """Map a keyboard key name to a direction, or ``None``."""
    return KEY_DIRECTIONS.get(key)


def swipe_direction(delta_x: float, delta_y: float) -> Direction | None:
    """Interpret a swipe vector as a cardinal direction.

    The dominant axis wins; ties go to the vertical axis. A zero vector
    yields ``None``.
    """
    if abs(delta_x) > abs(delta_y):
        return Direction.RIGHT if delta_x > 0 else Direction.LEFT
    if delta_y > 0:
        return Direction.DOWN
    if delta_y < 0:
        return Direction.UP
    return None


class GestureTracker:
    """Remembers where a touch started until it ends."""

    def __init__(self) -> None:
        self.start: Point | None = None

    def begin(self, point: Point) -> None:
        """Record the touch start point."""
        self.start = point

    def end(self, point: Point) -> Direction | None:
        """Finish the gesture and return the swiped direction.

        Returns ``None`` when no start was recorded or the touch did not
        move. The start point is cleared either way.
        """
        start, self.start = self.start, None
        if start is None:
            return None
        return swipe_direction(point.x - start.x, point.y - start.y)
