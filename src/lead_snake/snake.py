"""Cells, directions and the perpendicular-turn rule."""

from __future__ import annotations

import enum

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values.

    Screen coordinates: ``y`` grows downwards.
    """

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, cell: Cell) -> Cell:
        """Return the cell one step from *cell* in this direction."""
        x, y = cell
        return x + self.dx, y + self.dy


def accept_direction(requested: Direction, committed: Direction) -> bool:
    """Return True if *requested* turns perpendicular to *committed*.

    A request on the current axis of travel is rejected, which covers both
    continuing the same way and a 180° reversal.
    """
    if requested.dx != 0 and committed.dx != 0:
        return False
    if requested.dy != 0 and committed.dy != 0:
        return False
    return True


def has_duplicates(body: tuple[Cell, ...]) -> bool:
    """Check whether any two segments share a cell."""
    return len(set(body)) != len(body)
