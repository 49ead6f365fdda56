"""Immutable game state snapshot."""

from __future__ import annotations

from dataclasses import dataclass, replace

from lead_snake.config import DEFAULT_CONFIG, GameConfig
from lead_snake.snake import Cell, Direction, has_duplicates


@dataclass(frozen=True)
class GameState:
    """Everything the simulation knows about one game.

    The snake is stored head-first. ``pending_direction`` is the latest
    accepted input; it becomes ``direction`` on the next tick.
    """

    snake: tuple[Cell, ...]
    food: Cell
    direction: Direction = Direction.RIGHT
    pending_direction: Direction = Direction.RIGHT
    score: int = 0
    over: bool = False
    tick: int = 0

    def __post_init__(self) -> None:
        if not self.snake:
            raise ValueError("Snake length must be at least 1.")
        if has_duplicates(self.snake):
            raise ValueError("Snake segments must occupy distinct cells.")
        if self.score < 0:
            raise ValueError("Score must be non-negative.")

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        return self.snake[0]

    def evolve(self, **changes) -> GameState:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "tick": self.tick,
            "score": self.score,
            "over": self.over,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "direction": list(self.direction.value),
        }


def initial_state(
    food: Cell | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Build the state a fresh game starts from.

    *food* defaults to the configured initial food cell.
    """
    return GameState(
        snake=(config.initial_head,),
        food=food if food is not None else config.initial_food,
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
    )
