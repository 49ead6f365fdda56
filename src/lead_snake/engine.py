"""Pure tick and input transitions for the snake simulation."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from lead_snake.config import (
    DEFAULT_CONFIG,
    FOOD_REWARD,
    GRID_SIZE,
    GameConfig,
)
from lead_snake.snake import Cell, Direction, accept_direction
from lead_snake.state import GameState, initial_state

logger = logging.getLogger(__name__)

FoodSource = Callable[[], Cell]


class Collision(enum.Enum):
    """Reasons a move ends the game."""

    WALL = "wall"
    SELF = "self"


def check_collision(
    head: Cell,
    body: tuple[Cell, ...],
    grid_size: int = GRID_SIZE,
) -> Collision | None:
    """Classify a prospective head position.

    *body* is the pre-move body, tail included: the tail still occupies its
    cell when the head arrives.
    """
    x, y = head
    if x < 0 or x >= grid_size or y < 0 or y >= grid_size:
        return Collision.WALL
    if head in body:
        return Collision.SELF
    return None


def advance_tick(
    state: GameState,
    place_food: FoodSource,
    grid_size: int = GRID_SIZE,
    reward: int = FOOD_REWARD,
) -> GameState:
    """Advance the game by one tick and return the next state.

    A finished game is returned unchanged.
    """
    if state.over:
        return state

    direction = state.pending_direction
    new_head = direction.step(state.head)

    # --- collision check (pre-move body) ---
    collision = check_collision(new_head, state.snake, grid_size)
    if collision is not None:
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            collision.value, state.tick + 1, state.score,
        )
        return state.evolve(
            direction=direction, over=True, tick=state.tick + 1,
        )

    # --- move ---
    if new_head == state.food:
        return state.evolve(
            snake=(new_head, *state.snake),
            food=place_food(),
            direction=direction,
            score=state.score + reward,
            tick=state.tick + 1,
        )

    return state.evolve(
        snake=(new_head, *state.snake[:-1]),
        direction=direction,
        tick=state.tick + 1,
    )


def apply_input(state: GameState, requested: Direction) -> GameState:
    """Stage *requested* as the pending direction if it is a legal turn.

    Legality is judged against the committed direction, so the latest
    accepted request between two ticks wins.
    """
    if not accept_direction(requested, state.direction):
        return state
    return state.evolve(pending_direction=requested)


def reset_state(
    place_food: FoodSource,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Return a fresh game with a newly placed food cell."""
    return initial_state(food=place_food(), config=config)
