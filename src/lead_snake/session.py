"""Host-owned live game instance and its input entry points."""

from __future__ import annotations

import logging

import numpy as np

from lead_snake.config import DEFAULT_CONFIG, GameConfig
from lead_snake.controls import GestureTracker, Point, direction_for_key
from lead_snake.engine import advance_tick, apply_input, reset_state
from lead_snake.food import FoodPlacer
from lead_snake.snake import Direction
from lead_snake.state import GameState, initial_state

logger = logging.getLogger(__name__)


class GameSession:
    """Single live game driven by a host event loop.

    The session holds the one current :class:`GameState` and swaps it for
    the result of the pure transitions in :mod:`lead_snake.engine`. Every
    read goes through :attr:`state`, so a tick always sees the most recently
    accepted direction.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: int | None = None,
        food_placer: FoodPlacer | None = None,
    ) -> None:
        self.config = config
        if food_placer is None:
            food_placer = FoodPlacer(
                config.grid_size, rng=np.random.default_rng(seed),
            )
        self.food_placer = food_placer
        self.gestures = GestureTracker()
        self.state: GameState = initial_state(config=config)

    def tick(self) -> GameState:
        """Advance the game by one tick."""
        was_over = self.state.over
        self.state = advance_tick(
            self.state,
            self.food_placer.place,
            grid_size=self.config.grid_size,
            reward=self.config.food_reward,
        )
        if self.state.over and not was_over:
            logger.info("Session game over with score %d.", self.state.score)
        return self.state

    def handle_directional_input(self, direction: Direction) -> GameState:
        """Stage a direction change if it is a legal turn."""
        self.state = apply_input(self.state, direction)
        return self.state

    def handle_key(self, key: str) -> GameState:
        """Map an arrow key to a direction change; other keys are ignored."""
        direction = direction_for_key(key)
        if direction is None:
            return self.state
        return self.handle_directional_input(direction)

    def handle_gesture_start(self, point: Point) -> None:
        """Record where a touch gesture began."""
        self.gestures.begin(point)

    def handle_gesture_end(self, point: Point) -> GameState:
        """Turn a completed swipe into a direction change."""
        direction = self.gestures.end(point)
        if direction is None:
            return self.state
        return self.handle_directional_input(direction)

    def reset(self) -> GameState:
        """Start over with a freshly placed food cell."""
        self.state = reset_state(self.food_placer.place, self.config)
        self.gestures = GestureTracker()
        logger.info("Session reset.")
        return self.state

    def snapshot(self) -> dict:
        """Return the serializable state for rendering."""
        return self.state.to_dict()
