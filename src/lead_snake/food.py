"""Food placement logic."""

from __future__ import annotations

import logging

import numpy as np

from lead_snake.config import GRID_SIZE
from lead_snake.snake import Cell

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Places food uniformly at random anywhere on the grid.

    Occupied snake cells are not excluded, so food may land under the body
    and stay unreachable until the snake moves off it.

    Uses a NumPy RNG so placement is reproducible when seeded.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self) -> Cell:
        """Return a new food cell."""
        x, y = self.rng.integers(0, self.grid_size, size=2)
        cell = (int(x), int(y))
        logger.debug("Food placed at %s.", cell)
        return cell
