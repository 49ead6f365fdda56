"""Fixed game constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass

GRID_SIZE = 20
CELL_SIZE = 15
TICK_INTERVAL_MS = 150
FOOD_REWARD = 10
INITIAL_HEAD = (10, 10)
INITIAL_FOOD = (15, 15)


@dataclass(frozen=True)
class GameConfig:
    """Constants shared by the simulation and its presentation host.

    ``cell_size`` is presentation-only; the simulation never reads it.
    """

    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS
    food_reward: int = FOOD_REWARD
    initial_head: tuple[int, int] = INITIAL_HEAD
    initial_food: tuple[int, int] = INITIAL_FOOD

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        for name in ("initial_head", "initial_food"):
            x, y = getattr(self, name)
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"{name} must lie inside the grid.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["initial_head"] = list(self.initial_head)
        d["initial_food"] = list(self.initial_food)
        return d


DEFAULT_CONFIG = GameConfig()
