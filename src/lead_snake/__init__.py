"""Lead Snake — game core for the lead-scraping waiting screen."""

from lead_snake.config import GameConfig
from lead_snake.controls import GestureTracker, Point
from lead_snake.engine import Collision, advance_tick, apply_input, reset_state
from lead_snake.food import FoodPlacer
from lead_snake.scheduler import SchedulerState, TickScheduler
from lead_snake.session import GameSession
from lead_snake.snake import Direction
from lead_snake.state import GameState

__all__ = [
    "Collision",
    "Direction",
    "FoodPlacer",
    "GameConfig",
    "GameSession",
    "GameState",
    "GestureTracker",
    "Point",
    "SchedulerState",
    "TickScheduler",
    "advance_tick",
    "apply_input",
    "reset_state",
]
