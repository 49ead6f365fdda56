"""Tests for the game constants."""

import json

import pytest

from lead_snake.config import DEFAULT_CONFIG, GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_size == 20
        assert cfg.cell_size == 15
        assert cfg.tick_interval_ms == 150
        assert cfg.food_reward == 10
        assert cfg.initial_head == (10, 10)
        assert cfg.initial_food == (15, 15)

    def test_tick_interval_seconds(self):
        assert DEFAULT_CONFIG.tick_interval == pytest.approx(0.15)

    def test_to_dict_is_json_serializable(self):
        d = GameConfig().to_dict()
        assert d["initial_head"] == [10, 10]
        assert isinstance(json.dumps(d), str)

    def test_invalid_grid_size(self):
        with pytest.raises(ValueError, match="grid_size"):
            GameConfig(grid_size=0)

    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="tick_interval_ms"):
            GameConfig(tick_interval_ms=0)

    def test_initial_head_outside_grid(self):
        with pytest.raises(ValueError, match="initial_head"):
            GameConfig(grid_size=5)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.grid_size = 30  # type: ignore[misc]
