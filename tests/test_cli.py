"""Tests for the headless CLI."""

import json

from lead_snake.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        parser = _build_parser()
        args = parser.parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.ticks == 50
        assert args.seed is None
        assert args.keys == ""

    def test_simulate_with_flags(self):
        parser = _build_parser()
        args = parser.parse_args([
            "simulate", "--ticks", "5", "--seed", "3", "--keys", "ArrowUp",
        ])
        assert args.ticks == 5
        assert args.seed == 3
        assert args.keys == "ArrowUp"


class TestCLISimulate:
    def test_runs_into_wall(self, capsys):
        assert main(["simulate", "--ticks", "100", "--seed", "0"]) == 0
        state = json.loads(capsys.readouterr().out)
        assert state["over"] is True
        assert state["snake"] == [[19, 10]]

    def test_keys_applied_per_tick(self, capsys):
        main(["simulate", "--ticks", "3", "--keys", "ArrowDown,ArrowLeft"])
        state = json.loads(capsys.readouterr().out)
        assert state["snake"] == [[8, 11]]
        assert state["over"] is False


class TestCLIConfig:
    def test_prints_config(self, capsys):
        assert main(["config"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["grid_size"] == 20
        assert data["initial_food"] == [15, 15]
