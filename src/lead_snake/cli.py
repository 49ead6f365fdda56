"""Command-line tools for running the game headless."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lead-snake",
        description="Lead Snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless game and print the final state.",
    )
    sim_p.add_argument("--ticks", type=int, default=50)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--keys", type=str, default="",
        help="Comma-separated key names, one applied before each tick.",
    )

    # --- config ---
    sub.add_parser("config", help="Print the game constants as JSON.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from lead_snake.session import GameSession

    session = GameSession(seed=args.seed)
    keys = [k.strip() for k in args.keys.split(",") if k.strip()]
    for i in range(args.ticks):
        if i < len(keys):
            session.handle_key(keys[i])
        session.tick()
        if session.state.over:
            logger.info("Stopped after %d ticks.", i + 1)
            break
    print(json.dumps(session.snapshot()))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from lead_snake.config import DEFAULT_CONFIG

    print(json.dumps(DEFAULT_CONFIG.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``lead-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
