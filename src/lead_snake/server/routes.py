"""REST route handlers."""

from __future__ import annotations

from fastapi import APIRouter, Request

from lead_snake.server.models import ConfigResponse

router = APIRouter(tags=["game"])


@router.get("/config")
async def get_config(request: Request) -> ConfigResponse:
    """Return the board constants."""
    config = request.app.state.config
    return ConfigResponse(
        grid_size=config.grid_size,
        cell_size=config.cell_size,
        tick_interval_ms=config.tick_interval_ms,
        food_reward=config.food_reward,
    )


@router.get("/health")
async def health(request: Request) -> dict:
    """Liveness probe with the number of games in progress."""
    return {
        "status": "ok",
        "active_sessions": len(request.app.state.sessions),
    }
