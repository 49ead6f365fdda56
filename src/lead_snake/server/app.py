"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lead_snake.config import DEFAULT_CONFIG, GameConfig
from lead_snake.server.routes import router
from lead_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    logger.info("Lead Snake host started.")
    yield
    logger.info(
        "Lead Snake host stopping with %d open sessions.",
        len(app.state.sessions),
    )


def create_app(config: GameConfig = DEFAULT_CONFIG) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(title="Lead Snake", version="0.1.0", lifespan=_lifespan)
    app.state.config = config
    app.state.sessions = set()
    app.include_router(router)
    app.include_router(ws_router)
    return app
