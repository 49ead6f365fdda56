"""WebSocket handler streaming a live game to one player."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from lead_snake.controls import NAMED_DIRECTIONS, Point
from lead_snake.scheduler import TickScheduler
from lead_snake.server.models import ClientMessage
from lead_snake.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


async def _send_snapshot(websocket: WebSocket, session: GameSession) -> None:
    if websocket.client_state != WebSocketState.CONNECTED:
        return
    await websocket.send_text(
        json.dumps(session.snapshot(), separators=(",", ":")),
    )


async def _dispatch(
    websocket: WebSocket, session: GameSession, msg: ClientMessage,
) -> None:
    """Route one player message to the matching session entry point."""
    if msg.action == "reset":
        session.reset()
        await _send_snapshot(websocket, session)
        return

    if msg.gesture == "start":
        session.handle_gesture_start(Point(msg.x, msg.y))
    elif msg.gesture == "end":
        session.handle_gesture_end(Point(msg.x, msg.y))

    if msg.key is not None:
        session.handle_key(msg.key)

    if msg.direction is not None:
        direction = NAMED_DIRECTIONS.get(msg.direction.lower())
        if direction is not None:
            session.handle_directional_input(direction)


@ws_router.websocket("/play")
async def play(websocket: WebSocket, seed: int | None = None) -> None:
    """Player WebSocket: send inputs, receive game state each tick."""
    config = websocket.app.state.config
    sessions: set = websocket.app.state.sessions

    await websocket.accept()
    session = GameSession(config, seed=seed)
    sessions.add(session)
    logger.info("Player connected; %d sessions open.", len(sessions))

    async def on_tick() -> None:
        session.tick()
        await _send_snapshot(websocket, session)

    try:
        # Send initial state snapshot so the client can draw immediately.
        await _send_snapshot(websocket, session)
        async with TickScheduler(on_tick, config.tick_interval_ms):
            while True:
                raw = await websocket.receive_text()
                try:
                    msg = ClientMessage.model_validate_json(raw)
                except ValidationError:
                    continue
                await _dispatch(websocket, session, msg)
    except WebSocketDisconnect:
        logger.info("Player disconnected with score %d.", session.state.score)
    finally:
        sessions.discard(session)
