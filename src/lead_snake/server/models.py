"""Pydantic models for HTTP responses and WebSocket messages."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ConfigResponse(BaseModel):
    """Board constants a presentation client needs to draw the game."""

    grid_size: int
    cell_size: int
    tick_interval_ms: int
    food_reward: int


class ClientMessage(BaseModel):
    """A single message sent by the player over the ``/play`` socket.

    Exactly which fields are set decides the action; unset fields are
    ignored. Examples::

        {"key": "ArrowUp"}
        {"direction": "left"}
        {"gesture": "start", "x": 10.0, "y": 42.5}
        {"action": "reset"}
    """

    key: str | None = None
    direction: str | None = None
    gesture: Literal["start", "end"] | None = None
    x: float = 0.0
    y: float = 0.0
    action: Literal["reset"] | None = None
