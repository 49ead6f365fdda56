"""WebSocket integration tests for real-time gameplay."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient

from lead_snake.config import GameConfig
from lead_snake.server.app import create_app


@pytest.fixture()
def tc():
    """Starlette sync TestClient with a fast tick so tests stay short."""
    return TestClient(create_app(GameConfig(tick_interval_ms=20)))


def _receive_until(ws, predicate, limit=200):
    for _ in range(limit):
        state = json.loads(ws.receive_text())
        if predicate(state):
            return state
    raise AssertionError("expected state never arrived")


class TestPlayWebSocket:
    def test_initial_state(self, tc):
        with tc.websocket_connect("/play?seed=0") as ws:
            state = json.loads(ws.receive_text())
            assert state["tick"] == 0
            assert state["snake"] == [[10, 10]]
            assert state["food"] == [15, 15]
            assert state["score"] == 0
            assert state["over"] is False

    def test_ticks_are_streamed(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            state = _receive_until(ws, lambda s: s["tick"] >= 2)
            assert state["snake"][0][0] > 10

    def test_key_turns_snake(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"key": "ArrowUp"}))
            state = _receive_until(ws, lambda s: s["direction"] == [0, -1])
            assert state["snake"][0][1] < 10

    def test_named_direction(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"direction": "DOWN"}))
            state = _receive_until(ws, lambda s: s["direction"] == [0, 1])
            assert state["snake"][0][1] > 10

    def test_swipe_turns_snake(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"gesture": "start", "x": 100, "y": 100}))
            ws.send_text(json.dumps({"gesture": "end", "x": 105, "y": 20}))
            _receive_until(ws, lambda s: s["direction"] == [0, -1])

    def test_game_over_then_reset(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            over = _receive_until(ws, lambda s: s["over"])
            assert over["snake"] == [[19, 10]]
            ws.send_text(json.dumps({"action": "reset"}))
            fresh = _receive_until(ws, lambda s: not s["over"])
            assert fresh["score"] == 0
            assert fresh["snake"][0][1] == 10

    def test_invalid_messages_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"gesture": "pinch"}))
            ws.send_text(json.dumps({"direction": "sideways"}))
            ws.send_text(json.dumps({"key": "Escape"}))
            state = _receive_until(ws, lambda s: s["tick"] >= 2)
            assert state["direction"] == [1, 0]


class TestDisconnectHandling:
    def test_session_released_on_disconnect(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            assert len(tc.app.state.sessions) == 1
            ws.receive_text()
        resp = tc.get("/health")
        assert resp.json()["active_sessions"] == 0
