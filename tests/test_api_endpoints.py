"""Tests for FastAPI endpoints via TestClient."""

import pytest

from fastapi.testclient import TestClient

from dicechess.api.server import app as _shared_app
from dicechess.api.dependencies import init_app
from dicechess.game.state import PieceType

from conftest import ScriptedDice


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_APP_CONFIG = {
    "sessions": {"max_sessions": 3},
    "dice": {"seed": 2024},
}


@pytest.fixture
def client():
    init_app(_shared_app, _APP_CONFIG)
    return TestClient(_shared_app)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _create_game(client, faces=None) -> str:
    """Create a game; optionally script its dice."""
    resp = client.post("/games")
    assert resp.status_code == 201
    game_id = resp.json()["game_id"]
    if faces is not None:
        session = _shared_app.state.session_manager.get_session(game_id)
        session._rng = ScriptedDice(faces)
    return game_id


# ---------------------------------------------------------------------------
# Game lifecycle
# ---------------------------------------------------------------------------

class TestCreateGame:
    def test_create_returns_201(self, client):
        resp = client.post("/games")
        assert resp.status_code == 201
        data = resp.json()
        assert "game_id" in data
        state = data["game_state"]
        assert state["status"] == "rolling"
        assert state["turn"] == "white"
        assert state["dice"] == []
        assert "render" in state

    def test_create_with_seed(self, client):
        resp = client.post("/games", json={"seed": 11})
        assert resp.status_code == 201

    def test_session_limit_returns_503(self, client):
        for _ in range(3):
            client.post("/games")
        resp = client.post("/games")
        assert resp.status_code == 503

    def test_unknown_game_404(self, client):
        assert client.get("/games/nope").status_code == 404
        assert client.post("/games/nope/roll").status_code == 404
        assert client.delete("/games/nope").status_code == 404


class TestPlay:
    def test_roll_then_roll_again(self, client):
        game_id = _create_game(client)
        first = client.post(f"/games/{game_id}/roll").json()
        assert first["changed"]
        assert first["game_state"]["status"] == "moving"
        assert len(first["game_state"]["dice"]) == 3

        second = client.post(f"/games/{game_id}/roll").json()
        assert not second["changed"]
        assert second["game_state"]["dice"] == first["game_state"]["dice"]

    def test_select_and_move(self, client):
        game_id = _create_game(client, [PieceType.PAWN, PieceType.PAWN, PieceType.ROOK])
        client.post(f"/games/{game_id}/roll")

        resp = client.post(f"/games/{game_id}/select", json={"square": "e2"})
        assert resp.status_code == 200
        state = resp.json()["game_state"]
        assert state["selected"] == "e2"
        assert state["legal_moves"] == ["e4", "e3"]

        resp = client.post(f"/games/{game_id}/move", json={"square": "e4"})
        data = resp.json()
        assert data["changed"]
        assert data["game_state"]["turn"] == "black"
        assert data["game_state"]["status"] == "rolling"
        assert data["game_state"]["board"][4][4] == {"type": "pawn", "player": "white"}

    def test_illegal_move_is_not_an_error(self, client):
        game_id = _create_game(client, [PieceType.PAWN] * 3)
        client.post(f"/games/{game_id}/roll")
        client.post(f"/games/{game_id}/select", json={"square": "e2"})
        resp = client.post(f"/games/{game_id}/move", json={"square": "e5"})
        assert resp.status_code == 200
        assert not resp.json()["changed"]

    def test_bad_square_422(self, client):
        game_id = _create_game(client)
        resp = client.post(f"/games/{game_id}/select", json={"square": "z9"})
        assert resp.status_code == 422
        resp = client.post(f"/games/{game_id}/move", json={})
        assert resp.status_code == 422

    def test_legal_moves_endpoint(self, client):
        game_id = _create_game(client, [PieceType.KNIGHT] * 3)
        assert client.get(f"/games/{game_id}/moves").json()["total"] == 0
        client.post(f"/games/{game_id}/roll")
        data = client.get(f"/games/{game_id}/moves").json()
        assert data["total"] == 4
        assert {"from_square": "g1", "to_square": "f3"} in data["moves"]

    def test_forced_skip(self, client):
        game_id = _create_game(client, [PieceType.KING] * 3)
        state = client.post(f"/games/{game_id}/roll").json()["game_state"]
        assert not state["can_move"]

        data = client.post(f"/games/{game_id}/skip").json()
        assert data["changed"]
        assert data["game_state"]["turn"] == "black"
        assert data["game_state"]["status"] == "rolling"

    def test_skip_refused_with_moves(self, client):
        game_id = _create_game(client, [PieceType.PAWN] * 3)
        client.post(f"/games/{game_id}/roll")
        assert not client.post(f"/games/{game_id}/skip").json()["changed"]

    def test_reset(self, client):
        game_id = _create_game(client, [PieceType.PAWN] * 3)
        client.post(f"/games/{game_id}/roll")
        data = client.post(f"/games/{game_id}/reset").json()
        assert data["game_state"]["status"] == "rolling"
        assert data["game_state"]["dice"] == []

    def test_get_and_delete(self, client):
        game_id = _create_game(client)
        resp = client.get(f"/games/{game_id}")
        assert resp.status_code == 200
        assert resp.json()["game_id"] == game_id

        resp = client.delete(f"/games/{game_id}")
        assert resp.json() == {"deleted": True, "game_id": game_id}
        assert client.get(f"/games/{game_id}").status_code == 404
