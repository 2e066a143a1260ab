"""FastAPI server for hot-seat Dice Chess games."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Request

from dicechess.api.models import (
    ActionResponse,
    CreateGameRequest,
    CreateGameResponse,
    GameStateResponse,
    LegalMove,
    LegalMovesResponse,
    SquareRequest,
)
from dicechess.api.session_manager import SessionLimitError
from dicechess.game.state import Square

app = FastAPI(
    title="Dice Chess API",
    description="Roll three dice, move a piece of a rolled type, capture the king to win",
    version="0.1.0",
)


def _manager(request: Request):
    """Get SessionManager from app state."""
    return request.app.state.session_manager


def _get_session(request: Request, game_id: str):
    """Look up game or raise 404."""
    session = _manager(request).get_session(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Game '{game_id}' not found")
    return session


def _action(session, result) -> ActionResponse:
    _, changed = result
    return ActionResponse(game_id=session.game_id, changed=changed,
                          game_state=session.snapshot())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.post("/games", response_model=CreateGameResponse, status_code=201)
def create_game(request: Request, body: Optional[CreateGameRequest] = None):
    """Start a new game from the standard position."""
    seed = body.seed if body is not None else None
    try:
        session = _manager(request).create_session(seed=seed)
    except SessionLimitError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return CreateGameResponse(game_id=session.game_id, game_state=session.snapshot())


@app.get("/games/{game_id}", response_model=GameStateResponse)
def get_game_state(game_id: str, request: Request):
    """Get game state."""
    session = _get_session(request, game_id)
    return GameStateResponse(game_id=game_id, game_state=session.snapshot())


@app.post("/games/{game_id}/roll", response_model=ActionResponse)
def roll(game_id: str, request: Request):
    """Roll the dice for the player to move."""
    session = _get_session(request, game_id)
    return _action(session, session.roll())


@app.post("/games/{game_id}/select", response_model=ActionResponse)
def select(game_id: str, body: SquareRequest, request: Request):
    """Select a piece, deselect, or move to a highlighted square."""
    session = _get_session(request, game_id)
    return _action(session, session.select(Square.from_notation(body.square)))


@app.post("/games/{game_id}/move", response_model=ActionResponse)
def move(game_id: str, body: SquareRequest, request: Request):
    """Move the selected piece."""
    session = _get_session(request, game_id)
    return _action(session, session.move(Square.from_notation(body.square)))


@app.post("/games/{game_id}/skip", response_model=ActionResponse)
def skip(game_id: str, request: Request):
    """Pass when the dice leave no legal move."""
    session = _get_session(request, game_id)
    return _action(session, session.skip())


@app.post("/games/{game_id}/reset", response_model=ActionResponse)
def reset(game_id: str, request: Request):
    """Restart the game from the standard position."""
    session = _get_session(request, game_id)
    return _action(session, session.reset())


@app.get("/games/{game_id}/moves", response_model=LegalMovesResponse)
def legal_moves(game_id: str, request: Request):
    """List every legal move for the player to move."""
    session = _get_session(request, game_id)
    moves = [LegalMove(from_square=f.notation, to_square=t.notation)
             for f, t in session.legal_moves()]
    return LegalMovesResponse(game_id=game_id, moves=moves, total=len(moves))


@app.delete("/games/{game_id}")
def delete_game(game_id: str, request: Request):
    """Discard a game."""
    if not _manager(request).delete_session(game_id):
        raise HTTPException(status_code=404, detail=f"Game '{game_id}' not found")
    return {"deleted": True, "game_id": game_id}
