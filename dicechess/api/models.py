"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class CreateGameRequest(BaseModel):
    """Create a new game."""
    seed: Optional[int] = Field(None, description="Dice seed for a reproducible game")


class SquareRequest(BaseModel):
    """Select or move to a square in algebraic notation."""
    square: str = Field(..., pattern=r"^[a-hA-H][1-8]$", description="Square such as 'e2'")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class CreateGameResponse(BaseModel):
    """Response from game creation."""
    game_id: str
    game_state: dict


class GameStateResponse(BaseModel):
    """Full game state."""
    game_id: str
    game_state: dict


class ActionResponse(BaseModel):
    """Result of roll/select/move/skip/reset.

    ``changed`` is False when the request did not apply in the current
    state, e.g. rolling twice or moving to an illegal square.
    """
    game_id: str
    changed: bool
    game_state: dict


class LegalMove(BaseModel):
    from_square: str
    to_square: str


class LegalMovesResponse(BaseModel):
    """All legal moves for the player to move."""
    game_id: str
    moves: list[LegalMove]
    total: int
