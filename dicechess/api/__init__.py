"""Dice Chess REST API: session-based interface for hot-seat games."""

from dicechess.api.session import GameSession
from dicechess.api.session_manager import SessionManager, SessionLimitError

__all__ = [
    "GameSession",
    "SessionManager",
    "SessionLimitError",
]
