"""Session manager: tracks active games."""

from __future__ import annotations

import logging
import random
import threading
import uuid
from typing import Optional

from dicechess.api.session import GameSession

logger = logging.getLogger("dicechess.api")


class SessionLimitError(Exception):
    """Raised when creating a game would exceed the configured maximum."""

    def __init__(self, max_sessions: int):
        self.max_sessions = max_sessions
        super().__init__(
            f"Maximum of {max_sessions} concurrent games reached. "
            "Delete a game before starting a new one."
        )


class SessionManager:
    """Creates and tracks GameSession instances.

    When ``seed`` is given, every session gets its own seed drawn from a
    master generator, so a server restarted with the same seed deals the
    same dice to its Nth game.
    """

    def __init__(self, max_sessions: int = 100, seed: Optional[int] = None):
        self.max_sessions = max_sessions
        self._seeds = random.Random(seed) if seed is not None else None

        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_session(self, seed: Optional[int] = None) -> GameSession:
        """Create a new game.

        Args:
            seed: Dice seed for this game. Overrides the manager's seed.

        Raises:
            SessionLimitError: If max_sessions games are already active.
        """
        game_id = uuid.uuid4().hex[:12]

        with self._lock:
            if len(self._sessions) >= self.max_sessions:
                raise SessionLimitError(self.max_sessions)
            if seed is None and self._seeds is not None:
                seed = self._seeds.getrandbits(32)
            session = GameSession(game_id, seed=seed)
            self._sessions[game_id] = session

        logger.info(f"Created game {game_id} (seed={seed})")
        return session

    def get_session(self, game_id: str) -> Optional[GameSession]:
        """Look up a game by ID. Returns None if not found."""
        return self._sessions.get(game_id)

    def delete_session(self, game_id: str) -> bool:
        """Remove a game. Returns True if found and deleted."""
        with self._lock:
            if game_id in self._sessions:
                del self._sessions[game_id]
                logger.info(f"Deleted game {game_id}")
                return True
        return False

    @property
    def active_session_count(self) -> int:
        return len(self._sessions)
