"""FastAPI dependency injection setup."""

from __future__ import annotations

import logging

from dicechess.api.session_manager import SessionManager

logger = logging.getLogger("dicechess.api")


def init_app(app, config: dict) -> None:
    """Initialize FastAPI app with a SessionManager built from config.

    Args:
        app: FastAPI application instance.
        config: Configuration dict with keys:
            - sessions.max_sessions: maximum concurrent games
            - dice.seed: master dice seed, or null for nondeterministic dice
    """
    sessions_cfg = config.get("sessions") or {}
    dice_cfg = config.get("dice") or {}

    manager = SessionManager(
        max_sessions=sessions_cfg.get("max_sessions", 100),
        seed=dice_cfg.get("seed"),
    )

    app.state.session_manager = manager
    logger.info(f"Dice Chess API initialized (max_sessions={manager.max_sessions}, "
                f"seeded={dice_cfg.get('seed') is not None})")
