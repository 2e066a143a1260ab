"""Game session: one Dice Chess game behind a single-writer lock.

GameSession is the pure-Python core of the API with no HTTP dependency.
Each request reads the current GameState, runs one machine transition and
stores the result while holding the session lock, so concurrent requests
for the same game are applied one at a time.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Optional

from dicechess.game import machine
from dicechess.game.rules import generate_legal_moves
from dicechess.game.state import GameState, Square, TurnStatus

logger = logging.getLogger("dicechess.api")


class GameSession:
    """A single hot-seat game and the dice source it rolls with."""

    def __init__(self, game_id: str, seed: Optional[int] = None):
        self.game_id = game_id
        self.seed = seed
        self._rng = random.Random(seed)
        self._state = machine.new_game()
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        return self._state

    def _apply(self, transition: Callable[[GameState], GameState]) -> tuple[GameState, bool]:
        with self._lock:
            before = self._state
            after = transition(before)
            self._state = after
        changed = after is not before
        if changed and after.status == TurnStatus.GAMEOVER and before.status != TurnStatus.GAMEOVER:
            logger.info(f"Game {self.game_id} won by {after.winner.label}")
        return after, changed

    def roll(self) -> tuple[GameState, bool]:
        return self._apply(lambda s: machine.roll_dice(s, self._rng))

    def select(self, square: Square) -> tuple[GameState, bool]:
        return self._apply(lambda s: machine.select_square(s, square))

    def move(self, square: Square) -> tuple[GameState, bool]:
        return self._apply(lambda s: machine.move_to(s, square))

    def skip(self) -> tuple[GameState, bool]:
        return self._apply(machine.skip_turn)

    def reset(self) -> tuple[GameState, bool]:
        state, _ = self._apply(lambda s: machine.reset_game())
        logger.info(f"Game {self.game_id} reset")
        return state, True

    def legal_moves(self) -> list[tuple[Square, Square]]:
        """Every legal (from, to) pair for the player to move, if dice are rolled."""
        state = self._state
        if state.status != TurnStatus.MOVING:
            return []
        return generate_legal_moves(state.board, state.turn, state.dice)

    def snapshot(self) -> dict:
        state = self._state
        return {**state.to_dict(), "render": state.render()}
