"""Turn state machine: rolling -> moving -> rolling/gameover.

Every transition is a pure function from a GameState (plus the request) to
a new GameState. Requests that do not apply in the current state (rolling
twice, an illegal destination, a stale click after the game ended) return
the state unchanged rather than raising.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from dicechess.game.dice import RandomSource, roll_dice as _roll
from dicechess.game.rules import check_winner, get_legal_moves, has_any_legal_move
from dicechess.game.state import GameState, Square, TurnStatus

logger = logging.getLogger("dicechess.game")


def new_game() -> GameState:
    """Standard starting position, White to roll."""
    return GameState()


def reset_game() -> GameState:
    """Valid in any status; discards the current game entirely."""
    return new_game()


def _next_turn(state: GameState, **changes) -> GameState:
    """Hand the turn to the other player with dice and selection cleared."""
    return replace(
        state,
        turn=state.turn.other,
        status=TurnStatus.ROLLING,
        dice=(),
        selected=None,
        legal_moves=(),
        can_move=True,
        **changes,
    )


def _clear_selection(state: GameState) -> GameState:
    return replace(state, selected=None, legal_moves=())


def roll_dice(state: GameState, rng: RandomSource) -> GameState:
    """Roll for the player to move and enter the moving phase."""
    if state.status != TurnStatus.ROLLING:
        logger.debug(f"Ignoring roll in {state.status.value} status")
        return state

    dice = _roll(state.board, state.turn, rng)
    can_move = has_any_legal_move(state.board, state.turn, dice)
    if not can_move:
        logger.debug(f"{state.turn.label} has no legal move with "
                     f"{[t.label for t in dice]}")
    return replace(state, dice=dice, status=TurnStatus.MOVING, can_move=can_move,
                   selected=None, legal_moves=())


def select_square(state: GameState, square: Square) -> GameState:
    """Handle a click on ``square`` during the moving phase.

    - the selected square again: deselect
    - a legal destination of the selected piece: move there
    - an own piece whose type is on the dice: select it
    - anything else: clear the selection (no-op if nothing was selected)
    """
    if state.status != TurnStatus.MOVING:
        logger.debug(f"Ignoring selection in {state.status.value} status")
        return state

    if state.selected == square:
        return _clear_selection(state)

    if state.selected is not None and square in state.legal_moves:
        return move_to(state, square)

    piece = state.board.piece_at(square)
    if piece is not None and piece.player == state.turn and piece.piece_type in state.dice:
        legal = get_legal_moves(state.board, square, state.turn, state.dice)
        return replace(state, selected=square, legal_moves=tuple(legal))

    if state.selected is not None:
        return _clear_selection(state)
    return state


def move_to(state: GameState, square: Square) -> GameState:
    """Move the selected piece to ``square`` if it is a legal destination."""
    if state.status != TurnStatus.MOVING or state.selected is None:
        logger.debug("Ignoring move without an active selection")
        return state
    if square not in state.legal_moves:
        logger.debug(f"Ignoring move to {square}: not a legal destination")
        return state

    board = state.board.with_piece_moved(state.selected, square)

    winner = check_winner(board)
    if winner is not None:
        logger.info(f"{winner.label} captured the king, game over")
        return replace(state, board=board, status=TurnStatus.GAMEOVER, winner=winner,
                       selected=None, legal_moves=())

    return _next_turn(state, board=board)


def skip_turn(state: GameState) -> GameState:
    """Pass the turn. Only allowed when the dice leave no legal move."""
    if state.status != TurnStatus.MOVING or state.can_move:
        logger.debug("Ignoring skip: a legal move is available or not in moving status")
        return state
    return _next_turn(state)
