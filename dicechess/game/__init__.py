"""Dice Chess game engine: state, rules, dice, turn state machine."""

from dicechess.game.state import (
    GameState, Player, PieceType, Piece, Square, Board, TurnStatus, DiceSet,
)
from dicechess.game.rules import (
    is_square_attacked, is_legal_move, get_legal_moves, generate_legal_moves,
    has_any_legal_move, check_winner,
)
from dicechess.game.dice import roll_dice
from dicechess.game.board import STARTING_POSITIONS, render_board
from dicechess.game import machine

__all__ = [
    "GameState", "Player", "PieceType", "Piece", "Square", "Board", "TurnStatus", "DiceSet",
    "is_square_attacked", "is_legal_move", "get_legal_moves", "generate_legal_moves",
    "has_any_legal_move", "check_winner", "roll_dice",
    "STARTING_POSITIONS", "render_board", "machine",
]
