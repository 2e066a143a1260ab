"""Shared test fixtures: scripted dice and board builders."""

import pytest

from dicechess.game.state import Board, Piece, PieceType, Player, Square


class ScriptedDice:
    """Random source that hands out pre-chosen faces in order.

    ``choice`` ignores the pool it is given, so tests can force any roll.
    """

    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return self.faces.pop(0)


def sq(notation: str) -> Square:
    return Square.from_notation(notation)


def build_board(placements: dict) -> Board:
    """Board from {"e1": "K", "e8": "k", ...}; uppercase White, lowercase Black."""
    chars = {"P": PieceType.PAWN, "R": PieceType.ROOK, "N": PieceType.KNIGHT,
             "B": PieceType.BISHOP, "Q": PieceType.QUEEN, "K": PieceType.KING}
    pieces = {}
    for notation, char in placements.items():
        player = Player.WHITE if char.isupper() else Player.BLACK
        pieces[sq(notation)] = Piece(chars[char.upper()], player)
    return Board.from_placements(pieces)


@pytest.fixture
def scripted_dice():
    return ScriptedDice


@pytest.fixture
def lone_kings():
    return build_board({"e1": "K", "e8": "k"})
