"""Tests for the dice resolver."""

import random

from dicechess.game.state import Board, Player, PieceType
from dicechess.game.dice import NUM_DICE, SIX_SIDED_DICE, dice_pool, roll_dice

from conftest import ScriptedDice, build_board


class TestDicePool:
    def test_full_army_has_all_types(self):
        assert dice_pool(Board.initial(), Player.WHITE) == list(PieceType)
        assert dice_pool(Board.initial(), Player.BLACK) == list(PieceType)

    def test_pool_shrinks_with_captures(self):
        board = build_board({"e1": "K", "a2": "P", "h2": "P", "e8": "k", "d8": "q"})
        assert dice_pool(board, Player.WHITE) == [PieceType.PAWN, PieceType.KING]
        assert dice_pool(board, Player.BLACK) == [PieceType.QUEEN, PieceType.KING]

    def test_fallback_without_pieces(self):
        board = build_board({"e8": "k"})
        assert dice_pool(board, Player.WHITE) == list(SIX_SIDED_DICE)


class TestRollDice:
    def test_three_dice(self):
        dice = roll_dice(Board.initial(), Player.WHITE, random.Random(0))
        assert len(dice) == NUM_DICE == 3
        assert all(isinstance(d, PieceType) for d in dice)

    def test_uses_injected_source(self):
        rng = ScriptedDice([PieceType.PAWN, PieceType.PAWN, PieceType.ROOK])
        board = build_board({"e1": "K", "a2": "P", "e8": "k"})
        dice = roll_dice(board, Player.WHITE, rng)
        assert dice == (PieceType.PAWN, PieceType.PAWN, PieceType.ROOK)
        # Each die is drawn from the player's surviving types
        assert rng.calls == [[PieceType.PAWN, PieceType.KING]] * 3

    def test_duplicates_allowed(self):
        rng = ScriptedDice([PieceType.KING] * 3)
        dice = roll_dice(Board.initial(), Player.BLACK, rng)
        assert dice == (PieceType.KING, PieceType.KING, PieceType.KING)

    def test_seeded_rolls_reproducible(self):
        board = Board.initial()
        rng_a, rng_b = random.Random(42), random.Random(42)
        first = [roll_dice(board, Player.WHITE, rng_a) for _ in range(5)]
        second = [roll_dice(board, Player.WHITE, rng_b) for _ in range(5)]
        assert first == second

    def test_only_surviving_types_rolled(self):
        board = build_board({"e1": "K", "b1": "N", "e8": "k"})
        rng = random.Random(123)
        for _ in range(50):
            dice = roll_dice(board, Player.WHITE, rng)
            assert set(dice) <= {PieceType.KNIGHT, PieceType.KING}
