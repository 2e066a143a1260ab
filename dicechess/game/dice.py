"""Dice rolling: which piece types may move this turn.

Each die shows one of the piece types the rolling player still has on the
board, so a die never comes up with a type that cannot move at all.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from dicechess.game.state import Board, DiceSet, PieceType, Player

NUM_DICE = 3
# Fallback faces when the player has no pieces left
SIX_SIDED_DICE: tuple[PieceType, ...] = tuple(PieceType)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with random.Random's ``choice``."""

    def choice(self, seq: Sequence[T]) -> T: ...


def dice_pool(board: Board, turn: Player) -> list[PieceType]:
    """Faces the dice can show for ``turn``."""
    pool = board.piece_types(turn)
    # No pieces means the game should already be over
    return pool if pool else list(SIX_SIDED_DICE)


def roll_dice(board: Board, turn: Player, rng: RandomSource) -> DiceSet:
    """Roll NUM_DICE independent dice for ``turn``. Duplicates are expected.

    Args:
        board: Current position, used to find the player's surviving types.
        turn: Player rolling.
        rng: Random source, e.g. a seeded ``random.Random``.
    """
    pool = dice_pool(board, turn)
    return tuple(rng.choice(pool) for _ in range(NUM_DICE))
