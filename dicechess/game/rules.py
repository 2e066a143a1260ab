"""Attack detection, move legality, legal-move enumeration, win condition.

Dice Chess: standard chess piece movement, restricted each turn to the piece
types shown on the dice. No castling, en passant, or promotion. A move is
vetoed only if it would leave the mover's own king attacked; there is no
check or checkmate, the game ends when a king is captured.
"""

from __future__ import annotations

from typing import Collection, Iterator, Optional

from dicechess.game.board import BOARD_SIZE, PAWN_DIRECTION, PAWN_HOME_ROW
from dicechess.game.state import Board, Piece, PieceType, Player, Square

# Orthogonal directions
ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_DIRS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
# All 8 directions
ALL_DIRS = ORTHOGONAL + DIAGONAL_DIRS
KNIGHT_OFFSETS = [(-2, -1), (-2, 1), (-1, -2), (-1, 2),
                  (1, -2), (1, 2), (2, -1), (2, 1)]

_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)


def _in_bounds(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def _is_enemy(piece: Optional[Piece], player: Player) -> bool:
    return piece is not None and piece.player != player


def is_square_attacked(board: Board, square: Square, defender: Player) -> bool:
    """Check if any piece of ``defender``'s opponent attacks ``square``.

    Checks outward from the target square along attack patterns. Only reads
    ``board``; callers pass a simulated board to test a candidate move.
    """
    tr, tc = square.row, square.col

    for dr, dc in ALL_DIRS:
        # Kings may not stand next to each other
        p = board.get_piece_at(tr + dr, tc + dc)
        if _is_enemy(p, defender) and p.piece_type == PieceType.KING:
            return True

        # Sliding attackers: first occupied square on the ray blocks the rest
        sliders = _ORTHOGONAL_SLIDERS if dr == 0 or dc == 0 else _DIAGONAL_SLIDERS
        r, c = tr + dr, tc + dc
        while _in_bounds(r, c):
            p = board.get_piece_at(r, c)
            if p is not None:
                if p.player != defender and p.piece_type in sliders:
                    return True
                break
            r += dr
            c += dc

    for dr, dc in KNIGHT_OFFSETS:
        p = board.get_piece_at(tr + dr, tc + dc)
        if _is_enemy(p, defender) and p.piece_type == PieceType.KNIGHT:
            return True

    # Enemy pawns capture toward the defender, so they sit one row "ahead"
    # of the target from the defender's point of view.
    pawn_row = tr + PAWN_DIRECTION[defender]
    for dc in (-1, 1):
        p = board.get_piece_at(pawn_row, tc + dc)
        if _is_enemy(p, defender) and p.piece_type == PieceType.PAWN:
            return True

    return False


def _is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """True if every square strictly between the endpoints is empty."""
    dr = (to_sq.row > from_sq.row) - (to_sq.row < from_sq.row)
    dc = (to_sq.col > from_sq.col) - (to_sq.col < from_sq.col)
    r, c = from_sq.row + dr, from_sq.col + dc
    while (r, c) != (to_sq.row, to_sq.col):
        if board.get_piece_at(r, c) is not None:
            return False
        r += dr
        c += dc
    return True


def _is_geometry_legal(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Per-type movement rules, ignoring dice and king safety."""
    dy = to_sq.row - from_sq.row
    dx = to_sq.col - from_sq.col
    abs_dy, abs_dx = abs(dy), abs(dx)
    target = board.piece_at(to_sq)
    pt = piece.piece_type

    if pt == PieceType.PAWN:
        direction = PAWN_DIRECTION[piece.player]
        # Forward move (non-capture only)
        if dx == 0 and dy == direction:
            return target is None
        # Double step from the home row, both squares empty
        if dx == 0 and dy == 2 * direction:
            return (from_sq.row == PAWN_HOME_ROW[piece.player]
                    and target is None
                    and board.get_piece_at(from_sq.row + direction, from_sq.col) is None)
        # Diagonal-forward capture
        if abs_dx == 1 and dy == direction:
            return target is not None
        return False

    if pt == PieceType.ROOK:
        if dy != 0 and dx != 0:
            return False
        return _is_path_clear(board, from_sq, to_sq)

    if pt == PieceType.KNIGHT:
        return (abs_dy == 2 and abs_dx == 1) or (abs_dy == 1 and abs_dx == 2)

    if pt == PieceType.BISHOP:
        if abs_dy != abs_dx:
            return False
        return _is_path_clear(board, from_sq, to_sq)

    if pt == PieceType.QUEEN:
        if dy != 0 and dx != 0 and abs_dy != abs_dx:
            return False
        return _is_path_clear(board, from_sq, to_sq)

    if pt == PieceType.KING:
        return abs_dy <= 1 and abs_dx <= 1

    return False


def would_expose_king(board: Board, from_sq: Square, to_sq: Square, turn: Player) -> bool:
    """Check if moving from_sq -> to_sq leaves ``turn``'s king attacked.

    The move is simulated on a copy; ``board`` itself is untouched. A player
    with no king on the board has nothing to expose.
    """
    piece = board.piece_at(from_sq)
    if piece is not None and piece.piece_type == PieceType.KING:
        king_sq = to_sq
    else:
        king_sq = board.find_king(turn)
        if king_sq is None:
            return False

    simulated = board.with_piece_moved(from_sq, to_sq)
    return is_square_attacked(simulated, king_sq, turn)


def is_legal_move(board: Board, from_sq: Square, to_sq: Square, turn: Player,
                  unlocked: Collection[PieceType]) -> bool:
    """Check if ``turn`` may move the piece on from_sq to to_sq this turn.

    Args:
        board: Current position.
        from_sq: Origin square.
        to_sq: Destination square.
        turn: Player to move.
        unlocked: Piece types shown on the dice.
    """
    piece = board.piece_at(from_sq)
    if piece is None or piece.player != turn:
        return False
    if piece.piece_type not in unlocked:
        return False

    target = board.piece_at(to_sq)
    if target is not None and target.player == turn:
        return False  # Cannot capture own piece

    if not _is_geometry_legal(board, piece, from_sq, to_sq):
        return False

    return not would_expose_king(board, from_sq, to_sq, turn)


def _all_squares() -> Iterator[Square]:
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


def get_legal_moves(board: Board, from_sq: Square, turn: Player,
                    unlocked: Collection[PieceType]) -> list[Square]:
    """All legal destinations for the piece on from_sq, row-major."""
    return [to_sq for to_sq in _all_squares()
            if is_legal_move(board, from_sq, to_sq, turn, unlocked)]


def _movable_origins(board: Board, turn: Player,
                     unlocked: Collection[PieceType]) -> Iterator[Square]:
    for square, piece in board.pieces():
        if piece.player == turn and piece.piece_type in unlocked:
            yield square


def generate_legal_moves(board: Board, turn: Player,
                         unlocked: Collection[PieceType]) -> list[tuple[Square, Square]]:
    """Generate all legal (from, to) pairs for ``turn`` under the given dice."""
    moves = []
    for from_sq in _movable_origins(board, turn, unlocked):
        for to_sq in get_legal_moves(board, from_sq, turn, unlocked):
            moves.append((from_sq, to_sq))
    return moves


def has_any_legal_move(board: Board, turn: Player,
                       unlocked: Collection[PieceType]) -> bool:
    """True as soon as one legal move is found. False means a forced skip."""
    for from_sq in _movable_origins(board, turn, unlocked):
        for to_sq in _all_squares():
            if is_legal_move(board, from_sq, to_sq, turn, unlocked):
                return True
    return False


def check_winner(board: Board) -> Optional[Player]:
    """Return the winner if a king has been captured, else None."""
    white_king = board.find_king(Player.WHITE) is not None
    black_king = board.find_king(Player.BLACK) is not None
    if not white_king:
        return Player.BLACK
    if not black_king:
        return Player.WHITE
    return None
