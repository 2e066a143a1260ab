"""Board constants, starting position, square notation, and text rendering."""

from __future__ import annotations

BOARD_SIZE = 8

# Starting positions: dict mapping (row, col) -> (piece_type_char, player)
# Black on rows 0-1 (top), White on rows 6-7 (bottom).
# Standard chess arrangement, queen on the d-file.
BACK_RANK = "RNBQKBNR"

STARTING_POSITIONS: dict[tuple[int, int], tuple[str, int]] = {}
for _col, _char in enumerate(BACK_RANK):
    STARTING_POSITIONS[(0, _col)] = (_char, 1)
    STARTING_POSITIONS[(1, _col)] = ("P", 1)
    STARTING_POSITIONS[(6, _col)] = ("P", 0)
    STARTING_POSITIONS[(7, _col)] = (_char, 0)
del _col, _char

# Pawn home rows and forward direction, indexed by player (0=White, 1=Black)
PAWN_HOME_ROW = (6, 1)
PAWN_DIRECTION = (-1, 1)

# Column labels for notation
COL_LABELS = "abcdefgh"
# Row labels for notation: row 0 is rank "8", row 7 is rank "1"
ROW_LABELS = "87654321"


def rc_to_notation(row: int, col: int) -> str:
    """Convert (row, col) to algebraic notation like 'e2'."""
    return COL_LABELS[col] + ROW_LABELS[row]


def notation_to_rc(sq: str) -> tuple[int, int]:
    """Convert algebraic notation like 'e2' to (row, col).

    Raises:
        ValueError: If the text is not a square on the board.
    """
    sq = sq.strip().lower()
    if len(sq) != 2 or sq[0] not in COL_LABELS or sq[1] not in ROW_LABELS:
        raise ValueError(f"Invalid square notation: {sq!r}")
    return (ROW_LABELS.index(sq[1]), COL_LABELS.index(sq[0]))


def render_board(board, turn: int | None = None, dice: list[str] | None = None,
                 highlights: set[tuple[int, int]] | None = None) -> str:
    """Render the board as a text string.

    Args:
        board: 8x8 list of lists. Each cell is None or (piece_type_char, player).
        turn: Optional player to move (0=White, 1=Black).
        dice: Optional rolled piece characters.
        highlights: Optional squares to mark as legal destinations.
    """
    lines = []

    if turn is not None:
        player_name = "White" if turn == 0 else "Black"
        lines.append(f"{player_name} to move")
    if dice:
        lines.append(f"Dice: {' '.join(dice)}")
    if turn is not None or dice:
        lines.append("")

    marks = highlights or set()

    lines.append("    a   b   c   d   e   f   g   h")
    lines.append("  +---+---+---+---+---+---+---+---+")

    for row in range(BOARD_SIZE):
        rank = ROW_LABELS[row]
        row_str = f"{rank} |"
        for col in range(BOARD_SIZE):
            cell = board[row][col]
            marked = (row, col) in marks
            if cell is not None:
                piece_char, player = cell
                # Lowercase for black, uppercase for white
                display = piece_char if player == 0 else piece_char.lower()
                if marked:
                    row_str += f"*{display}*|"
                else:
                    row_str += f" {display} |"
            else:
                if marked:
                    row_str += " * |"
                else:
                    row_str += "   |"
        row_str += f" {rank}"
        lines.append(row_str)
        lines.append("  +---+---+---+---+---+---+---+---+")

    lines.append("    a   b   c   d   e   f   g   h")

    return "\n".join(lines)
