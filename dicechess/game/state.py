"""Game state representation for Dice Chess."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Mapping, Optional

from dicechess.game.board import (
    BOARD_SIZE, STARTING_POSITIONS, rc_to_notation, notation_to_rc, render_board,
)


class Player(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def other(self) -> Player:
        return Player(1 - self)

    @property
    def label(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    PAWN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5

    @property
    def label(self) -> str:
        return self.name.lower()


class TurnStatus(str, Enum):
    """Where the active player is in their turn."""
    ROLLING = "rolling"
    MOVING = "moving"
    GAMEOVER = "gameover"


# Map character codes to PieceType
PIECE_CHARS = {
    "P": PieceType.PAWN,
    "R": PieceType.ROOK,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
PIECE_NAMES = {v: k for k, v in PIECE_CHARS.items()}

# Three dice per roll; the empty tuple means "not rolled yet"
DiceSet = tuple[PieceType, ...]


@dataclass(frozen=True)
class Piece:
    piece_type: PieceType
    player: Player

    @property
    def char(self) -> str:
        return PIECE_NAMES[self.piece_type]


@dataclass(frozen=True, order=True)
class Square:
    """A board coordinate. Off-board values cannot be constructed."""
    row: int
    col: int

    def __post_init__(self):
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Square coordinates must be ints, got {value!r}")
            if not 0 <= value < BOARD_SIZE:
                raise ValueError(f"Square ({self.row}, {self.col}) is off the board")

    @classmethod
    def from_notation(cls, sq: str) -> Square:
        return cls(*notation_to_rc(sq))

    @property
    def notation(self) -> str:
        return rc_to_notation(self.row, self.col)

    def __str__(self) -> str:
        return self.notation


class Board:
    """8x8 grid of optional pieces.

    Boards are never mutated once built: every "mutator" returns a new Board
    sharing the rows it did not touch.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: list[list[Optional[Piece]]]):
        self._rows = rows

    @classmethod
    def empty(cls) -> Board:
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def initial(cls) -> Board:
        """Standard chess starting arrangement."""
        placements = {
            Square(row, col): Piece(PIECE_CHARS[char], Player(player))
            for (row, col), (char, player) in STARTING_POSITIONS.items()
        }
        return cls.from_placements(placements)

    @classmethod
    def from_placements(cls, placements: Mapping[Square, Piece]) -> Board:
        rows: list[list[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for square, piece in placements.items():
            rows[square.row][square.col] = piece
        return cls(rows)

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self._rows[square.row][square.col]

    def get_piece_at(self, row: int, col: int) -> Optional[Piece]:
        """Get piece at position, or None for empty or off-board squares."""
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self._rows[row][col]
        return None

    def with_piece(self, square: Square, piece: Optional[Piece]) -> Board:
        """Return a new board with ``square`` set to ``piece`` (None clears it)."""
        rows = list(self._rows)
        row = list(rows[square.row])
        row[square.col] = piece
        rows[square.row] = row
        return Board(rows)

    def with_piece_moved(self, from_sq: Square, to_sq: Square) -> Board:
        """Relocate the piece at ``from_sq`` to ``to_sq``, overwriting any occupant.

        No legality checking happens here; callers validate first.
        """
        rows = list(self._rows)
        moving = rows[from_sq.row][from_sq.col]
        from_row = list(rows[from_sq.row])
        from_row[from_sq.col] = None
        rows[from_sq.row] = from_row
        to_row = from_row if to_sq.row == from_sq.row else list(rows[to_sq.row])
        to_row[to_sq.col] = moving
        rows[to_sq.row] = to_row
        return Board(rows)

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) for every occupied square, row-major."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._rows[row][col]
                if piece is not None:
                    yield Square(row, col), piece

    def find_king(self, player: Player) -> Optional[Square]:
        for square, piece in self.pieces():
            if piece.player == player and piece.piece_type == PieceType.KING:
                return square
        return None

    def piece_types(self, player: Player) -> list[PieceType]:
        """Distinct piece types ``player`` still has, in PieceType order."""
        return sorted({p.piece_type for _, p in self.pieces() if p.player == player})

    def rows(self) -> tuple[tuple[Optional[Piece], ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def to_display_board(self) -> list[list]:
        """Convert to the format expected by render_board."""
        display = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for square, piece in self.pieces():
            display[square.row][square.col] = (piece.char, int(piece.player))
        return display

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows() == other.rows()

    def __hash__(self):
        return hash(self.rows())

    def __repr__(self) -> str:
        return f"Board({len(list(self.pieces()))} pieces)"


@dataclass(frozen=True)
class GameState:
    """Complete game state for Dice Chess.

    Immutable: the turn state machine in ``dicechess.game.machine`` builds a
    new GameState for every transition.
    """
    board: Board = field(default_factory=Board.initial)
    turn: Player = Player.WHITE
    dice: DiceSet = ()
    status: TurnStatus = TurnStatus.ROLLING
    winner: Optional[Player] = None
    selected: Optional[Square] = None
    legal_moves: tuple[Square, ...] = ()
    can_move: bool = True

    @property
    def done(self) -> bool:
        return self.status == TurnStatus.GAMEOVER

    def render(self) -> str:
        return render_board(
            self.board.to_display_board(),
            turn=int(self.turn),
            dice=[PIECE_NAMES[t] for t in self.dice],
            highlights={(sq.row, sq.col) for sq in self.legal_moves},
        )

    def to_dict(self) -> dict:
        """JSON-safe representation used by the API and serialize()."""
        board_data = []
        for row in self.board.rows():
            row_data = []
            for cell in row:
                if cell is None:
                    row_data.append(None)
                else:
                    row_data.append({"type": cell.piece_type.label,
                                     "player": cell.player.label})
            board_data.append(row_data)

        return {
            "board": board_data,
            "turn": self.turn.label,
            "dice": [t.label for t in self.dice],
            "status": self.status.value,
            "winner": self.winner.label if self.winner is not None else None,
            "selected": self.selected.notation if self.selected is not None else None,
            "legal_moves": [sq.notation for sq in self.legal_moves],
            "can_move": self.can_move,
        }

    def serialize(self) -> str:
        """Serialize game state to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def deserialize(cls, data: str) -> GameState:
        """Deserialize game state from JSON string.

        Raises:
            ValueError: If the payload names an unknown piece, player or square.
        """
        d = json.loads(data)
        if len(d["board"]) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows")
        placements = {}
        for row, row_data in enumerate(d["board"]):
            if len(row_data) != BOARD_SIZE:
                raise ValueError(f"Board row {row} must have {BOARD_SIZE} cells")
            for col, cell in enumerate(row_data):
                if cell is not None:
                    placements[Square(row, col)] = Piece(
                        _parse_enum(PieceType, cell["type"]),
                        _parse_enum(Player, cell["player"]),
                    )
        winner = d.get("winner")
        selected = d.get("selected")
        return cls(
            board=Board.from_placements(placements),
            turn=_parse_enum(Player, d["turn"]),
            dice=tuple(_parse_enum(PieceType, t) for t in d.get("dice", [])),
            status=TurnStatus(d["status"]),
            winner=_parse_enum(Player, winner) if winner is not None else None,
            selected=Square.from_notation(selected) if selected is not None else None,
            legal_moves=tuple(Square.from_notation(sq) for sq in d.get("legal_moves", [])),
            can_move=bool(d.get("can_move", True)),
        )


def _parse_enum(enum_cls, name: str):
    try:
        return enum_cls[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__}: {name!r}") from None
