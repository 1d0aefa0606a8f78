"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import Square, square_index

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot board that exclusively owns its :class:`Piece` records.

    Every stored piece's ``square`` always matches the slot it sits in.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[square_index(sq)]

    def __iter__(self) -> Iterator[Piece]:
        """Pieces in row-major square order."""
        return (p for p in self._squares if p is not None)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[square_index(sq)] is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own ``square``; the slot must be empty."""
        idx = square_index(piece.square)
        if self._squares[idx] is not None:
            raise ValueError(f"Square {piece.square} is already occupied")
        self._squares[idx] = piece

    def remove(self, sq: Square) -> Piece:
        """Take the piece off *sq* and return it."""
        idx = square_index(sq)
        piece = self._squares[idx]
        if piece is None:
            raise ValueError(f"No piece on {sq}")
        self._squares[idx] = None
        return piece

    def relocate(self, from_sq: Square, to_sq: Square) -> Piece:
        """Move the piece on *from_sq* to the empty square *to_sq*."""
        piece = self.remove(from_sq)
        piece.square = to_sq
        self.place(piece)
        return piece

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, kind: PieceType) -> list[Piece]:
        """*color*'s pieces of *kind*."""
        return [p for p in self if p.color == color and p.kind == kind]

    def all_pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color*."""
        return [p for p in self if p.color == color]

    def count(self, kind: PieceType) -> int:
        """Number of pieces of *kind* for both sides together."""
        return sum(1 for p in self if p.kind == kind)

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for piece in self:
            if piece.kind == PieceType.KING and piece.color == color:
                return piece.square
        raise ValueError(f"No {color.name} king on board")

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent copy; piece records are duplicated, not shared."""
        b = Board()
        b._squares = [p.copy() if p is not None else None for p in self._squares]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b.place(Piece(PieceType.PAWN, Color.BLACK, (1, col)))
            b.place(Piece(PieceType.PAWN, Color.WHITE, (6, col)))

        for col, kind in enumerate(_BACK_RANK):
            b.place(Piece(kind, Color.BLACK, (0, col)))
            b.place(Piece(kind, Color.WHITE, (7, col)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
