"""Square type alias and coordinate helpers.

Board layout (screen order, row 0 at the top):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

White starts on rows 6-7 and advances toward row 0.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    if not is_on_board(row, col):
        raise ValueError(f"Square off the board: ({row}, {col})")
    return (row, col)


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def square_index(sq: Square) -> int:
    """Flat 0–63 index, row-major."""
    return sq[0] * 8 + sq[1]


def square_from_index(index: int) -> Square:
    return divmod(index, 8)


def square_shade(sq: Square) -> int:
    """Square-color parity: 0 for light squares, 1 for dark."""
    return (sq[0] + sq[1]) % 2


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple((r, c) for r in range(8) for c in range(8))

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
