"""Board geometry, colours and the piece catalogue."""

from __future__ import annotations

from enum import Enum

BOARD_SIZE = 8
MIN_COORD = 0
MAX_COORD = BOARD_SIZE - 1

# x runs a..h left to right, y runs from the top row (rank 8) down.
FILES = "abcdefgh"
RANKS = "87654321"


class Color(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class PieceType(Enum):
    ROOK = ("R", "♖", "♜")
    KNIGHT = ("N", "♘", "♞")
    BISHOP = ("B", "♗", "♝")
    QUEEN = ("Q", "♕", "♛")
    KING = ("K", "♔", "♚")
    PAWN = ("P", "♙", "♟")

    def __init__(self, symbol: str, light: str, dark: str) -> None:
        self.symbol = symbol
        self.glyphs = {Color.LIGHT: light, Color.DARK: dark}

    def glyph(self, color: Color) -> str:
        return self.glyphs[color]


def opposite(color: Color) -> Color:
    return Color.DARK if color is Color.LIGHT else Color.LIGHT


def parse_color(name: str) -> Color:
    try:
        return Color(name.strip().lower())
    except ValueError as exc:
        raise ValueError(f"Invalid color: {name}") from exc


def parse_piece_type(name: str) -> PieceType:
    key = name.strip().upper()
    for kind in PieceType:
        if key in (kind.name, kind.symbol):
            return kind
    raise ValueError(f"Invalid piece type: {name}")
