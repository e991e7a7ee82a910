"""Piece model placed on the board."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import Color, PieceType
from .position import Position, is_valid_pos, square_name


@dataclass(frozen=True, slots=True)
class Piece:
    kind: PieceType
    pos: Position
    color: Color

    @property
    def glyph(self) -> str:
        return self.kind.glyph(self.color)

    def __str__(self) -> str:
        where = square_name(self.pos) if is_valid_pos(self.pos) else str(self.pos)
        return f"{self.color.value} {self.kind.name.lower()} on {where}"
