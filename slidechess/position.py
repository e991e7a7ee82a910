"""Board coordinates and square naming."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import FILES, MAX_COORD, MIN_COORD, RANKS, Color


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def is_valid_pos(pos: Position) -> bool:
    return MIN_COORD <= pos.x <= MAX_COORD and MIN_COORD <= pos.y <= MAX_COORD


def square_name(pos: Position) -> str:
    if not is_valid_pos(pos):
        raise ValueError(f"Position off the board: {pos}")
    return f"{FILES[pos.x]}{RANKS[pos.y]}"


def parse_square(name: str) -> Position:
    square = name.strip().lower()
    if len(square) != 2 or square[0] not in FILES or square[1] not in RANKS:
        raise ValueError(f"Invalid square: {name}")
    return Position(FILES.index(square[0]), RANKS.index(square[1]))


def tile_color(pos: Position) -> Color:
    return Color.LIGHT if (pos.x + pos.y) % 2 == 0 else Color.DARK
