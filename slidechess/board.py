"""Occupancy snapshot built from a list of pieces."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Literal

from .piece import Piece
from .position import Position, is_valid_pos

Board = Mapping[Position, Piece]
DuplicatePolicy = Literal["first", "last", "reject"]

DUPLICATE_POLICIES = ("first", "last", "reject")


def build_board(pieces: Iterable[Piece], on_duplicate: DuplicatePolicy = "last") -> Board:
    """Map each piece's position to the piece.

    Two pieces on one square are resolved by ``on_duplicate``: ``"last"``
    keeps the later piece, ``"first"`` the earlier one and ``"reject"``
    raises ``ValueError``.
    """
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ValueError(f"Invalid duplicate policy: {on_duplicate}")

    table: dict[Position, Piece] = {}
    for piece in pieces:
        if not is_valid_pos(piece.pos):
            raise ValueError(f"Piece off the board: {piece}")
        if piece.pos in table:
            if on_duplicate == "reject":
                raise ValueError(f"Square already occupied: {table[piece.pos]} and {piece}")
            if on_duplicate == "first":
                continue
        table[piece.pos] = piece
    return MappingProxyType(table)


def lookup(pos: Position, board: Board) -> Piece | None:
    return board.get(pos)
