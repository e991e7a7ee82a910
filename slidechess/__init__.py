"""Sliding-piece move generation for a minimal 8x8 board."""

from .board import Board, build_board, lookup
from .constants import Color, PieceType
from .movegen import bishop_moves, generate_moves, rook_moves
from .piece import Piece
from .position import Position, is_valid_pos

__all__ = [
    "Board",
    "Color",
    "Piece",
    "PieceType",
    "Position",
    "bishop_moves",
    "build_board",
    "generate_moves",
    "is_valid_pos",
    "lookup",
    "rook_moves",
]
