"""Sliding move generation with blocking and capture."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .board import Board, lookup
from .constants import PieceType
from .piece import Piece
from .position import Position
from .rays import Rays, diagonal_rays, orthogonal_rays

MoveGenerator = Callable[[Piece, Board], list[Position]]


def limit_moves(piece: Piece, ray: Iterable[Position], board: Board) -> list[Position]:
    """Walk ``ray`` nearest-first and stop at the first occupied square.

    An enemy on that square is a capture and is kept; a friendly piece is not.
    """
    allowed: list[Position] = []
    for move in ray:
        in_the_way = lookup(move, board)
        if in_the_way is not None:
            if in_the_way.color != piece.color:
                allowed.append(move)
            break
        allowed.append(move)
    return allowed


def _limit_rays(piece: Piece, rays: Rays, board: Board) -> Rays:
    return {name: limit_moves(piece, ray, board) for name, ray in rays.items()}


def _flatten(rays: Rays) -> list[Position]:
    return [move for ray in rays.values() for move in ray]


def rook_moves(piece: Piece, board: Board) -> list[Position]:
    return _flatten(_limit_rays(piece, orthogonal_rays(piece.pos), board))


def bishop_moves(piece: Piece, board: Board) -> list[Position]:
    return _flatten(_limit_rays(piece, diagonal_rays(piece.pos), board))


MOVE_GENERATORS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_moves,
    PieceType.BISHOP: bishop_moves,
}

RAY_GENERATORS: dict[PieceType, Callable[[Position], Rays]] = {
    PieceType.ROOK: orthogonal_rays,
    PieceType.BISHOP: diagonal_rays,
}


def has_move_generator(kind: PieceType) -> bool:
    return kind in MOVE_GENERATORS


def generate_moves(piece: Piece, board: Board) -> list[Position]:
    if not has_move_generator(piece.kind):
        raise ValueError(f"No move generator for {piece.kind.name.lower()}")
    return MOVE_GENERATORS[piece.kind](piece, board)


def moves_by_direction(piece: Piece, board: Board) -> Rays:
    if not has_move_generator(piece.kind):
        raise ValueError(f"No move generator for {piece.kind.name.lower()}")
    return _limit_rays(piece, RAY_GENERATORS[piece.kind](piece.pos), board)


def captures(piece: Piece, moves: Iterable[Position], board: Board) -> list[Position]:
    result: list[Position] = []
    for move in moves:
        target = lookup(move, board)
        if target is not None and target.color != piece.color:
            result.append(move)
    return result
