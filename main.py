"""Command-line utilities for sliding move queries."""

from __future__ import annotations

import argparse
from pathlib import Path

from slidechess.board import Board, build_board, lookup
from slidechess.constants import Color, PieceType, parse_color, parse_piece_type
from slidechess.movegen import captures, generate_moves
from slidechess.piece import Piece
from slidechess.position import Position, parse_square, square_name
from slidechess.render import render_image, render_text, save_image

SAMPLE_PIECES = (
    Piece(PieceType.ROOK, Position(2, 1), Color.DARK),
    Piece(PieceType.PAWN, Position(6, 5), Color.DARK),
)


def parse_piece(spec: str) -> Piece:
    """Parse ``KIND:COLOR:SQUARE``, e.g. ``rook:dark:c7``."""
    parts = spec.split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid piece spec: {spec} (expected KIND:COLOR:SQUARE)")
    kind, color, square = parts
    return Piece(parse_piece_type(kind), parse_square(square), parse_color(color))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sliding piece move utilities")
    parser.add_argument(
        "--piece",
        action="append",
        default=[],
        metavar="KIND:COLOR:SQUARE",
        help="Piece to place, repeatable (default: sample rook c7 and pawn g3)",
    )
    parser.add_argument(
        "--on-duplicate",
        choices=("first", "last", "reject"),
        default="last",
        help="How to resolve two pieces on one square",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    board_parser = subparsers.add_parser("board", help="Print the board")
    board_parser.add_argument("--select", help="Highlight the moves of the piece on this square")

    moves_parser = subparsers.add_parser("moves", help="List moves of a piece")
    moves_parser.add_argument("square", help="Square of the piece to move")

    render_parser = subparsers.add_parser("render", help="Write the board as a PNG")
    render_parser.add_argument("--output", required=True, help="Output PNG path")
    render_parser.add_argument("--select", help="Highlight the moves of the piece on this square")

    return parser


def _moves_from(board: Board, square: str) -> tuple[Piece, list[Position]]:
    pos = parse_square(square)
    piece = lookup(pos, board)
    if piece is None:
        raise ValueError(f"No piece on {square_name(pos)}")
    return piece, generate_moves(piece, board)


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        pieces = [parse_piece(spec) for spec in args.piece] if args.piece else list(SAMPLE_PIECES)
        board = build_board(pieces, on_duplicate=args.on_duplicate)

        select = getattr(args, "select", None)
        if select is None and not args.piece and args.command in (None, "board"):
            select = square_name(SAMPLE_PIECES[0].pos)

        if args.command == "moves":
            piece, moves = _moves_from(board, args.square)
            taken = set(captures(piece, moves, board))
            for move in moves:
                print(f"{square_name(move)}{'x' if move in taken else ''}")
            return

        selected = _moves_from(board, select)[1] if select else []

        if args.command == "render":
            output = Path(args.output)
            save_image(render_image(board, selected), output)
            print(f"wrote {output}")
            return
    except ValueError as exc:
        parser.error(str(exc))

    print(render_text(board, selected))


if __name__ == "__main__":
    run()
