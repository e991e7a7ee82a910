from slidechess.board import build_board
from slidechess.constants import BOARD_SIZE, Color, PieceType
from slidechess.movegen import rook_moves
from slidechess.piece import Piece
from slidechess.position import Position
from slidechess.render import MARGIN, render_image, render_text, save_image


def _sample_board():
    rook = Piece(PieceType.ROOK, Position(2, 1), Color.DARK)
    pawn = Piece(PieceType.PAWN, Position(6, 5), Color.DARK)
    return rook, build_board([rook, pawn])


def test_render_text_plain_board() -> None:
    _, board = _sample_board()
    lines = render_text(board).splitlines()
    assert len(lines) == 9
    assert lines[0] == "8 . . . . . . . ."
    assert lines[1] == "7 . . ♜ . . . . ."
    assert lines[5] == "3 . . . . . . ♟ ."
    assert lines[-1] == "  a b c d e f g h"


def test_render_text_marks_selected_squares() -> None:
    rook, board = _sample_board()
    lines = render_text(board, rook_moves(rook, board)).splitlines()
    assert lines[0] == "8 . . * . . . . ."
    assert lines[1] == "7 * * ♜ * * * * *"
    assert lines[5] == "3 . . * . . . ♟ ."
    assert lines[7] == "1 . . * . . . . ."


def test_render_text_marks_captures() -> None:
    rook = Piece(PieceType.ROOK, Position(0, 7), Color.LIGHT)
    target = Piece(PieceType.QUEEN, Position(0, 0), Color.DARK)
    board = build_board([rook, target])
    lines = render_text(board, rook_moves(rook, board)).splitlines()
    assert lines[0].startswith("8 x")
    assert lines[7].startswith("1 ♖ *")


def test_render_image_size_and_tiles(tmp_path) -> None:
    rook, board = _sample_board()
    img = render_image(board, rook_moves(rook, board), cell=40)
    size = BOARD_SIZE * 40 + 2 * MARGIN
    assert img.size == (size, size)
    assert img.mode == "RGB"
    # a8 is a light square, b8 a dark one.
    assert img.getpixel((MARGIN + 20, MARGIN + 20)) != img.getpixel((MARGIN + 60, MARGIN + 20))

    out = tmp_path / "nested" / "board.png"
    save_image(img, out)
    assert out.read_bytes().startswith(b"\x89PNG")
