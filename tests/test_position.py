import pytest

from slidechess.constants import Color, PieceType, opposite, parse_color, parse_piece_type
from slidechess.position import Position, is_valid_pos, parse_square, square_name, tile_color


def test_is_valid_pos_matches_board_bounds() -> None:
    for x in range(-2, 10):
        for y in range(-2, 10):
            expected = 0 <= x <= 7 and 0 <= y <= 7
            assert is_valid_pos(Position(x, y)) == expected


def test_square_names_use_top_row_as_rank_8() -> None:
    assert square_name(Position(0, 0)) == "a8"
    assert square_name(Position(2, 1)) == "c7"
    assert square_name(Position(6, 5)) == "g3"
    assert square_name(Position(7, 7)) == "h1"


def test_parse_square_inverts_square_name() -> None:
    assert parse_square("c7") == Position(2, 1)
    assert parse_square(" H1 ") == Position(7, 7)


@pytest.mark.parametrize("name", ["", "i1", "a9", "a0", "c77", "7c"])
def test_parse_square_rejects_bad_names(name: str) -> None:
    with pytest.raises(ValueError):
        parse_square(name)


def test_square_name_rejects_off_board() -> None:
    with pytest.raises(ValueError, match="off the board"):
        square_name(Position(8, 0))


def test_tile_colors() -> None:
    assert tile_color(Position(0, 7)) is Color.DARK  # a1
    assert tile_color(Position(7, 7)) is Color.LIGHT  # h1
    assert tile_color(Position(0, 0)) is Color.LIGHT  # a8


def test_offset_can_leave_the_board() -> None:
    pos = Position(0, 0).offset(-1, 2)
    assert pos == Position(-1, 2)
    assert not is_valid_pos(pos)


def test_piece_catalogue_glyphs() -> None:
    assert PieceType.ROOK.glyph(Color.LIGHT) == "♖"
    assert PieceType.ROOK.glyph(Color.DARK) == "♜"
    assert PieceType.PAWN.glyph(Color.DARK) == "♟"
    assert [kind.symbol for kind in PieceType] == ["R", "N", "B", "Q", "K", "P"]


def test_parse_helpers() -> None:
    assert parse_piece_type("rook") is PieceType.ROOK
    assert parse_piece_type("B") is PieceType.BISHOP
    assert parse_color("Light") is Color.LIGHT
    assert opposite(Color.LIGHT) is Color.DARK
    assert opposite(Color.DARK) is Color.LIGHT

    with pytest.raises(ValueError, match="Invalid piece type"):
        parse_piece_type("archbishop")
    with pytest.raises(ValueError, match="Invalid color"):
        parse_color("white")
