"""Text and Pillow renderings of a board with highlighted squares."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .board import Board, lookup
from .constants import BOARD_SIZE, FILES, RANKS, Color
from .position import Position, tile_color

CELL = 62
MARGIN = 28

COLORS = {
    "bg": "#161616",
    "light": "#f0d9b5",
    "dark": "#b58863",
    "text": "#e6e2d8",
    "gold": "#c6a25a",
    "selected": "#c56e5d",
}

PIECE_FILL = {
    Color.LIGHT: ("#f8f6f2", "#5c5c5c"),
    Color.DARK: ("#1f1f1f", "#d8d3c8"),
}


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for family in ("DejaVuSans.ttf", "/System/Library/Fonts/Supplemental/Arial.ttf", "/Library/Fonts/Arial.ttf"):
        try:
            return ImageFont.truetype(family, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def _centered_text(
    draw: ImageDraw.ImageDraw,
    center: tuple[int, int],
    text: str,
    fill: str,
    font: ImageFont.FreeTypeFont | ImageFont.ImageFont,
) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    cx, cy = center
    draw.text((cx - (right - left) / 2 - left, cy - (bottom - top) / 2 - top), text, fill=fill, font=font)


def _cell_text(pos: Position, board: Board, selected: set[Position]) -> str:
    piece = lookup(pos, board)
    if piece is None:
        return "*" if pos in selected else "."
    return "x" if pos in selected else piece.glyph


def render_text(board: Board, selected: Iterable[Position] = ()) -> str:
    """Draw the board top row first with rank labels and a file footer.

    Empty squares are ``.``, highlighted empty squares ``*`` and highlighted
    occupied squares ``x``.
    """
    marked = set(selected)
    rows = []
    for y in range(BOARD_SIZE):
        cells = [_cell_text(Position(x, y), board, marked) for x in range(BOARD_SIZE)]
        rows.append(f"{RANKS[y]} " + " ".join(cells))
    rows.append("  " + " ".join(FILES))
    return "\n".join(rows)


def render_image(board: Board, selected: Iterable[Position] = (), cell: int = CELL) -> Image.Image:
    marked = set(selected)
    size = BOARD_SIZE * cell + 2 * MARGIN
    img = Image.new("RGB", (size, size), COLORS["bg"])
    draw = ImageDraw.Draw(img)
    label_font = _font(max(10, cell // 4))
    piece_font = _font(max(12, cell * 2 // 5))

    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            pos = Position(x, y)
            left = MARGIN + x * cell
            top = MARGIN + y * cell
            draw.rectangle((left, top, left + cell, top + cell), fill=COLORS[tile_color(pos).value])
            if pos in marked:
                draw.rectangle((left + 4, top + 4, left + cell - 4, top + cell - 4), outline=COLORS["gold"], width=3)

            piece = lookup(pos, board)
            if piece is None:
                continue
            fill, outline = PIECE_FILL[piece.color]
            cx, cy = left + cell // 2, top + cell // 2
            r = cell // 2 - 8
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=fill, outline=outline, width=2)
            _centered_text(draw, (cx, cy), piece.kind.symbol, outline, piece_font)

    for i in range(BOARD_SIZE):
        offset = MARGIN + i * cell + cell // 2
        _centered_text(draw, (MARGIN // 2, offset), RANKS[i], COLORS["text"], label_font)
        _centered_text(draw, (offset, size - MARGIN // 2), FILES[i], COLORS["text"], label_font)

    return img


def save_image(img: Image.Image, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
