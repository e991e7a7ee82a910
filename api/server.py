"""FastAPI server exposing board rendering and sliding move queries."""

from __future__ import annotations

from io import BytesIO
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field

from slidechess.board import Board, build_board, lookup
from slidechess.constants import parse_color, parse_piece_type
from slidechess.movegen import captures, generate_moves, moves_by_direction
from slidechess.piece import Piece
from slidechess.position import Position, parse_square, square_name
from slidechess.render import render_image, render_text

VERSION = "0.1.0"


class PieceModel(BaseModel):
    kind: str = Field(min_length=1, max_length=6)
    color: str = Field(default="dark")
    square: str = Field(min_length=2, max_length=2)


class MovesRequest(BaseModel):
    pieces: list[PieceModel] = Field(default_factory=list, max_length=64)
    square: str = Field(min_length=2, max_length=2)
    on_duplicate: Literal["first", "last", "reject"] = "last"


class BoardRequest(BaseModel):
    pieces: list[PieceModel] = Field(default_factory=list, max_length=64)
    select_from: str | None = Field(default=None, min_length=2, max_length=2)
    on_duplicate: Literal["first", "last", "reject"] = "last"


app = FastAPI(title="Slidechess API", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _to_piece(model: PieceModel) -> Piece:
    return Piece(
        kind=parse_piece_type(model.kind),
        pos=parse_square(model.square),
        color=parse_color(model.color),
    )


def _board_from_request(pieces: list[PieceModel], on_duplicate: str) -> Board:
    try:
        return build_board([_to_piece(p) for p in pieces], on_duplicate=on_duplicate)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _piece_at(board: Board, square: str) -> Piece:
    try:
        pos = parse_square(square)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    piece = lookup(pos, board)
    if piece is None:
        raise HTTPException(status_code=400, detail=f"No piece on {square_name(pos)}")
    return piece


def _moves_for(piece: Piece, board: Board) -> list[Position]:
    try:
        return generate_moves(piece, board)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _selection(payload: BoardRequest, board: Board) -> list[Position]:
    if payload.select_from is None:
        return []
    return _moves_for(_piece_at(board, payload.select_from), board)


def _names(squares: list[Position]) -> list[str]:
    return [square_name(pos) for pos in squares]


@app.get("/")
def root() -> dict[str, str]:
    return {"status": "ok", "service": "slidechess", "version": VERSION}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/moves")
def moves(payload: MovesRequest) -> dict:
    board = _board_from_request(payload.pieces, payload.on_duplicate)
    piece = _piece_at(board, payload.square)
    reachable = _moves_for(piece, board)
    return {
        "piece": {
            "kind": piece.kind.name.lower(),
            "color": piece.color.value,
            "square": square_name(piece.pos),
            "glyph": piece.glyph,
        },
        "moves": _names(reachable),
        "captures": _names(captures(piece, reachable, board)),
        "by_direction": {name: _names(ray) for name, ray in moves_by_direction(piece, board).items()},
    }


@app.post("/board")
def board_text(payload: BoardRequest) -> dict:
    board = _board_from_request(payload.pieces, payload.on_duplicate)
    selected = _selection(payload, board)
    return {
        "rows": render_text(board, selected).splitlines(),
        "selected": _names(selected),
    }


@app.post("/board.png")
def board_png(payload: BoardRequest) -> Response:
    board = _board_from_request(payload.pieces, payload.on_duplicate)
    selected = _selection(payload, board)
    buffer = BytesIO()
    render_image(board, selected).save(buffer, format="PNG")
    return Response(content=buffer.getvalue(), media_type="image/png")
