"""API smoke tests for the board and move endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from api.server import app


client = TestClient(app)

SAMPLE = [
    {"kind": "rook", "color": "dark", "square": "c7"},
    {"kind": "pawn", "color": "dark", "square": "g3"},
]


def test_root_and_health() -> None:
    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["status"] == "ok"

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}


def test_moves_for_sample_rook() -> None:
    response = client.post("/moves", json={"pieces": SAMPLE, "square": "c7"})
    assert response.status_code == 200
    body = response.json()
    assert body["piece"] == {"kind": "rook", "color": "dark", "square": "c7", "glyph": "♜"}
    assert body["moves"] == [
        "b7", "a7",
        "d7", "e7", "f7", "g7", "h7",
        "c8",
        "c6", "c5", "c4", "c3", "c2", "c1",
    ]
    assert body["captures"] == []
    assert body["by_direction"]["north"] == ["c8"]


def test_moves_reports_captures() -> None:
    pieces = [
        {"kind": "B", "color": "light", "square": "a8"},
        {"kind": "knight", "color": "dark", "square": "d5"},
    ]
    response = client.post("/moves", json={"pieces": pieces, "square": "a8"})
    assert response.status_code == 200
    body = response.json()
    assert body["moves"] == ["b7", "c6", "d5"]
    assert body["captures"] == ["d5"]


def test_moves_errors() -> None:
    empty = client.post("/moves", json={"pieces": SAMPLE, "square": "a1"})
    assert empty.status_code == 400
    assert empty.json()["detail"] == "No piece on a1"

    pawn = client.post("/moves", json={"pieces": SAMPLE, "square": "g3"})
    assert pawn.status_code == 400
    assert pawn.json()["detail"] == "No move generator for pawn"

    bad_color = client.post(
        "/moves",
        json={"pieces": [{"kind": "rook", "color": "white", "square": "c7"}], "square": "c7"},
    )
    assert bad_color.status_code == 400

    duplicate = client.post(
        "/moves",
        json={"pieces": SAMPLE + [SAMPLE[0]], "square": "c7", "on_duplicate": "reject"},
    )
    assert duplicate.status_code == 400

    malformed = client.post("/moves", json={"pieces": SAMPLE, "square": "c"})
    assert malformed.status_code == 422


def test_board_text_with_selection() -> None:
    response = client.post("/board", json={"pieces": SAMPLE, "select_from": "c7"})
    assert response.status_code == 200
    body = response.json()
    assert body["rows"][1] == "7 * * ♜ * * * * *"
    assert len(body["selected"]) == 14


def test_board_png() -> None:
    response = client.post("/board.png", json={"pieces": SAMPLE})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")
