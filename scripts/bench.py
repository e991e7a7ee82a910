#!/usr/bin/env python3
"""Generate reproducible move generation benchmark CSVs."""

from __future__ import annotations

import argparse
import csv
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidechess.board import build_board
from slidechess.constants import BOARD_SIZE, Color, PieceType
from slidechess.movegen import generate_moves
from slidechess.piece import Piece
from slidechess.position import Position


@dataclass(frozen=True)
class BenchCase:
    kind: PieceType
    density: float


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def random_pieces(rng: random.Random, density: float) -> list[Piece]:
    squares = [Position(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]
    count = int(len(squares) * density)
    kinds = list(PieceType)
    colors = list(Color)
    return [Piece(rng.choice(kinds), pos, rng.choice(colors)) for pos in rng.sample(squares, count)]


def run_movegen_bench(cases: list[BenchCase], boards: int, seed: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        rng = random.Random(seed)
        queries = 0
        moves = 0
        elapsed = 0.0
        for _ in range(boards):
            pieces = random_pieces(rng, case.density)
            start = perf_counter()
            board = build_board(pieces)
            for piece in pieces:
                mover = Piece(case.kind, piece.pos, piece.color)
                moves += len(generate_moves(mover, board))
                queries += 1
            elapsed += perf_counter() - start
        elapsed_ms = elapsed * 1000.0
        rows.append(
            {
                "piece": case.kind.name.lower(),
                "density": case.density,
                "queries": queries,
                "moves": moves,
                "elapsed_ms": round(elapsed_ms, 3),
                "qps": int(queries / max(elapsed, 1e-9)),
            }
        )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate move generation benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--boards", type=int, default=200, help="Random boards per case")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    cases = [
        BenchCase(kind, density)
        for kind in (PieceType.ROOK, PieceType.BISHOP)
        for density in (0.1, 0.25, 0.5, 0.75)
    ]
    rows = run_movegen_bench(cases, boards=args.boards, seed=args.seed)

    path = metrics_dir / "movegen_metrics.csv"
    _write_csv(
        path,
        fieldnames=["piece", "density", "queries", "moves", "elapsed_ms", "qps"],
        rows=rows,
    )
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
