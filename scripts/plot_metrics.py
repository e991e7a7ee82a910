#!/usr/bin/env python3
"""Render move generation benchmark CSVs into an SVG chart."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "gold": "#c6a25a",
    "red": "#7d2a2a",
    "green": "#4e7d49",
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot move generation metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing benchmark CSV files",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "movegen-charts.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def plot(rows: list[dict[str, str]], output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    fig, axes = plt.subplots(1, 2, figsize=(16, 6), dpi=150)
    fig.suptitle("Move Generation Snapshot", fontsize=18, fontweight="bold", color=PALETTE["text"])

    by_piece: dict[str, list[tuple[float, int, float]]] = defaultdict(list)
    for row in rows:
        queries = int(row["queries"])
        by_piece[row["piece"]].append(
            (float(row["density"]), int(row["qps"]), int(row["moves"]) / max(queries, 1))
        )

    colors = [PALETTE["gold"], PALETTE["red"], PALETTE["green"]]
    ax0, ax1 = axes
    for idx, (piece, data) in enumerate(sorted(by_piece.items())):
        data.sort(key=lambda x: x[0])
        densities = [d for d, _, _ in data]
        qps = [q for _, q, _ in data]
        mobility = [m for _, _, m in data]
        color = colors[idx % len(colors)]
        ax0.plot(densities, qps, marker="o", linewidth=2.5, color=color, label=piece)
        ax1.plot(densities, mobility, marker="s", linewidth=2.5, color=color, label=piece)

    ax0.set_title("Queries/Second by Board Density")
    ax0.set_xlabel("Occupied fraction")
    ax0.set_ylabel("Queries/s")
    ax0.grid(True, alpha=0.6)
    ax0.legend(frameon=False)

    ax1.set_title("Average Moves per Query")
    ax1.set_xlabel("Occupied fraction")
    ax1.set_ylabel("Moves")
    ax1.grid(True, alpha=0.6)
    ax1.legend(frameon=False)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    output = Path(args.output)

    rows = _load_csv(Path(args.metrics_dir) / "movegen_metrics.csv")
    plot(rows, output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
