"""Candidate squares along the straight and diagonal lines from a square."""

from __future__ import annotations

from .constants import MAX_COORD, MIN_COORD
from .position import Position, is_valid_pos

Rays = dict[str, list[Position]]

DIAGONAL_DIRS = (
    ("south_east", 1, 1),
    ("south_west", -1, 1),
    ("north_east", 1, -1),
    ("north_west", -1, -1),
)


def sequence(start: int, stop: int) -> list[int]:
    """Integers from ``start`` to ``stop`` inclusive; empty when start > stop."""
    return list(range(start, stop + 1))


def orthogonal_rays(pos: Position) -> Rays:
    x, y = pos.x, pos.y
    return {
        "west": [Position(i, y) for i in reversed(sequence(MIN_COORD, x - 1))],
        "east": [Position(i, y) for i in sequence(x + 1, MAX_COORD)],
        "north": [Position(x, j) for j in reversed(sequence(MIN_COORD, y - 1))],
        "south": [Position(x, j) for j in sequence(y + 1, MAX_COORD)],
    }


def diagonal_rays(pos: Position) -> Rays:
    # Diagonals can leave the board, so candidates are filtered after the fact.
    rays: Rays = {}
    for name, dx, dy in DIAGONAL_DIRS:
        candidates = [pos.offset(dx * d, dy * d) for d in sequence(1, MAX_COORD)]
        rays[name] = [p for p in candidates if is_valid_pos(p)]
    return rays
