"""Distance helpers used by the lock, sensor and AI scoring code."""

from typing import List, Mapping

from orbital_pursuit.components import Position


def chebyshev_distance(p1: Position, p2: Position) -> int:
    """Return the king-move distance between two positions."""
    return max(abs(p1.x - p2.x), abs(p1.y - p2.y))


def column_distance(p1: Position, p2: Position) -> int:
    """Return the horizontal (column) separation between two positions."""
    return abs(p1.x - p2.x)


def best_keys(scores: Mapping[int, int]) -> List[int]:
    """Return every key achieving the maximum score, in ascending order."""
    if not scores:
        return []
    top = max(scores.values())
    return sorted(k for k, v in scores.items() if v == top)
