"""
Utility functions for game mechanics
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rect_intersect(a, b) -> bool:
    """Inclusive bounding-box overlap; touching edges count as a hit"""
    return not (
        b.x > a.x + a.width
        or b.x + b.width < a.x
        or b.y > a.y + a.height
        or b.y + b.height < a.y
    )


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the random source shared by the director and the world"""
    return np.random.default_rng(seed)


def weighted_pick(draw: float, table: Sequence[Tuple[T, float]], fallback: T) -> T:
    """
    Walk cumulative weights and return the bucket `draw` (in [0, 1)) lands in.
    Draws past the last bucket return `fallback`.
    """
    acc = 0.0
    for item, weight in table:
        acc += weight
        if draw < acc:
            return item
    return fallback
