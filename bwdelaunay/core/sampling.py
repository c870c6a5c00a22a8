"""Random point generators for tests and demos."""
from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

__all__ = ['random_point_in_disk', 'random_points_in_disk']


def random_point_in_disk(radius: float, rng: np.random.Generator) -> Tuple[float, float]:
    """One point in the disk of ``radius`` around the origin.

    The radius fraction is the fold of a sum of two uniforms
    (``u = U + U'``, ``r = 2 - u`` when ``u > 1``), which makes the density
    uniform over the disk area.
    """
    t = 2.0 * math.pi * rng.random()
    u = rng.random() + rng.random()
    r = 2.0 - u if u > 1.0 else u
    return radius * r * math.cos(t), radius * r * math.sin(t)


def random_points_in_disk(n: int, radius: float = 1.0, rng: Optional[np.random.Generator] = None,
                          seed: Optional[int] = None) -> np.ndarray:
    """Array of shape (n, 2) drawn with the same scheme as random_point_in_disk."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if rng is None:
        rng = np.random.default_rng(seed)
    t = 2.0 * np.pi * rng.random(n)
    u = rng.random(n) + rng.random(n)
    r = np.where(u > 1.0, 2.0 - u, u)
    return np.column_stack((radius * r * np.cos(t), radius * r * np.sin(t)))
