"""Verification helpers for triangulation output.

Checks the properties a Delaunay triangulation of a point set must have:
empty circumcircles, triangles exactly covering the convex hull, and no
leftover super-triangle vertices. All checks are tolerance based and meant
for tests and debugging, not for the triangulation itself.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .constants import EPS_AREA, EPS_AREA_REL, EPS_INCIRCLE
from .geometry import Triangle
from .logging_utils import get_logger

logger = get_logger('bwdelaunay.diagnostics')

__all__ = [
    'delaunay_violations',
    'triangulation_area',
    'convex_hull_area',
    'check_triangulation',
]


def _circle_arrays(triangles: Sequence[Triangle]):
    centers = np.array([[t.center.x, t.center.y] for t in triangles], dtype=np.float64).reshape(-1, 2)
    r2 = np.array([t.radius2 for t in triangles], dtype=np.float64)
    verts = np.array([t.vertices for t in triangles], dtype=np.float64).reshape(-1, 3, 2)
    return centers, r2, verts


def delaunay_violations(triangles: Sequence[Triangle], points, rel_tol: float = EPS_INCIRCLE) -> List[Tuple[int, int]]:
    """Return (triangle_index, point_index) pairs breaking the empty-circle property.

    A point violates a triangle when it is not one of its vertices and lies
    strictly inside the circumcircle by more than ``rel_tol`` (relative to the
    squared radius). Cocircular points therefore do not count.
    """
    tris = list(triangles)
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if not tris or pts.shape[0] == 0:
        return []
    centers, r2, verts = _circle_arrays(tris)
    d2 = np.sum((pts[None, :, :] - centers[:, None, :]) ** 2, axis=-1)          # (M, N)
    is_vertex = np.any(np.all(pts[None, None, :, :] == verts[:, :, None, :], axis=-1), axis=1)
    inside = (d2 < r2[:, None] * (1.0 - rel_tol)) & ~is_vertex
    ti, pi = np.nonzero(inside)
    return [(int(a), int(b)) for a, b in zip(ti, pi)]


def triangulation_area(triangles: Sequence[Triangle]) -> float:
    """Sum of unsigned triangle areas."""
    tris = list(triangles)
    if not tris:
        return 0.0
    v = np.array([t.vertices for t in tris], dtype=np.float64)
    signed = 0.5 * ((v[:, 1, 0] - v[:, 0, 0]) * (v[:, 2, 1] - v[:, 0, 1])
                    - (v[:, 1, 1] - v[:, 0, 1]) * (v[:, 2, 0] - v[:, 0, 0]))
    return float(np.sum(np.abs(signed)))


def convex_hull_area(points) -> float:
    """Area of the convex hull of ``points``; 0.0 for fewer than 3 or collinear points."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if pts.shape[0] < 3:
        return 0.0
    try:
        hull = ConvexHull(pts)
    except QhullError:
        return 0.0
    # In 2D scipy reports the enclosed area as `volume`
    return float(hull.volume)


def check_triangulation(triangles: Sequence[Triangle], points, super_triangle: Optional[Triangle] = None,
                        verbose: bool = False) -> Tuple[bool, List[str]]:
    """Validate a triangulation of ``points``.

    Returns (ok, messages). Checks zero-area triangles, super-triangle vertex
    leaks, empty circumcircles and that the triangle areas add up to the convex
    hull area.
    """
    tris = list(triangles)
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    msgs: List[str] = []
    ok = True
    hull_area = convex_hull_area(pts)

    if not tris:
        if hull_area > EPS_AREA:
            msgs.append("No triangles for a point set with a non-degenerate hull.")
            ok = False
        if verbose:
            for m in msgs:
                logger.info(m)
        return ok, msgs

    for k, t in enumerate(tris):
        if t.area < EPS_AREA:
            msgs.append(f"Triangle {k} has near-zero area ({t.area:.3e}).")
            ok = False
        if super_triangle is not None and any(t.has_vertex(v) for v in super_triangle.vertices):
            msgs.append(f"Triangle {k} uses a super-triangle vertex.")
            ok = False

    violations = delaunay_violations(tris, pts)
    for ti, pi in violations[:50]:
        msgs.append(f"Point {pi} lies inside the circumcircle of triangle {ti}.")
    if violations:
        ok = False
        if len(violations) > 50:
            msgs.append(f"... {len(violations) - 50} more circumcircle violations.")

    tri_area = triangulation_area(tris)
    if abs(tri_area - hull_area) > EPS_AREA_REL * max(hull_area, 1.0):
        msgs.append(f"Triangle areas sum to {tri_area:.12g}, convex hull area is {hull_area:.12g}.")
        ok = False

    if verbose:
        for m in msgs:
            logger.info(m)
    return ok, msgs
