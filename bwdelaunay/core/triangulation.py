"""Incremental Bowyer-Watson Delaunay triangulation.

Points are inserted in ascending x order. Every active triangle whose
circumcircle contains the new point is removed; the boundary of the removed
region (edges seen exactly once) is re-triangulated as a fan around the point.
Because later points never have a smaller x, a triangle whose circumcircle
lies entirely left of the current point can be retired for good, which keeps
the active set small.

Source for the algorithm: paulbourke.net/papers/triangulate
"""
from __future__ import annotations
import logging
import time
from collections import Counter
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .config import TriangulationConfig
from .constants import SUPER_TRIANGLE_MARGIN
from .geometry import (
    Point, Edge, Triangle, point_in_triangle,
    DegenerateTriangleError, PointOutsideError,
)
from .logging_utils import get_logger
from .stats import TriangulationStats

logger = get_logger('bwdelaunay.triangulation')

__all__ = [
    'delaunay_triangulation',
    'triangulate',
    'bounding_super_triangle',
    'triangles_to_simplices',
]


def _star_boundary(edges: List[Edge]) -> Tuple[List[Edge], int]:
    """Split the edges of the invalidated triangles.

    Returns the edges seen exactly once (boundary of the removed region, in
    first-seen order) and the number of distinct edges shared by two removed
    triangles.
    """
    counts = Counter(edges)
    boundary = [e for e, n in counts.items() if n == 1]
    return boundary, len(counts) - len(boundary)


def delaunay_triangulation(points, super_triangle, config: Optional[TriangulationConfig] = None,
                           stats: Optional[TriangulationStats] = None) -> List[Triangle]:
    """Delaunay triangulation of ``points`` seeded by ``super_triangle``.

    Parameters
    ----------
    points : iterable of 2D points
        Points, tuples, lists or rows of an (N, 2) array. Every point must lie
        strictly inside ``super_triangle``; this is only checked when
        ``config.strict`` is set.
    super_triangle : Triangle or three 2D points
        Enclosing triangle used as the initial triangulation. None of the
        returned triangles shares a vertex with it.
    config : TriangulationConfig, optional
    stats : TriangulationStats, optional
        Filled in place when given.

    Returns
    -------
    list of Triangle
        In no particular order. Fewer than three usable points give ``[]``.
    """
    cfg = config or TriangulationConfig()
    if not isinstance(super_triangle, Triangle):
        super_triangle = Triangle(*super_triangle)
    if cfg.strict and super_triangle.is_degenerate:
        raise DegenerateTriangleError(super_triangle)

    # Sorted copy; the caller's sequence is left untouched
    pts = sorted((Point.from_xy(p) for p in points), key=lambda p: p.x)
    if cfg.strict:
        for p in pts:
            if not point_in_triangle(p, super_triangle, strict=True):
                raise PointOutsideError(p, super_triangle)

    t0 = time.perf_counter()
    debug = logger.isEnabledFor(logging.DEBUG)
    n_created = n_invalidated = n_early = n_boundary = n_interior = 0
    max_active = 1

    active = [super_triangle]
    finalized: List[Triangle] = []
    for p in pts:
        keep: List[Triangle] = []
        edges: List[Edge] = []
        n_retired = 0
        for t in active:
            if cfg.early_finalize and p.x > t.center.x + t.radius:
                finalized.append(t)
                n_retired += 1
            elif t.circumcircle_contains(p):
                edges.extend(t.edges())
                n_invalidated += 1
            else:
                keep.append(t)

        boundary, interior = _star_boundary(edges)
        for e in boundary:
            t = Triangle(e.a, e.b, p)
            if cfg.strict and t.is_degenerate:
                raise DegenerateTriangleError(t)
            keep.append(t)

        if debug:
            logger.debug("insert (%.6g, %.6g): removed=%d retired=%d boundary=%d interior=%d active=%d",
                         p.x, p.y, len(edges) // 3, n_retired, len(boundary), interior, len(keep))
        active = keep
        n_created += len(boundary)
        n_early += n_retired
        n_boundary += len(boundary)
        n_interior += interior
        max_active = max(max_active, len(active))

    finalized.extend(active)

    if cfg.purge_super:
        sa, sb, sc = super_triangle.vertices
        result = [t for t in finalized
                  if not (t.has_vertex(sa) or t.has_vertex(sb) or t.has_vertex(sc))]
    else:
        result = finalized

    elapsed = time.perf_counter() - t0
    if stats is not None:
        stats.points_inserted += len(pts)
        stats.triangles_created += n_created
        stats.triangles_invalidated += n_invalidated
        stats.triangles_finalized_early += n_early
        stats.boundary_edges += n_boundary
        stats.interior_edges_dropped += n_interior
        stats.triangles_purged += len(finalized) - len(result)
        stats.triangles_output += len(result)
        stats.max_active = max(stats.max_active, max_active)
        stats.time_total += elapsed
    logger.debug("triangulated %d points into %d triangles (%d purged, %d retired early) in %.3f ms",
                 len(pts), len(result), len(finalized) - len(result), n_early, elapsed * 1000.0)
    return result


def bounding_super_triangle(points, margin: float = SUPER_TRIANGLE_MARGIN) -> Triangle:
    """Triangle strictly enclosing the bounding box of ``points``.

    The base sits one box-size below the box center and the apex ``margin``
    box-sizes above it; ``margin`` must be at least 2. Larger margins push the
    super vertices further out, which keeps the purge from eating hull
    triangles at the cost of larger circumcircles early on.
    """
    if not margin >= 2.0:
        raise ValueError(f"margin must be >= 2, got {margin!r}")
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if arr.shape[0] == 0:
        cx, cy, dmax = 0.0, 0.0, 1.0
    else:
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        cx, cy = (lo + hi) / 2.0
        dmax = float(np.max(hi - lo))
        if dmax <= 0.0:
            dmax = 1.0
    return Triangle(
        Point(float(cx - margin * dmax), float(cy - dmax)),
        Point(float(cx), float(cy + margin * dmax)),
        Point(float(cx + margin * dmax), float(cy - dmax)),
    )


def triangulate(points, super_triangle=None, config: Optional[TriangulationConfig] = None,
                stats: Optional[TriangulationStats] = None) -> List[Triangle]:
    """Array-friendly wrapper around :func:`delaunay_triangulation`.

    ``points`` must be array-like with shape (N, 2). When no super-triangle is
    given one is derived from the bounding box using ``config.super_margin``.
    """
    cfg = config or TriangulationConfig()
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got {arr.shape}")
    if super_triangle is None:
        super_triangle = bounding_super_triangle(arr, cfg.super_margin)
    return delaunay_triangulation(arr, super_triangle, cfg, stats)


def triangles_to_simplices(triangles: Iterable[Triangle], points) -> np.ndarray:
    """Map triangle vertices back to row indices of ``points``.

    Returns an int array of shape (M, 3), usable with matplotlib's triplot or
    compared against ``scipy.spatial.Delaunay.simplices``. Duplicate coordinates
    resolve to their first row. Raises KeyError for a vertex not in ``points``.
    """
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    index = {}
    for i, (x, y) in enumerate(arr):
        index.setdefault(Point(float(x), float(y)), i)
    tris = list(triangles)
    out = np.empty((len(tris), 3), dtype=np.int64)
    for k, t in enumerate(tris):
        out[k] = [index[v] for v in t.vertices]
    return out
