"""Public package API for bwdelaunay.

Incremental Bowyer-Watson Delaunay triangulation of 2D point sets. This
facade gives a flat import surface over ``bwdelaunay.core``; plotting is
loaded lazily so ``import bwdelaunay`` does not pull in matplotlib.

Example
-------
    from bwdelaunay import Point, Triangle, delaunay_triangulation

    super_tri = Triangle(Point(0, 50), Point(50, -50), Point(-50, -50))
    tris = delaunay_triangulation([(0, 0), (1, 0), (0, 1)], super_tri)
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("bwdelaunay")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import (
    EPS_AREA, EPS_INCIRCLE, SUPER_TRIANGLE_MARGIN, DEFAULT_SUPER_TRIANGLE,
)
from .core.geometry import (
    Point, Edge, Triangle, circumcircle, orient, triangle_area, point_in_triangle,
    GeometryError, DegenerateTriangleError, PointOutsideError,
)
from .core.config import TriangulationConfig
from .core.stats import TriangulationStats, format_stats_table
from .core.triangulation import (
    delaunay_triangulation, triangulate, bounding_super_triangle, triangles_to_simplices,
)
from .core.diagnostics import (
    check_triangulation, delaunay_violations, triangulation_area, convex_hull_area,
)
from .core.sampling import random_point_in_disk, random_points_in_disk
from .core.logging_utils import configure_logging, get_logger


def plot_triangulation(*args, **kwargs):
    """Lazy proxy for :func:`bwdelaunay.core.visualization.plot_triangulation`."""
    return _imp('bwdelaunay.core.visualization').plot_triangulation(*args, **kwargs)


__all__ = [
    '__version__',
    # primitives
    'Point', 'Edge', 'Triangle', 'circumcircle', 'orient', 'triangle_area', 'point_in_triangle',
    # errors
    'GeometryError', 'DegenerateTriangleError', 'PointOutsideError',
    # driver
    'delaunay_triangulation', 'triangulate', 'bounding_super_triangle', 'triangles_to_simplices',
    'TriangulationConfig', 'TriangulationStats', 'format_stats_table',
    # verification
    'check_triangulation', 'delaunay_violations', 'triangulation_area', 'convex_hull_area',
    # scaffolding
    'random_point_in_disk', 'random_points_in_disk', 'plot_triangulation',
    # logging
    'configure_logging', 'get_logger',
    # constants
    'EPS_AREA', 'EPS_INCIRCLE', 'SUPER_TRIANGLE_MARGIN', 'DEFAULT_SUPER_TRIANGLE',
]
