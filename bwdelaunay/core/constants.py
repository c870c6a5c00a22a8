"""Central numerical tolerances and small geometry constants.

The triangulation itself uses plain floating-point predicates with no
tolerance; these values are only consumed by the verification helpers and
the strict input checks.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12           # minimum positive (absolute) triangle area
EPS_INCIRCLE: float = 1e-9        # relative slack on radius^2 when reporting Delaunay violations
EPS_AREA_REL: float = 1e-9        # relative tolerance for triangulation vs. hull area

# Super-triangle construction
SUPER_TRIANGLE_MARGIN: float = 100.0  # bounding-box size multiplier for the generated super-triangle

# Enclosing triangle used by the reference scenarios (disk radius <= 5 around the origin)
DEFAULT_SUPER_TRIANGLE = ((0.0, 50.0), (50.0, -50.0), (-50.0, -50.0))

__all__ = [
    'EPS_AREA',
    'EPS_INCIRCLE',
    'EPS_AREA_REL',
    'SUPER_TRIANGLE_MARGIN',
    'DEFAULT_SUPER_TRIANGLE',
]
