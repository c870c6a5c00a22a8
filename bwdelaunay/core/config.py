"""Configuration object for the Bowyer-Watson driver."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import SUPER_TRIANGLE_MARGIN


@dataclass
class TriangulationConfig:
    """Driver switches.

    Attributes
    ----------
    early_finalize : bool
        Retire triangles whose circumcircle lies entirely left of the sweep
        position. Disabling it keeps every triangle active until the end; the
        result is the same, only slower.
    strict : bool
        Validate input: every point must lie strictly inside the
        super-triangle and every created triangle must have a finite
        circumcircle. Violations raise a ``GeometryError`` subclass instead of
        propagating NaN/Inf.
    purge_super : bool
        Drop triangles touching a super-triangle vertex from the output.
        Turning this off is only meant for inspection and plotting.
    super_margin : float
        Bounding-box multiplier used when ``triangulate`` builds the
        super-triangle itself.
    """
    early_finalize: bool = True
    strict: bool = False
    purge_super: bool = True
    super_margin: float = SUPER_TRIANGLE_MARGIN

    def __post_init__(self):
        if not self.super_margin >= 2.0:
            raise ValueError(f"super_margin must be >= 2 for the super-triangle to enclose the bounding box, got {self.super_margin!r}")


__all__ = ['TriangulationConfig']
