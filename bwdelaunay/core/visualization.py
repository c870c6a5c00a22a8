"""Plotting helpers for triangulation results."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Non-interactive backend in headless environments, before pyplot is imported
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .logging_utils import get_logger
from .triangulation import triangles_to_simplices

logger = get_logger('bwdelaunay.viz')

__all__ = ['plot_triangulation']


def plot_triangulation(triangles, points=None, outname="triangulation.png", show_circumcircles=False,
                       super_triangle=None, title=None):
    """Draw a triangulation and save it to ``outname``.

    Args:
        triangles: sequence of Triangle
        points: optional (N, 2) array of the input points; drawn as dots even
            when they are not used by any triangle
        outname: output image path
        show_circumcircles: overlay every triangle's circumcircle
        super_triangle: optional Triangle drawn as a dashed outline
        title: figure title; defaults to a triangle count
    Returns the output path.
    """
    tris = list(triangles)
    fig, ax = plt.subplots(figsize=(6, 6))
    if tris:
        verts = sorted({v for t in tris for v in t.vertices})
        vert_arr = np.array(verts, dtype=np.float64)
        simplices = triangles_to_simplices(tris, vert_arr)
        ax.triplot(vert_arr[:, 0], vert_arr[:, 1], simplices, color='steelblue', linewidth=0.9)
    if points is not None:
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if pts.shape[0]:
            npts = max(1, pts.shape[0])
            s = max(0.6, min(12.0, 200.0 / float(npts)))
            ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black', zorder=3)
    if show_circumcircles:
        for t in tris:
            if t.is_degenerate:
                continue
            ax.add_patch(Circle((t.center.x, t.center.y), t.radius, fill=False,
                                color=(0.85, 0.2, 0.2), linewidth=0.5, alpha=0.6))
    if super_triangle is not None:
        xs = [v.x for v in super_triangle.vertices] + [super_triangle.a.x]
        ys = [v.y for v in super_triangle.vertices] + [super_triangle.a.y]
        ax.plot(xs, ys, linestyle='--', color='gray', linewidth=0.8)
    ax.set_title(title if title is not None else f"{len(tris)} triangles")
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("wrote %s (%d triangles)", outname, len(tris))
    return outname
