#!/usr/bin/env python3
"""
Triangulate random points sampled in a disk and report/plot the result.

Points are drawn uniformly in a disk of the given radius around the origin and
triangulated inside the fixed super-triangle {(0,50),(50,-50),(-50,-50)}
unless --auto-super is set, in which case one is derived from the bounding box.
"""
from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from bwdelaunay.core.config import TriangulationConfig
from bwdelaunay.core.constants import DEFAULT_SUPER_TRIANGLE
from bwdelaunay.core.diagnostics import check_triangulation
from bwdelaunay.core.geometry import GeometryError, Triangle
from bwdelaunay.core.logging_utils import configure_logging, get_logger
from bwdelaunay.core.sampling import random_points_in_disk
from bwdelaunay.core.stats import TriangulationStats, print_stats
from bwdelaunay.core.triangulation import bounding_super_triangle, delaunay_triangulation

log = get_logger('bwdelaunay.demo.disk')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Bowyer-Watson triangulation of random points in a disk')
    parser.add_argument('--n', type=int, default=6, help='number of points')
    parser.add_argument('--radius', type=float, default=5.0, help='disk radius')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--auto-super', action='store_true', dest='auto_super',
                        help='derive the super-triangle from the bounding box instead of the fixed one')
    parser.add_argument('--no-sweep', action='store_true', dest='no_sweep',
                        help='disable early finalization of triangles left of the sweep')
    parser.add_argument('--strict', action='store_true', help='raise on points outside / degenerate triangles')
    parser.add_argument('--check', action='store_true', help='verify the Delaunay property and hull coverage')
    parser.add_argument('--stats', action='store_true', help='print a statistics table')
    parser.add_argument('--out', type=str, default=None, help='write a PNG plot to this path')
    parser.add_argument('--circles', action='store_true', help='draw circumcircles in the plot')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    pts = random_points_in_disk(args.n, radius=args.radius, seed=args.seed)
    cfg = TriangulationConfig(early_finalize=not args.no_sweep, strict=args.strict)
    super_tri = bounding_super_triangle(pts, cfg.super_margin) if args.auto_super else Triangle(*DEFAULT_SUPER_TRIANGLE)
    stats = TriangulationStats()
    try:
        tris = delaunay_triangulation(pts, super_tri, cfg, stats=stats)
    except GeometryError as e:
        log.error("triangulation failed: %s", e)
        return 2
    log.info("%d points -> %d triangles", len(pts), len(tris))
    for t in tris:
        log.debug("  %s", t)

    rc = 0
    if args.check:
        ok, msgs = check_triangulation(tris, pts, super_tri)
        for m in msgs:
            log.warning(m)
        log.info("check: %s", 'ok' if ok else 'FAILED')
        rc = 0 if ok else 1
    if args.stats:
        print_stats(stats.to_dict())
    if args.out:
        from bwdelaunay.core.visualization import plot_triangulation
        plot_triangulation(tris, pts, outname=args.out, show_circumcircles=args.circles, super_triangle=super_tri)
        log.info("wrote %s", args.out)
    return rc


if __name__ == '__main__':
    sys.exit(main())
