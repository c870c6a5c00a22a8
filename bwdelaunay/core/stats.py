"""Triangulation run statistics and presentation utilities.

The driver fills a TriangulationStats instance when one is passed in; callers
that do not care pay nothing beyond a few integer increments.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Dict, Any

@dataclass
class TriangulationStats:
    points_inserted: int = 0
    triangles_created: int = 0
    triangles_invalidated: int = 0
    triangles_finalized_early: int = 0
    # Star-polygon edges: boundary ones seed new triangles, interior ones are shared by two invalidated triangles
    boundary_edges: int = 0
    interior_edges_dropped: int = 0
    triangles_purged: int = 0
    triangles_output: int = 0
    max_active: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)

    def to_dict(self) -> Dict[str, Any]:
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d['early_finalize_rate'] = (
            self.triangles_finalized_early / self.triangles_created
            if self.triangles_created else 0.0
        )
        d['time_per_point'] = (self.time_total / self.points_inserted) if self.points_inserted else 0.0
        return d

def format_stats_table(stats_dict) -> str:
    """Return a human readable two-column table of a stats dict."""
    if not stats_dict:
        return "<no stats>"
    rows = []
    for key, val in stats_dict.items():
        if key.startswith('time'):
            rows.append((key + '_ms', f"{val * 1000.0:.3f}"))
        elif isinstance(val, float):
            rows.append((key, f"{val:.4f}"))
        else:
            rows.append((key, str(val)))
    kw = max(len(k) for k, _ in rows)
    vw = max(len('value'), max(len(v) for _, v in rows))
    lines = [f"{'stat'.ljust(kw)} {'value'.rjust(vw)}", "-" * (kw + vw + 1)]
    lines += [f"{k.ljust(kw)} {v.rjust(vw)}" for k, v in rows]
    return "\n".join(lines)

def print_stats(stats_dict, file=None):
    import sys
    print(format_stats_table(stats_dict), file=file or sys.stdout)

__all__ = ["TriangulationStats", "format_stats_table", "print_stats"]
