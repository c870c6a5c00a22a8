"""Geometry primitives for the Bowyer-Watson triangulation.

Points, edges and triangles are small immutable values compared by exact
coordinate equality. A Triangle computes and caches its circumcircle when it is
constructed, so containment queries never see an unpopulated cache.

Nothing here guards against degenerate input. The circumcircle of collinear
vertices comes out non-finite and follows IEEE comparison rules: an infinite
center gives radius2 == inf, so circumcircle_contains is True for every finite
point; a NaN center gives radius2 == NaN, so it is always False.
Callers that want a hard failure check ``Triangle.is_degenerate`` (the driver
does so in strict mode).
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import NamedTuple, Tuple

import numpy as np

__all__ = [
	'Point', 'Edge', 'Triangle', 'circumcircle', 'orient', 'triangle_area',
	'point_in_triangle', 'GeometryError', 'DegenerateTriangleError', 'PointOutsideError',
]


class GeometryError(ValueError):
	"""Invalid geometric configuration detected by a strict check."""


class DegenerateTriangleError(GeometryError):
	def __init__(self, triangle):
		self.triangle = triangle
		super().__init__(f"Triangle {triangle.vertices} has no finite circumcircle (collinear or coincident vertices)")


class PointOutsideError(GeometryError):
	def __init__(self, point, super_triangle):
		self.point = point
		self.super_triangle = super_triangle
		super().__init__(f"Point {tuple(point)} is not strictly inside super-triangle {super_triangle.vertices}")


class Point(NamedTuple):
	x: float
	y: float

	@classmethod
	def from_xy(cls, xy) -> 'Point':
		"""Coerce any 2-sequence (tuple, list, numpy row) to a Point of floats."""
		if len(xy) != 2:
			raise ValueError(f"Expected a 2D point, got {xy!r}")
		return cls(float(xy[0]), float(xy[1]))


class Edge:
	"""Undirected segment; Edge(a, b) == Edge(b, a)."""
	__slots__ = ('a', 'b')

	def __init__(self, a: Point, b: Point):
		self.a = a
		self.b = b

	def __eq__(self, other):
		if not isinstance(other, Edge):
			return NotImplemented
		return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

	def __hash__(self):
		return hash(frozenset((self.a, self.b)))

	def __iter__(self):
		yield self.a
		yield self.b

	def __repr__(self):
		return f"Edge({self.a!r}, {self.b!r})"


def circumcircle(a, b, c) -> Tuple[Point, float, float]:
	"""Circumcenter, radius and squared radius of triangle (a, b, c).

	Perpendicular-bisector closed form. The radius is measured from the center
	to ``a``. Collinear vertices yield NaN/Inf without raising.
	"""
	ax, ay = np.float64(a[0]), np.float64(a[1])
	bx, by = np.float64(b[0]), np.float64(b[1])
	cx, cy = np.float64(c[0]), np.float64(c[1])
	with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
		sa = ax*ax + ay*ay
		sb = bx*bx + by*by
		sc = cx*cx + cy*cy
		ux = (sa*(cy-by) + sb*(ay-cy) + sc*(by-ay)) / (ax*(cy-by) + bx*(ay-cy) + cx*(by-ay)) / 2
		uy = (sa*(cx-bx) + sb*(ax-cx) + sc*(bx-ax)) / (ay*(cx-bx) + by*(ax-cx) + cy*(bx-ax)) / 2
		r2 = (ax-ux)**2 + (ay-uy)**2
		r = np.sqrt(r2)
	return Point(float(ux), float(uy)), float(r), float(r2)


@dataclass(frozen=True)
class Triangle:
	"""Three vertices plus their cached circumcircle.

	Vertex order is kept as given (no winding is enforced). Equality and hashing
	look at the vertices only.
	"""
	a: Point
	b: Point
	c: Point
	center: Point = field(init=False, compare=False, repr=False)
	radius: float = field(init=False, compare=False, repr=False)
	radius2: float = field(init=False, compare=False, repr=False)

	def __post_init__(self):
		for name in ('a', 'b', 'c'):
			v = getattr(self, name)
			if not isinstance(v, Point):
				object.__setattr__(self, name, Point.from_xy(v))
		center, radius, radius2 = circumcircle(self.a, self.b, self.c)
		object.__setattr__(self, 'center', center)
		object.__setattr__(self, 'radius', radius)
		object.__setattr__(self, 'radius2', radius2)

	@property
	def vertices(self) -> Tuple[Point, Point, Point]:
		return (self.a, self.b, self.c)

	@property
	def area(self) -> float:
		return triangle_area(self.a, self.b, self.c)

	@property
	def is_degenerate(self) -> bool:
		return not (math.isfinite(self.center.x) and math.isfinite(self.center.y) and math.isfinite(self.radius2))

	def has_vertex(self, p) -> bool:
		return self.a == p or self.b == p or self.c == p

	def circumcircle_contains(self, p) -> bool:
		"""True if p lies inside or on the circumcircle."""
		dx = p[0] - self.center.x
		dy = p[1] - self.center.y
		return dx*dx + dy*dy <= self.radius2

	def edges(self) -> Tuple[Edge, Edge, Edge]:
		return (Edge(self.a, self.b), Edge(self.a, self.c), Edge(self.b, self.c))


def orient(a, b, c) -> float:
	"""2D orientation (signed area * 2) for points a,b,c.

	Positive when (a,b,c) are counter-clockwise, negative when clockwise,
	zero when colinear.
	"""
	return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])


def triangle_area(a, b, c) -> float:
	return 0.5 * abs(orient(a, b, c))


def point_in_triangle(p, tri: Triangle, strict: bool = True) -> bool:
	"""Orientation-sign containment test, independent of the triangle's winding.

	With strict=True points on an edge or vertex are outside.
	"""
	d1 = orient(tri.a, tri.b, p)
	d2 = orient(tri.b, tri.c, p)
	d3 = orient(tri.c, tri.a, p)
	if strict:
		return (d1 > 0 and d2 > 0 and d3 > 0) or (d1 < 0 and d2 < 0 and d3 < 0)
	has_neg = d1 < 0 or d2 < 0 or d3 < 0
	has_pos = d1 > 0 or d2 > 0 or d3 > 0
	return not (has_neg and has_pos)
