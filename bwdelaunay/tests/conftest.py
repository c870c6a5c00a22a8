import numpy as np
import pytest

from bwdelaunay import Triangle, DEFAULT_SUPER_TRIANGLE


@pytest.fixture
def super_triangle():
    """Enclosing triangle used by the disk scenarios (radius <= 5 around the origin)."""
    return Triangle(*DEFAULT_SUPER_TRIANGLE)


@pytest.fixture
def big_super_triangle():
    """Far-away super-triangle so no hull triangle of a unit-scale point set gets purged."""
    return Triangle((0.0, 5000.0), (5000.0, -5000.0), (-5000.0, -5000.0))


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


def as_vertex_sets(triangles):
    """Order-free view of a triangulation: a set of vertex frozensets."""
    return {frozenset(t.vertices) for t in triangles}
