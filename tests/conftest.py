"""
Shared fixtures for the localisation test suite.

Every map uses 10-unit cells with the grid point at the centre of each cell,
so grid position (x, y) sits at world point (5 + 10x, 5 + 10y).
"""

import numpy as np
import pytest

from distribution import GridPositionDistribution
from grid_map import GridMap
from line_map import LineMap, Rectangle

CELL = 10.0
HALF = 5.0


# ============================================================================
# Helpers
# ============================================================================


def point_mass(grid_map, x, y):
    """Distribution with all of its mass on (x, y)."""
    dist = GridPositionDistribution(grid_map)
    for gy in range(dist.grid_height):
        for gx in range(dist.grid_width):
            dist.set_probability(gx, gy, 0.0)
    dist.set_probability(x, y, 1.0)
    return dist


def from_array(grid_map, values):
    """Distribution holding values[y, x]; obstructed cells are forced to 0."""
    dist = GridPositionDistribution(grid_map)
    for y in range(dist.grid_height):
        for x in range(dist.grid_width):
            p = 0.0 if grid_map.is_obstructed(x, y) else float(values[y, x])
            dist.set_probability(x, y, p)
    return dist


def make_grid_map(line_map, x_size, y_size):
    return GridMap(line_map, x_size, y_size, CELL, HALF, HALF)


class OneWayLineMap:
    """Wraps a LineMap so that nothing can ever be seen (or reached) towards +x."""

    def __init__(self, inner):
        self._inner = inner

    @property
    def bounding_rect(self):
        return self._inner.bounding_rect

    def is_free(self, point):
        return self._inner.is_free(point)

    def range(self, pose):
        if pose.heading == 0.0:
            return 0.0
        return self._inner.range(pose)


# ============================================================================
# Map Fixtures
# ============================================================================


@pytest.fixture
def corridor_line_map():
    """A 50 x 10 walled corridor with no obstacles."""
    return LineMap.from_rectangles(Rectangle(0.0, 0.0, 50.0, 10.0))


@pytest.fixture
def corridor(corridor_line_map):
    """1 x 5 open corridor along +x."""
    return make_grid_map(corridor_line_map, 5, 1)


@pytest.fixture
def open_arena():
    """3 x 3 walled arena with no obstacles."""
    return make_grid_map(LineMap.from_rectangles(Rectangle(0.0, 0.0, 30.0, 30.0)), 3, 3)


@pytest.fixture
def sealed_map():
    """
    3 x 3 arena where the four neighbours of the centre cell are obstacles.

    Free cells: the centre (1, 1) and the four corners.
    """
    obstacles = [
        (12.0, 2.0, 6.0, 6.0),  # (1, 0)
        (2.0, 12.0, 6.0, 6.0),  # (0, 1)
        (22.0, 12.0, 6.0, 6.0),  # (2, 1)
        (12.0, 22.0, 6.0, 6.0),  # (1, 2)
    ]
    return make_grid_map(LineMap.from_rectangles(Rectangle(0.0, 0.0, 30.0, 30.0), obstacles), 3, 3)


@pytest.fixture
def thin_wall_map():
    """2 x 1 corridor split by a thin wall between its two free cells."""
    line_map = LineMap.from_rectangles(Rectangle(0.0, 0.0, 20.0, 10.0), [(9.5, 1.0, 1.0, 8.0)])
    return make_grid_map(line_map, 2, 1)


@pytest.fixture
def one_way_corridor(corridor_line_map):
    """The 1 x 5 corridor, except that no cell can be left towards +x."""
    return make_grid_map(OneWayLineMap(corridor_line_map), 5, 1)


# ============================================================================
# Randomness and Tolerances
# ============================================================================


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def standard_tolerance():
    return 1e-9
