# distribution.py

import copy
import logging

import numpy as np

logger = logging.getLogger(__name__)


class InvalidCoordinate(IndexError):
    """Raised when a distribution is read or written outside its grid."""


class UnnormalisableDistribution(ArithmeticError):
    """Raised when a distribution's total mass cannot be scaled to 1."""


class GridPositionDistribution:
    """
    Probability mass over the positions of a GridMap.

    Stored as a (height, width) float array; always address it through (x, y).
    A new distribution is uniform over the unobstructed cells of its map.
    """

    def __init__(self, grid_map):
        self._grid_map = grid_map
        self._grid = np.zeros((grid_map.y_size, grid_map.x_size), dtype=np.float64)

        open_cells = 0
        for y in range(grid_map.y_size):
            for x in range(grid_map.x_size):
                if not grid_map.is_obstructed(x, y):
                    self._grid[y, x] = 1.0
                    open_cells += 1

        if open_cells > 0:
            self._grid /= open_cells

    @property
    def grid_map(self):
        return self._grid_map

    @property
    def grid_width(self):
        return self._grid.shape[1]

    @property
    def grid_height(self):
        return self._grid.shape[0]

    def _check(self, x, y):
        if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
            raise InvalidCoordinate(
                f"({x}, {y}) is outside the {self.grid_width}x{self.grid_height} grid"
            )

    def get_probability(self, x, y):
        self._check(x, y)
        return float(self._grid[y, x])

    def set_probability(self, x, y, probability):
        self._check(x, y)
        if not np.isfinite(probability) or probability < 0.0:
            raise ValueError(f"Probability must be finite and non-negative, got {probability}")
        self._grid[y, x] = probability

    # The map is the only authority on positions and moves
    def is_valid_grid_position(self, x, y):
        return self._grid_map.is_valid_grid_position(x, y)

    def is_obstructed(self, x, y):
        return self._grid_map.is_obstructed(x, y)

    def is_valid_transition(self, x1, y1, x2, y2):
        return self._grid_map.is_valid_transition(x1, y1, x2, y2)

    def copy(self):
        """A distribution over the same map with its own copy of the values."""
        clone = copy.copy(self)
        clone._grid = self._grid.copy()
        return clone

    def sum_probability(self):
        return float(np.sum(self._grid))

    def normalise(self):
        """
        Scales every cell so the total mass is 1.

        Raises UnnormalisableDistribution if the total is zero, negative or not
        finite; the values are left as they were.
        """
        total = self.sum_probability()
        if not np.isfinite(total) or total <= 0.0:
            raise UnnormalisableDistribution(f"Cannot normalise a distribution with total mass {total}")
        logger.debug("Normalising distribution with total mass %.6g", total)
        self._grid /= total

    def most_likely_position(self):
        """(x, y) holding the largest mass; the first in row-major order on ties."""
        y, x = np.unravel_index(int(np.argmax(self._grid)), self._grid.shape)
        return int(x), int(y)

    def to_array(self):
        """Copy of the values as a (height, width) array, indexed [y, x]."""
        return self._grid.copy()

    def __repr__(self):
        return f"GridPositionDistribution({self.grid_width}x{self.grid_height}, mass={self.sum_probability():.6g})"
