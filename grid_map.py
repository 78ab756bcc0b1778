# grid_map.py

from heading import Heading
from line_map import Pose


class GridMap:
    """
    Discretises a LineMap into a grid of robot positions.

    Grid point (x, y) sits at world coordinate (offset_x + x * cell_size,
    offset_y + y * cell_size). Nothing is cached: every query goes back to the
    line map, so the grid can never disagree with it.
    """

    def __init__(self, line_map, x_size, y_size, cell_size, offset_x=0.0, offset_y=0.0):
        if x_size < 0 or y_size < 0:
            raise ValueError(f"Grid size must be non-negative, got {x_size}x{y_size}")
        if not cell_size > 0:
            raise ValueError("cell_size must be > 0")
        self._line_map = line_map
        self._x_size = int(x_size)
        self._y_size = int(y_size)
        self._cell_size = float(cell_size)
        self._offset_x = float(offset_x)
        self._offset_y = float(offset_y)

    @property
    def line_map(self):
        return self._line_map

    @property
    def x_size(self):
        return self._x_size

    @property
    def y_size(self):
        return self._y_size

    @property
    def cell_size(self):
        return self._cell_size

    def is_valid_grid_position(self, x, y):
        """True if (x, y) is on the grid and its world point is within the map bounds."""
        # Bounds first: off-grid coordinates never reach the line map
        if not (0 <= x < self._x_size and 0 <= y < self._y_size):
            return False
        return self._line_map.bounding_rect.contains(self.coordinates_of_grid_position(x, y))

    def is_obstructed(self, x, y):
        """True if the robot cannot occupy (x, y): off the grid, out of bounds or inside an obstacle."""
        if not self.is_valid_grid_position(x, y):
            return True
        return not self._line_map.is_free(self.coordinates_of_grid_position(x, y))

    def coordinates_of_grid_position(self, x, y):
        """World point of a grid position. No validity check."""
        return (self._offset_x + x * self._cell_size, self._offset_y + y * self._cell_size)

    def is_valid_transition(self, x1, y1, x2, y2):
        """
        Whether the robot can move directly from (x1, y1) to (x2, y2).

        Both cells must be valid and unobstructed. Staying put is always allowed;
        otherwise only single cardinal steps are, and only when the nearest
        obstacle along the direction of travel is further away than one cell.
        Not symmetric in general: the range is measured from the source cell.
        """
        if not (self.is_valid_grid_position(x1, y1) and self.is_valid_grid_position(x2, y2)):
            return False
        if self.is_obstructed(x1, y1) or self.is_obstructed(x2, y2):
            return False
        if x1 == x2 and y1 == y2:
            return True

        dx, dy = x2 - x1, y2 - y1
        if abs(dx) + abs(dy) != 1:
            return False

        heading = Heading.from_offset(dx, dy)
        return self.range_to_obstacle_from_grid_position(x1, y1, heading.degrees) > self._cell_size

    def range_to_obstacle_from_grid_position(self, x, y, heading):
        """Distance from the world point of (x, y) to the nearest obstacle along heading (degrees)."""
        px, py = self.coordinates_of_grid_position(x, y)
        return self._line_map.range(Pose(px, py, heading))

    def __repr__(self):
        return (
            f"GridMap({self._x_size}x{self._y_size}, cell_size={self._cell_size}, "
            f"offset=({self._offset_x}, {self._offset_y}))"
        )
