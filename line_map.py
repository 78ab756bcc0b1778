# line_map.py

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

# Ray directions and denominators below this magnitude are treated as exactly zero.
_EPS = 1e-12
# Points closer than this to a segment are on it.
_ON_LINE = 1e-9


class Pose(NamedTuple):
    """A world-space position plus a heading in degrees (0 = +x, 90 = +y)."""
    x: float
    y: float
    heading: float


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point):
        """Closed-interval containment test for a world point (x, y)."""
        px, py = point
        return (self.x <= px <= self.x + self.width) and (self.y <= py <= self.y + self.height)


def rectangle_lines(x, y, width, height):
    """Returns the four outline segments (x1, y1, x2, y2) of an axis-aligned box."""
    x2, y2 = x + width, y + height
    return [
        (x, y, x2, y),
        (x2, y, x2, y2),
        (x2, y2, x, y2),
        (x, y2, x, y),
    ]


class LineMap:
    """
    Continuous-space obstacle map made of line segments.

    Free space is everything inside the bounding rectangle that is enclosed an
    odd number of times by the segments: with an outer wall around the arena,
    the inside of every closed obstacle outline is occupied.
    """

    def __init__(self, lines, bounding_rect):
        lines = np.array(lines, dtype=np.float64)
        if lines.size == 0:
            lines = lines.reshape(0, 4)
        if lines.ndim != 2 or lines.shape[1] != 4:
            raise ValueError(f"lines must have shape (N, 4), got {lines.shape}")
        lines.flags.writeable = False
        self._lines = lines
        self._bounding_rect = bounding_rect

    @classmethod
    def from_rectangles(cls, bounding_rect, obstacles=()):
        """Builds a map walled in by bounding_rect with one box per (x, y, w, h) obstacle."""
        lines = rectangle_lines(bounding_rect.x, bounding_rect.y, bounding_rect.width, bounding_rect.height)
        for box in obstacles:
            lines.extend(rectangle_lines(*box))
        return cls(lines, bounding_rect)

    @property
    def lines(self):
        return self._lines

    @property
    def bounding_rect(self):
        return self._bounding_rect

    def is_free(self, point):
        """True if the point lies inside the bounding rectangle and in free space."""
        if not self._bounding_rect.contains(point):
            return False

        px, py = float(point[0]), float(point[1])
        if len(self._lines) == 0:
            return False
        x1, y1, x2, y2 = self._lines.T

        # A point on any segment, the outer wall included, is part of the obstacle
        if self._distance_to_nearest_line(px, py) <= _ON_LINE:
            return False

        # Crossing test with a ray towards +x; a segment counts when it straddles
        # the ray's y, with its lower endpoint included and the upper one excluded.
        straddles = (y1 > py) != (y2 > py)
        if not np.any(straddles):
            return False
        x1, y1, x2, y2 = x1[straddles], y1[straddles], x2[straddles], y2[straddles]
        x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
        crossings = int(np.count_nonzero(px < x_cross))
        return crossings % 2 == 1

    def _distance_to_nearest_line(self, px, py):
        ax, ay, bx, by = self._lines.T
        dx, dy = bx - ax, by - ay
        length2 = dx * dx + dy * dy
        safe = np.where(length2 > 0.0, length2, 1.0)
        t = np.clip(((px - ax) * dx + (py - ay) * dy) / safe, 0.0, 1.0)
        t = np.where(length2 > 0.0, t, 0.0)
        return float(np.min(np.hypot(ax + t * dx - px, ay + t * dy - py)))

    def range(self, pose):
        """
        Distance from the pose along its heading to the nearest segment.

        Segments parallel to the ray are ignored. Returns math.inf when the ray
        hits nothing.
        """
        if len(self._lines) == 0:
            return math.inf

        theta = math.radians(pose.heading)
        ux, uy = math.cos(theta), math.sin(theta)
        # Snap cardinal headings so axis-aligned segments are exactly parallel
        if abs(ux) < _EPS:
            ux = 0.0
        if abs(uy) < _EPS:
            uy = 0.0

        ax, ay, bx, by = self._lines.T
        dx, dy = bx - ax, by - ay
        wx, wy = ax - pose.x, ay - pose.y

        denom = ux * dy - uy * dx
        hit = np.abs(denom) > _EPS
        if not np.any(hit):
            return math.inf

        denom, dx, dy, wx, wy = denom[hit], dx[hit], dy[hit], wx[hit], wy[hit]
        t = (wx * dy - wy * dx) / denom  # distance along the ray
        s = (wx * uy - wy * ux) / denom  # fraction along the segment

        valid = (t >= 0.0) & (s >= -_EPS) & (s <= 1.0 + _EPS)
        if not np.any(valid):
            return math.inf
        return float(np.min(t[valid]))

    def __repr__(self):
        return f"LineMap(lines={len(self._lines)}, bounding_rect={self._bounding_rect})"
