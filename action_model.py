# action_model.py

import logging
from abc import ABC, abstractmethod

from heading import Heading, UnrecognizedDirection

logger = logging.getLogger(__name__)


class ActionModel(ABC):
    """Prediction step of a grid localisation filter."""

    @abstractmethod
    def update_after_move(self, distribution, heading):
        """Returns the belief after a move in `heading`; `distribution` is not modified."""


class PerfectActionModel(ActionModel):
    """
    Moves all probability exactly one cell in the requested direction.

    A robot whose move would take it into an obstacle, through a wall or off
    the map stays where it is. The distribution's grid map decides which moves
    are possible.
    """

    def update_after_move(self, distribution, heading):
        if not isinstance(heading, Heading):
            raise UnrecognizedDirection(f"Expected a Heading, got {heading!r}")

        moved = distribution.copy()
        self._move(distribution, moved, heading)
        moved.normalise()
        return moved

    def _move(self, from_dist, to_dist, heading):
        """
        Fills to_dist from from_dist for one step in heading.

        Every unobstructed cell receives the mass of the cell behind it if that
        cell can move in, plus its own mass if it cannot move on. Only from_dist
        is read and each cell of to_dist is written once, so the result does not
        depend on the order cells are visited in.
        """
        dx, dy = heading.offset
        grid_map = from_dist.grid_map

        for y in range(to_dist.grid_height):
            for x in range(to_dist.grid_width):
                # Obstructed cells never send or receive mass
                if grid_map.is_obstructed(x, y):
                    continue

                inbound = 0.0
                from_x, from_y = x - dx, y - dy
                if grid_map.is_valid_grid_position(from_x, from_y):
                    if grid_map.is_valid_transition(from_x, from_y, x, y):
                        inbound = from_dist.get_probability(from_x, from_y)

                stayed = 0.0
                if not grid_map.is_valid_transition(x, y, x + dx, y + dy):
                    stayed = from_dist.get_probability(x, y)

                to_dist.set_probability(x, y, inbound + stayed)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Moved %s: mass before normalising %.6g", heading.name, to_dist.sum_probability())
