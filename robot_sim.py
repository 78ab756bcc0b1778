# robot_sim.py

import logging

import config
from action_model import PerfectActionModel
from distribution import GridPositionDistribution
from grid_map import GridMap
from heading import Heading
from line_map import LineMap, Rectangle

logger = logging.getLogger(__name__)


class Robot:
    def __init__(self, grid_map, start_x, start_y, action_model=None):
        if grid_map.is_obstructed(start_x, start_y):
            raise ValueError(f"Start position ({start_x}, {start_y}) is obstructed")
        self.grid_map = grid_map
        self.x = start_x
        self.y = start_y
        self.action_model = action_model if action_model is not None else PerfectActionModel()
        # The robot does not know where it started
        self.belief = GridPositionDistribution(grid_map)

    def move(self, heading):
        """Moves the true position one cell if the map allows it, then predicts the belief."""
        new_belief = self.action_model.update_after_move(self.belief, heading)

        dx, dy = heading.offset
        to_x, to_y = self.x + dx, self.y + dy
        moved = self.grid_map.is_valid_transition(self.x, self.y, to_x, to_y)
        if moved:
            self.x, self.y = to_x, to_y
        else:
            logger.info("Blocked moving %s from (%d, %d)", heading.name, self.x, self.y)

        self.belief = new_belief
        return moved

    def probability_at_true_position(self):
        return self.belief.get_probability(self.x, self.y)


def build_demo_grid_map():
    """The grid over config's demo arena."""
    bounds = Rectangle(0.0, 0.0, config.DEMO_WIDTH, config.DEMO_HEIGHT)
    line_map = LineMap.from_rectangles(bounds, config.DEMO_OBSTACLES)
    return GridMap(
        line_map,
        config.DEMO_GRID_X_SIZE,
        config.DEMO_GRID_Y_SIZE,
        config.CELL_SIZE,
        config.OFFSET_X,
        config.OFFSET_Y,
    )


def run_demo(moves=None):
    """Replays a list of heading names on the demo map and returns the robot."""
    moves = config.DEMO_MOVES if moves is None else moves
    start_x, start_y = config.DEMO_START
    robot = Robot(build_demo_grid_map(), start_x, start_y)

    for step, name in enumerate(moves, start=1):
        robot.move(Heading[name])
        best_x, best_y = robot.belief.most_likely_position()
        logger.info(
            "Step %d %s: robot at (%d, %d), p=%.3f; belief peak (%d, %d), p=%.3f",
            step, name, robot.x, robot.y, robot.probability_at_true_position(),
            best_x, best_y, robot.belief.get_probability(best_x, best_y),
        )
    return robot


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    run_demo()
