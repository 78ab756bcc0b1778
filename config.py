# config.py

# --- Discretisation ---
# World-space edge length of one grid cell and world coordinate of cell (0, 0).
# An offset of half a cell puts every grid point at the centre of its cell.
CELL_SIZE = 30.0
OFFSET_X = 15.0
OFFSET_Y = 15.0

# --- Headings ---
# Each cardinal move: (grid offset dx, dy), world heading in degrees.
# Degrees follow the pose convention of the line map: 0 = +x, 90 = +y.
HEADING_TABLE = {
    "PLUS_X": ((1, 0), 0.0),
    "PLUS_Y": ((0, 1), 90.0),
    "MINUS_X": ((-1, 0), 180.0),
    "MINUS_Y": ((0, -1), -90.0),
}

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- Demo map ---
# A 150 x 120 arena with one pillar covering grid cells (2, 1) and (2, 2).
# Obstacles are axis-aligned boxes: (x, y, width, height) in world units.
DEMO_WIDTH = 150.0
DEMO_HEIGHT = 120.0
DEMO_OBSTACLES = [
    (65.0, 35.0, 20.0, 50.0),
]
DEMO_GRID_X_SIZE = 5
DEMO_GRID_Y_SIZE = 4
DEMO_START = (0, 0)
# Headings by name, replayed in order by robot_sim.run_demo()
DEMO_MOVES = [
    "PLUS_X", "PLUS_X", "PLUS_X", "PLUS_Y", "PLUS_Y",
    "MINUS_X", "MINUS_X", "PLUS_Y", "PLUS_X", "PLUS_X",
]
