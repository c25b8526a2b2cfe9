# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They cover the physics constants of the carrom demo, rendering colors and
the default window size. Anything meant to be tuned per experiment lives in
`config.json` instead.
"""

# Visualization settings
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a fixed-size window (WINDOW_WIDTH x WINDOW_HEIGHT).
FULLSCREEN = False
WINDOW_WIDTH = 1440
WINDOW_HEIGHT = 700
FPS = 60
BACKGROUND_COLOR = (255, 255, 255) # White
LINE_COLOR = (0, 0, 0)

# --- Carrom Physics ---
# Scale applied to both velocities after every resolved collision.
ENERGY_LOSS = 0.6
# Drag distance (px) is divided by this to get the impulse magnitude.
IMPULSE_DIVISOR = 15.0
DEFAULT_MASS = 1.0
# Multiplies the per-step displacement only; stored velocity is untouched.
DEFAULT_FRICTION = 0.6
# Arena radius is the canvas height divided by this.
ARENA_RADIUS_RATIO = 2.2
# Upper bound on rejection-sampling attempts when placing one body.
MAX_PLACEMENT_ATTEMPTS = 10000

# --- Body Colors ---
BODY_IDLE_COLOR = (177, 177, 177)      # #b1b1b1
BODY_SELECTED_COLOR = (35, 66, 69)     # #234245
BODY_RELEASED_COLOR = (234, 33, 39)    # #ea2127
ARENA_COLOR = (0, 0, 0)

# --- Game of Life ---
CELL_RESOLUTION = 20
GENERATIONS_PER_SECOND = 4
CELL_ALIVE_COLOR = (99, 134, 63)       # #63863f
CELL_DEAD_COLOR = (255, 255, 255)
