"""Simulation configuration constants.

These constants govern the world layer: light capacity and the motion
integrator's collision sub-stepping.
"""

# =============================================================================
# LIGHTING
# =============================================================================
# The light buffer is a fixed-size array uploaded to the renderer each tick.
# Sources beyond this capacity are dropped in collection order.
MAX_LIGHT_SOURCES = 64

# =============================================================================
# MOTION INTEGRATION
# =============================================================================
# Collision testing inspects a single candidate tile per pass, so a single
# pass may move an entity at most one tile along each axis.
MAX_STEP_PER_AXIS = 1.0

# Each collided sub-step backs the attempted move off by this fraction of
# the clamped displacement.
SUBSTEP_FRACTION = 0.1

# Upper bound on backward sub-steps per pass (1 / SUBSTEP_FRACTION).
MAX_SUBSTEPS = 10

# =============================================================================
# TILE COORDINATES
# =============================================================================
# Tile positions are signed 16-bit integers.
TILE_COORD_MIN = -32768
TILE_COORD_MAX = 32767
