"""Cellular automaton configuration constants."""

# Default grid extents (x_len, y_len, z_len)
DEFAULT_GRID_SIZE = (16, 16, 16)

# Fraction of cells alive after random seeding
DEFAULT_SEED_DENSITY = 0.2

# 3D Life defaults (live-neighbor counts over the 26-cell Moore neighborhood)
DEFAULT_SURVIVE = (4, 5)
DEFAULT_BIRTH = (5,)

# Cell state conventions for two-state rules
DEAD_STATE = 0
ALIVE_STATE = 1

# Default tile color for live cells (RGB floats)
DEFAULT_ALIVE_COLOR = (1.0, 1.0, 1.0)
