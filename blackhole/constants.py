#!/usr/bin/env python3
"""
Shared constants for Black Hole Sim (simulation-space units: pixels, seconds).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Simulation bounds (simulation space maps 1:1 onto the window)
WIDTH = 1000
HEIGHT = 1000

# Physical constants (stylised, not SI)
G = 6.674e-10  # body-body gravity, force = G * m1 * m2 / d
LIGHT_G = 6.674e-10  # ray bending, pull = G * m / d
TUNED_G = 6.674  # body-body constant used by the bundled scenes

# Physics controls
WALL_BOUNCE = -0.8  # velocity factor applied when a body is clamped to the bounds
RESTITUTION = 1.0
IMPULSE_DAMPING = 0.9
MIN_MASS = 10.0  # floor for scroll-driven mass changes
DEFAULT_DENSITY = 1.0

# Spawned black holes
BLACK_HOLE_MASS = 100_000.0
BLACK_HOLE_DENSITY = 100.0

# Light source defaults
LIGHT_RADIUS = 10.0
LIGHT_ANGULAR_RESOLUTION = 5.0  # degrees between rays
LIGHT_STEP_LENGTH = 100.0
LIGHT_MAX_DISTANCE = 500.0
RAY_THICKNESS = 1

# Frame timing
FPS = 60
MAX_FRAME_DT = 0.05  # seconds; caps integration after window stalls

# Rendering
BACKGROUND_COLOR = (0, 0, 0)
BODY_COLOR = (200, 200, 255)
BLACK_HOLE_FILL = (0, 0, 0)
BLACK_HOLE_OUTLINE = (255, 255, 0)
LIGHT_COLOR = (255, 255, 255)
HUD_COLOR = (180, 180, 180)
