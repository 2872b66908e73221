#!/usr/bin/env python3
"""
Data models for Black Hole Sim.

This module defines the Body dataclass shared between physics, collisions,
lensing and rendering, its BlackHole variant, and the LightSource.

Units and usage
- position is in pixels of simulation space, velocity in pixels per second.
- radius is derived from mass and density on every read; it is never stored.
- kind tags the variant; the simulation dispatches per-frame updates and the
  renderer dispatches drawing on it.
- Bodies are owned by Simulation; only its step pass mutates them.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    BLACK_HOLE_DENSITY,
    BODY_COLOR,
    DEFAULT_DENSITY,
    LIGHT_ANGULAR_RESOLUTION,
    LIGHT_COLOR,
    LIGHT_MAX_DISTANCE,
    LIGHT_RADIUS,
    LIGHT_STEP_LENGTH,
)
from .vector_utils import ZERO, vec_add, vec_scale

BODY = "body"
BLACK_HOLE = "black_hole"


@dataclass(eq=False)
class Body:
    """
    A collidable point mass.

    Fields:
    - mass: Controls both gravitational pull and inertia (> 0)
    - position, velocity, acceleration: 2D vectors
    - density: With mass determines the radius
    - movable: When False the body is an anchor; integration leaves it in place
    - destroyed: Marks the body for removal at the end of the frame
    - color: RGB tuple used for rendering
    - kind: Variant tag
    """
    mass: float
    position: Tuple[float, float]
    velocity: Tuple[float, float] = ZERO
    acceleration: Tuple[float, float] = ZERO
    density: float = DEFAULT_DENSITY
    movable: bool = True
    destroyed: bool = False
    color: Tuple[int, int, int] = BODY_COLOR
    kind: str = BODY

    @property
    def radius(self) -> float:
        return math.sqrt(self.mass / self.density / math.pi)

    def pull(self, force: Tuple[float, float]) -> None:
        """Accumulate force / mass into the acceleration."""
        if self.mass <= 0:
            raise ValueError("Cannot pull a body with non-positive mass.")
        self.acceleration = vec_add(self.acceleration, vec_scale(force, 1.0 / self.mass))


@dataclass(eq=False)
class BlackHole(Body):
    """A body that attracts every other body on its own update."""
    density: float = BLACK_HOLE_DENSITY
    kind: str = BLACK_HOLE


@dataclass
class LightSource:
    """
    Point light emitting a fan of rays that bend through the gravity field.

    angular_resolution is in degrees; step_length is both the per-iteration
    march distance and the length of the ray's direction vector.
    """
    position: Tuple[float, float]
    radius: float = LIGHT_RADIUS
    on: bool = True
    angular_resolution: float = LIGHT_ANGULAR_RESOLUTION
    step_length: float = LIGHT_STEP_LENGTH
    max_distance: float = LIGHT_MAX_DISTANCE
    color: Tuple[int, int, int] = LIGHT_COLOR
