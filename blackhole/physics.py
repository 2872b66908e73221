#!/usr/bin/env python3
"""
Core Physics Engine for Black Hole Sim

Responsibilities
- Evaluate the gravitational field of a list of bodies at a point.
- Apply a body's attraction to every other body (black hole updates).
- Advance a body with semi-implicit Euler and reflect it off the bounds.

Force law
- The law is stylised: the pull falls off with 1/d rather than 1/d^2.

      pull(p) = Σ_b G * m_b * (b - p) / |b - p|^2      (field at p, |pull_b| = G m_b / d)
      F_ab    = m_b * pull_a(b)                         (force of a on b, G m_a m_b / d)

- Light rays are massless test particles: they feel the field directly,
  bodies feel the field scaled by their own mass.
- There is no softening. Coincident points contribute nothing instead of
  producing infinities.

Ordering
- attract() applies pulls immediately. When several black holes update in
  list order, later ones see accelerations already accumulated by earlier
  ones this frame; simultaneity is only approximate.
"""

from typing import Iterable, Optional, Tuple

from .constants import G, HEIGHT, WALL_BOUNCE, WIDTH
from .data_models import Body
from .vector_utils import ZERO, clamp, vec_add, vec_scale, vec_sub, vec_len


class GravityField:
    """
    Gravity evaluator shared by body-body attraction and ray bending.

    Body-body gravity and light bending each own an instance so the two
    constants can be tuned independently.
    """

    def __init__(self, gravitational_constant: float = G):
        self.gravitational_constant = float(gravitational_constant)

    def contribution(self, point: Tuple[float, float], source: Body) -> Tuple[float, float]:
        """
        Pull of a single body at point, pointing from point toward the body.

        Returns the zero vector when point coincides with the body.
        """
        offset = vec_sub(source.position, point)
        distance = vec_len(offset)
        if distance == 0:
            return ZERO
        magnitude = self.gravitational_constant * source.mass / distance
        return vec_scale(offset, magnitude / distance)

    def pull_at(self, point: Tuple[float, float], bodies: Iterable[Body],
                exclude: Optional[Body] = None) -> Tuple[float, float]:
        """Sum the pull of all bodies at point, skipping exclude by identity."""
        total = ZERO
        for body in bodies:
            if body is exclude:
                continue
            total = vec_add(total, self.contribution(point, body))
        return total

    def attract(self, attractor: Body, bodies: Iterable[Body]) -> None:
        """Pull every other body toward attractor with force G * m_a * m_b / d."""
        for body in bodies:
            if body is attractor:
                continue
            pull = self.contribution(body.position, attractor)
            body.pull(vec_scale(pull, body.mass))


def integrate(body: Body, dt: float, width: float = WIDTH, height: float = HEIGHT) -> None:
    """
    Advance velocity then position by dt, then reset the acceleration.

    A body that leaves [0, width] x [0, height] is clamped back inside and its
    whole velocity vector is multiplied by WALL_BOUNCE. Immovable bodies are
    left untouched, accumulated acceleration included.
    """
    if not body.movable:
        return
    body.velocity = vec_add(body.velocity, vec_scale(body.acceleration, dt))
    body.position = vec_add(body.position, vec_scale(body.velocity, dt))
    body.acceleration = ZERO

    x, y = body.position
    if x < 0 or x > width or y < 0 or y > height:
        body.position = (clamp(x, 0.0, width), clamp(y, 0.0, height))
        body.velocity = vec_scale(body.velocity, WALL_BOUNCE)
