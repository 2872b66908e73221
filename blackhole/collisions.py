#!/usr/bin/env python3
"""
Collision handling for Black Hole Sim.

Each body resolves its own contacts during its update:
- Overlap is removed by pushing both bodies apart along the contact normal,
  each by the other's share of the total mass. Immovable bodies never move.
- Approaching pairs exchange a damped elastic impulse. Velocity exchange
  ignores movability, so bodies bounce off anchors and anchors keep the
  recoil in their velocity.
"""
from typing import Iterable, Tuple

from .constants import IMPULSE_DAMPING, RESTITUTION
from .data_models import Body
from .vector_utils import vec_add, vec_dist, vec_dot, vec_norm, vec_scale, vec_sub


class CollisionSettings:
    """Container for collision-related settings."""
    def __init__(self, restitution: float = RESTITUTION, damping: float = IMPULSE_DAMPING):
        self.restitution = float(restitution)
        self.damping = float(damping)


def collide(body: Body, bodies: Iterable[Body], settings: CollisionSettings) -> int:
    """
    Resolve contacts between body and every other body it touches.

    Returns the number of contacts found.
    """
    contacts = 0
    for other in bodies:
        if other is body:
            continue
        r_sum = body.radius + other.radius
        distance = vec_dist(body.position, other.position)
        if distance > r_sum:
            continue
        contacts += 1

        normal = vec_norm(vec_sub(body.position, other.position))
        _separate(body, other, normal, r_sum - distance)

        v_rel = vec_sub(body.velocity, other.velocity)
        vn = vec_dot(v_rel, normal)
        if vn >= 0:
            # Already separating
            continue
        _apply_elastic_impulse(body, other, normal, vn, settings)
    return contacts


def _separate(body: Body, other: Body, normal: Tuple[float, float], overlap: float) -> None:
    m_total = body.mass + other.mass
    if body.movable:
        body.position = vec_add(body.position, vec_scale(normal, overlap * other.mass / m_total))
    if other.movable:
        other.position = vec_sub(other.position, vec_scale(normal, overlap * body.mass / m_total))


def _apply_elastic_impulse(body: Body, other: Body, normal: Tuple[float, float], vn: float,
                           settings: CollisionSettings) -> None:
    """Apply a damped 1D elastic impulse along the collision normal."""
    j_imp = -(1.0 + settings.restitution) * vn / (1.0 / body.mass + 1.0 / other.mass)
    impulse = vec_scale(normal, j_imp * settings.damping)
    body.velocity = vec_add(body.velocity, vec_scale(impulse, 1.0 / body.mass))
    other.velocity = vec_sub(other.velocity, vec_scale(impulse, 1.0 / other.mass))
