#!/usr/bin/env python3
"""
Gravitational lensing by ray marching.

A light source casts a fan of rays. Each ray advances in fixed steps of
step_length; before every step its direction is nudged by the gravity field
and rescaled back to step_length, so rays bend toward massive bodies without
changing speed.

The field is sampled at the light source's own position rather than at the
advancing ray tip, so every step of every ray receives the same nudge. Rays
are recomputed from scratch on each draw; nothing persists between frames.
"""
import math
import random
from typing import Iterable, List, Optional, Tuple

from .constants import RAY_THICKNESS
from .data_models import Body, LightSource
from .drawing import RenderSink
from .physics import GravityField
from .vector_utils import vec_add, vec_scale, vec_with_length

Point = Tuple[float, float]


def ray_angles(light: LightSource) -> List[float]:
    """Ray angles in degrees, 0 inclusive to 360 exclusive."""
    if light.angular_resolution <= 0:
        raise ValueError("angular_resolution must be positive")
    angles = []
    angle = 0.0
    while angle < 360.0:
        angles.append(angle)
        angle += light.angular_resolution
    return angles


def march_ray(light: LightSource, angle: float, bend: Point) -> List[Point]:
    """
    March a single ray from the light source.

    Args:
        light: Source supplying position, step_length and max_distance.
        angle: Launch angle in degrees.
        bend: Field pull applied to the direction on every step.

    Returns:
        The ray's polyline, starting at the light position.
    """
    step = light.step_length
    if step <= 0:
        raise ValueError("step_length must be positive")
    theta = math.radians(angle)
    direction = (math.cos(theta) * step, math.sin(theta) * step)
    points = [light.position]

    travelled = 0.0
    while travelled < light.max_distance:
        direction = vec_with_length(vec_add(direction, vec_scale(bend, step)), step)
        points.append(vec_add(points[-1], direction))
        travelled += step
    return points


def march_rays(light: LightSource, bodies: Iterable[Body], field: GravityField) -> List[List[Point]]:
    """Polylines for the whole fan of rays, in angle order."""
    bend = field.pull_at(light.position, bodies)
    return [march_ray(light, angle, bend) for angle in ray_angles(light)]


def _random_color(rng) -> Tuple[int, int, int]:
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


def draw_light(light: LightSource, bodies: Iterable[Body], field: GravityField,
               sink: RenderSink, rng: Optional[random.Random] = None) -> int:
    """
    Draw the source marker and, when the light is on, every ray.

    Each segment gets a fresh random colour. Returns the number of segments
    emitted.
    """
    sink.circle(light.position, light.radius, light.color)
    if not light.on:
        return 0

    rng = rng or random
    segments = 0
    for points in march_rays(light, bodies, field):
        for start, end in zip(points, points[1:]):
            sink.line(start, end, RAY_THICKNESS, _random_color(rng))
            segments += 1
    return segments
