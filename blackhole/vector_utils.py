#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Vectors are plain (x, y) tuples; these small functions are used by the
physics, collision and lensing code alike. Nothing here mutates its inputs.
"""
import math
from typing import Tuple

Vec2 = Tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the inclusive range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    ax, ay = a
    bx, by = b
    return (ax + bx, ay + by)


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    ax, ay = a
    bx, by = b
    return (ax - bx, ay - by)


def vec_scale(v: Vec2, factor: float) -> Vec2:
    x, y = v
    return (x * factor, y * factor)


def vec_dot(a: Vec2, b: Vec2) -> float:
    ax, ay = a
    bx, by = b
    return ax * bx + ay * by


def vec_len(v: Vec2) -> float:
    return math.hypot(*v)


def vec_dist(a: Vec2, b: Vec2) -> float:
    return vec_len(vec_sub(a, b))


def vec_with_length(v: Vec2, length: float) -> Vec2:
    """Rescale v to the given length; the zero vector stays zero."""
    current = vec_len(v)
    if current == 0:
        return ZERO
    return vec_scale(v, length / current)


def vec_norm(v: Vec2) -> Vec2:
    return vec_with_length(v, 1.0)
