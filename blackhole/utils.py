#!/usr/bin/env python3
"""
Coercion helpers for values read from scene JSON.
"""
from typing import Optional, Sequence, Tuple


def try_float(val) -> Optional[float]:
    if val is None:
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def coerce_pair(val: Sequence, default: Tuple[float, float] = (0.0, 0.0)) -> Tuple[float, float]:
    """Read a two-element [x, y] list as a float tuple."""
    if val is None:
        return default
    return (float(val[0]), float(val[1]))


def coerce_color(c: Sequence, default: Tuple[int, int, int]) -> Tuple[int, int, int]:
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError):
        return default
    return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))
