#!/usr/bin/env python3
"""
Scene template loading.

Schema
======
Template JSON (blackhole/templates/*.json):
{
  "name": "Human-friendly scene name",
  "description": "Optional description",
  "gravitational_constant": 6.674,    # optional, default None (keep the settings value)
  "bodies": [
    {
      "kind": "black_hole",             # "black_hole" | "body", default "body"
      "mass": 100000,
      "density": 100,                   # optional, default per kind
      "position": [500.0, 500.0],
      "velocity": [0.0, 0.0],           # optional
      "movable": true,                  # optional, default true
      "color": [200, 200, 255]          # optional
    }
  ]
}

Users can drop their own JSON files into the templates folder and they'll be
picked up by list_templates().
"""
import json
import logging
import os
from typing import List, Optional, Tuple

from .constants import BLACK_HOLE_DENSITY, BLACK_HOLE_MASS, BODY_COLOR, TUNED_G
from .data_models import BLACK_HOLE, BlackHole, Body
from .utils import coerce_color, coerce_pair, try_float

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


def _read_json(path: str):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read scene %s: %s", path, exc)
        return None


def _read_scene(path: str) -> dict:
    """Read a scene file; anything that is not a JSON object is an empty scene."""
    data = _read_json(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Scene %s is not a JSON object; ignoring it", path)
        return {}
    return data


def _resolve_path(file_name: str) -> str:
    """Existing paths (absolute or relative to the working directory) win over template names."""
    if os.path.isfile(file_name):
        return file_name
    return os.path.join(TEMPLATES_DIR, file_name)


def _build_body(entry: dict) -> Body:
    if not isinstance(entry, dict):
        raise TypeError(f"expected an object, got {type(entry).__name__}")
    cls = BlackHole if entry.get("kind") == BLACK_HOLE else Body
    kwargs = dict(
        mass=float(entry["mass"]),
        position=coerce_pair(entry["position"]),
        velocity=coerce_pair(entry.get("velocity")),
        movable=bool(entry.get("movable", True)),
        color=coerce_color(entry.get("color"), BODY_COLOR),
    )
    density = try_float(entry.get("density"))
    if density is not None:
        kwargs["density"] = density
    body = cls(**kwargs)
    if body.mass <= 0 or body.density <= 0:
        raise ValueError("mass and density must be positive")
    return body


def list_templates() -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available templates."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(TEMPLATES_DIR):
        return items
    for fn in sorted(os.listdir(TEMPLATES_DIR)):
        if not fn.lower().endswith(".json"):
            continue
        data = _read_scene(os.path.join(TEMPLATES_DIR, fn))
        items.append((fn, data.get("name") or os.path.splitext(fn)[0]))
    return items


def load_template(file_name: str) -> Tuple[List[Body], Optional[float], str]:
    """
    Load a scene from a file path, or by file name from the templates folder.
    Returns (bodies, gravitational_constant, display_name)
    """
    data = _read_scene(_resolve_path(file_name))
    display_name = data.get("name") or os.path.splitext(os.path.basename(file_name))[0]
    bodies: List[Body] = []
    entries = data.get("bodies")
    if entries is None:
        entries = []
    elif not isinstance(entries, list):
        logger.warning("Ignoring bodies in %s: expected a list", file_name)
        entries = []
    for i, entry in enumerate(entries):
        try:
            bodies.append(_build_body(entry))
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            logger.warning("Skipping body %d in %s: %s", i, file_name, exc)
    logger.info("Loaded scene '%s' with %d bodies", display_name, len(bodies))
    return bodies, try_float(data.get("gravitational_constant")), display_name


def default_scene() -> Tuple[List[Body], float, str]:
    """Two heavy black holes and a light one on a fast pass."""
    bodies: List[Body] = [
        BlackHole(mass=BLACK_HOLE_MASS, density=BLACK_HOLE_DENSITY, position=(500.0, 500.0)),
        BlackHole(mass=BLACK_HOLE_MASS, density=BLACK_HOLE_DENSITY, position=(11.0, 500.0)),
        BlackHole(mass=10.0, density=1.0, position=(700.0, 500.0), velocity=(0.0, 900.0)),
    ]
    return bodies, TUNED_G, "Binary black holes"
