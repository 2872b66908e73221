#!/usr/bin/env python3
"""
Simulation step driver and shared simulation state.

What this module does
- Owns the body list, the optional light source and the pause flag. The
  Simulation instance is the single writer of all three.
- step() runs one update pass: pointer overrides, per-kind physics updates,
  then removal of destroyed bodies and insertion of deferred spawns.
- draw() runs one draw pass against the post-removal list.
- handle_command() applies discrete input (light placement, spawning, pause).

Frame model
- Single-threaded: the host calls step() then draw() once per frame and never
  interleaves them, so no locking is needed.
- Bodies are never added or removed while the update loop iterates; removal
  is a compaction after the loop and spawns are queued until then.
"""
import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .collisions import CollisionSettings, collide
from .constants import (
    BLACK_HOLE_DENSITY,
    BLACK_HOLE_MASS,
    G,
    HEIGHT,
    LIGHT_G,
    MIN_MASS,
    WIDTH,
)
from .data_models import BLACK_HOLE, BODY, BlackHole, Body, LightSource
from .drawing import RenderSink, draw_body
from .lensing import draw_light
from .physics import GravityField, integrate
from .vector_utils import ZERO, vec_dist

logger = logging.getLogger(__name__)


@dataclass
class InputState:
    """Pointer snapshot for one frame, in simulation space."""
    pointer: Tuple[float, float] = (-1.0, -1.0)
    scroll: float = 0.0
    primary_down: bool = False
    secondary_down: bool = False


class Command(enum.Enum):
    PLACE_LIGHT = "place_light"
    REMOVE_LIGHT = "remove_light"
    TOGGLE_LIGHT = "toggle_light"
    SPAWN_BLACK_HOLE = "spawn_black_hole"
    TOGGLE_PAUSE = "toggle_pause"


class SimulationSettings:
    """Container for bounds, force constants and spawn defaults."""
    def __init__(
        self,
        width: float = WIDTH,
        height: float = HEIGHT,
        gravitational_constant: float = G,
        light_bending_constant: float = LIGHT_G,
        min_mass: float = MIN_MASS,
        collision: Optional[CollisionSettings] = None,
        black_hole_mass: float = BLACK_HOLE_MASS,
        black_hole_density: float = BLACK_HOLE_DENSITY,
    ):
        self.width = float(width)
        self.height = float(height)
        self.gravitational_constant = float(gravitational_constant)
        self.light_bending_constant = float(light_bending_constant)
        self.min_mass = float(min_mass)
        self.collision = collision or CollisionSettings()
        self.black_hole_mass = float(black_hole_mass)
        self.black_hole_density = float(black_hole_density)


def rescale_mass(body: Body, scroll: float, min_mass: float = MIN_MASS) -> None:
    """
    Grow the body's mass on positive scroll, shrink it on negative scroll.

    The result never drops below min_mass.
    """
    if scroll > 0:
        body.mass = max(min_mass, body.mass * (1 + scroll))
    elif scroll < 0:
        body.mass = max(min_mass, body.mass / (1 - scroll))


class Simulation:
    """
    Top-level simulation state with the per-frame update and draw passes.

    Per-frame updates are dispatched on Body.kind; registering another kind
    in _updaters (and in drawing.DRAWERS) is all a new variant needs.
    """

    def __init__(self, bodies: Optional[Iterable[Body]] = None,
                 settings: Optional[SimulationSettings] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or SimulationSettings()
        self.bodies: List[Body] = list(bodies or [])
        self.light: Optional[LightSource] = None
        self.paused = False
        self.gravity = GravityField(self.settings.gravitational_constant)
        self.light_field = GravityField(self.settings.light_bending_constant)
        self.rng = rng or random.Random()
        self._pending: List[Body] = []
        self._updaters: Dict[str, Callable[[Body, float], None]] = {
            BODY: self._update_body,
            BLACK_HOLE: self._update_black_hole,
        }

    # ------------------------------------------------------------
    # Update pass
    # ------------------------------------------------------------

    def step(self, inputs: InputState, dt: float) -> None:
        """Run one update pass over every body, then compact and spawn."""
        for body in self.bodies:
            if self._apply_override(body, inputs):
                continue
            if self.paused:
                continue
            self._updaters[body.kind](body, dt)

        count = len(self.bodies)
        self.bodies[:] = [b for b in self.bodies if not b.destroyed]
        if len(self.bodies) != count:
            logger.debug("Removed %d destroyed bodies", count - len(self.bodies))

        if self._pending:
            self.bodies.extend(self._pending)
            self._pending.clear()

    def _apply_override(self, body: Body, inputs: InputState) -> bool:
        """
        Apply direct pointer manipulation to body.

        Returns True when the body is held or deleted and must skip physics
        this frame.
        """
        if vec_dist(inputs.pointer, body.position) >= body.radius:
            return False
        rescale_mass(body, inputs.scroll, self.settings.min_mass)
        if inputs.primary_down:
            body.velocity = ZERO
            body.position = inputs.pointer
            return True
        if inputs.secondary_down:
            body.destroyed = True
            return True
        return False

    def _update_body(self, body: Body, dt: float) -> None:
        integrate(body, dt, self.settings.width, self.settings.height)
        collide(body, self.bodies, self.settings.collision)

    def _update_black_hole(self, body: Body, dt: float) -> None:
        self.gravity.attract(body, self.bodies)
        self._update_body(body, dt)

    # ------------------------------------------------------------
    # Input commands
    # ------------------------------------------------------------

    def spawn(self, body: Body) -> None:
        """Queue body to join the list after the next update pass."""
        self._pending.append(body)

    def handle_command(self, command: Command, pointer: Tuple[float, float]) -> None:
        if command is Command.PLACE_LIGHT:
            self.light = LightSource(position=pointer)
            logger.info("Light source placed at (%.0f, %.0f)", pointer[0], pointer[1])
        elif command is Command.REMOVE_LIGHT:
            if self.light is not None:
                logger.info("Light source removed")
            self.light = None
        elif command is Command.TOGGLE_LIGHT:
            if self.light is not None:
                self.light.on = not self.light.on
        elif command is Command.SPAWN_BLACK_HOLE:
            self.spawn(BlackHole(
                mass=self.settings.black_hole_mass,
                density=self.settings.black_hole_density,
                position=pointer,
                movable=True,
            ))
            logger.info("Black hole spawned at (%.0f, %.0f)", pointer[0], pointer[1])
        elif command is Command.TOGGLE_PAUSE:
            self.paused = not self.paused
            logger.info("Simulation %s", "paused" if self.paused else "resumed")

    # ------------------------------------------------------------
    # Draw pass
    # ------------------------------------------------------------

    def draw(self, sink: RenderSink) -> int:
        """
        Draw the light and its rays, then every body in list order.

        Returns the number of ray segments emitted.
        """
        segments = 0
        if self.light is not None:
            segments = draw_light(self.light, self.bodies, self.light_field, sink, self.rng)
        for body in self.bodies:
            draw_body(body, sink)
        return segments
