#!/usr/bin/env python3
"""
Black Hole Sim application entry point and pygame host.

What this module does
- Opens a pygame window the size of the simulation bounds and runs the frame
  loop: poll input, step the Simulation, draw it, tick the clock.
- Adapts pygame to the core's two seams: PygameSink implements the render
  sink, and poll_input() turns the event queue and mouse state into an
  InputState plus a list of Commands.

Controls
- Left mouse: hold a body under the pointer and drag it (velocity zeroed)
- Right mouse: delete the body under the pointer
- Mouse wheel over a body: grow or shrink its mass
- L: place a light source at the pointer, K: remove it, O: switch it on/off
- Space: spawn a black hole at the pointer
- P: pause/resume physics

Running
1) Install: `pip install -e .`
2) Run: `blackhole-sim` or `python blackhole_sim.py [scene.json]`
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import pygame
from pygame import gfxdraw

from blackhole.constants import (
    BACKGROUND_COLOR,
    FPS,
    HEIGHT,
    HUD_COLOR,
    MAX_FRAME_DT,
    WIDTH,
)
from blackhole.presets_loader import default_scene, list_templates, load_template
from blackhole.simulation import Command, InputState, Simulation, SimulationSettings

logger = logging.getLogger("blackhole_sim")

KEY_COMMANDS = {
    pygame.K_l: Command.PLACE_LIGHT,
    pygame.K_k: Command.REMOVE_LIGHT,
    pygame.K_o: Command.TOGGLE_LIGHT,
    pygame.K_SPACE: Command.SPAWN_BLACK_HOLE,
    pygame.K_p: Command.TOGGLE_PAUSE,
}

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameSink:
    """Render sink drawing circles and line segments onto a pygame surface."""

    def __init__(self, surface):
        self.surface = surface

    def circle(self, center, radius, fill, outline=None, thickness=0):
        c = _safe_point(center)
        if c is None:
            return
        r = max(1, int(radius))
        gfxdraw.filled_circle(self.surface, c[0], c[1], r, fill)
        gfxdraw.aacircle(self.surface, c[0], c[1], r, fill)
        if outline is not None and thickness > 0:
            pygame.draw.circle(self.surface, outline, c, r, int(thickness))

    def line(self, start, end, thickness, color):
        a = _safe_point(start)
        b = _safe_point(end)
        if a is None or b is None:
            return
        pygame.draw.line(self.surface, color, a, b, int(thickness))


def draw_text(surface, font, text, x, y, color=HUD_COLOR):
    surface.blit(font.render(text, True, color), (x, y))


def poll_input() -> Tuple[bool, InputState, List[Command]]:
    """
    Drain the pygame event queue.

    Returns (keep_running, input_state, commands) for this frame.
    """
    running = True
    scroll = 0.0
    commands: List[Command] = []
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.MOUSEWHEEL:
            scroll += event.y
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                running = False
            elif event.key in KEY_COMMANDS:
                commands.append(KEY_COMMANDS[event.key])

    buttons = pygame.mouse.get_pressed()
    mx, my = pygame.mouse.get_pos()
    inputs = InputState(
        pointer=(float(mx), float(my)),
        scroll=scroll,
        primary_down=bool(buttons[0]),
        secondary_down=bool(buttons[2]),
    )
    return running, inputs, commands


def draw_hud(surface, font, sim: Simulation, scene_name: str, fps: float) -> None:
    status = "PAUSED" if sim.paused else "running"
    light = "none" if sim.light is None else ("on" if sim.light.on else "off")
    draw_text(surface, font, f"{scene_name} | {status} | bodies: {len(sim.bodies)} | light: {light} | {fps:.0f} fps", 8, 8)


def run(sim: Simulation, scene_name: str) -> None:
    pygame.init()
    pygame.display.set_caption("Black Hole Sim")
    surface = pygame.display.set_mode((int(sim.settings.width), int(sim.settings.height)))
    font = pygame.font.SysFont(None, 20)
    clock = pygame.time.Clock()
    sink = PygameSink(surface)

    running = True
    try:
        while running:
            dt = min(clock.tick(FPS) / 1000.0, MAX_FRAME_DT)

            running, inputs, commands = poll_input()
            for command in commands:
                sim.handle_command(command, inputs.pointer)

            sim.step(inputs, dt)

            surface.fill(BACKGROUND_COLOR)
            sim.draw(sink)
            draw_hud(surface, font, sim, scene_name, clock.get_fps())
            pygame.display.flip()
    finally:
        pygame.quit()


def build_simulation(scene: Optional[str]) -> Tuple[Simulation, str]:
    if scene:
        bodies, g, name = load_template(scene)
    else:
        bodies, g, name = default_scene()
    settings = SimulationSettings(width=WIDTH, height=HEIGHT)
    if g is not None:
        settings = SimulationSettings(width=WIDTH, height=HEIGHT, gravitational_constant=g)
    return Simulation(bodies, settings), name


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Interactive n-body black hole and lensing simulation.")
    parser.add_argument("scene", nargs="?", help="scene file path, or a file name from the bundled templates folder")
    parser.add_argument("--list", action="store_true", help="list bundled scenes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.list:
        for file_name, display in list_templates():
            print(f"{file_name}\t{display}")
        return 0

    sim, name = build_simulation(args.scene)
    logger.info("Starting '%s' with %d bodies", name, len(sim.bodies))
    run(sim, name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
