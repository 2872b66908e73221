#!/usr/bin/env python3
"""
Render sink interface and per-kind body drawing.

The core never talks to a window directly. Anything with circle() and line()
methods can receive its primitives; the pygame host provides one, the tests
provide a recording fake.
"""
from typing import Callable, Dict, Optional, Protocol, Tuple

from .constants import BLACK_HOLE_FILL, BLACK_HOLE_OUTLINE
from .data_models import BLACK_HOLE, BODY, Body

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class RenderSink(Protocol):
    def circle(self, center: Point, radius: float, fill: Color,
               outline: Optional[Color] = None, thickness: int = 0) -> None:
        ...

    def line(self, start: Point, end: Point, thickness: int, color: Color) -> None:
        ...


def _draw_generic(body: Body, sink: RenderSink) -> None:
    sink.circle(body.position, body.radius, body.color)


def _draw_black_hole(body: Body, sink: RenderSink) -> None:
    sink.circle(body.position, body.radius, BLACK_HOLE_FILL, outline=BLACK_HOLE_OUTLINE, thickness=1)


DRAWERS: Dict[str, Callable[[Body, RenderSink], None]] = {
    BODY: _draw_generic,
    BLACK_HOLE: _draw_black_hole,
}


def draw_body(body: Body, sink: RenderSink) -> None:
    DRAWERS[body.kind](body, sink)
