import pytest


class RecordingSink:
    """Render sink that records primitives instead of drawing them."""

    def __init__(self):
        self.circles = []
        self.lines = []

    def circle(self, center, radius, fill, outline=None, thickness=0):
        self.circles.append(
            {"center": center, "radius": radius, "fill": fill, "outline": outline, "thickness": thickness}
        )

    def line(self, start, end, thickness, color):
        self.lines.append({"start": start, "end": end, "thickness": thickness, "color": color})


@pytest.fixture
def sink():
    return RecordingSink()
