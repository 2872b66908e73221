import pytest

pygame = pytest.importorskip("pygame")

from blackhole.constants import TUNED_G
from blackhole.simulation import Simulation
from blackhole_sim import PygameSink, _safe_point, build_simulation


def test_build_simulation_defaults_to_binary_scene():
    sim, name = build_simulation(None)
    assert isinstance(sim, Simulation)
    assert name == "Binary black holes"
    assert len(sim.bodies) == 3
    assert sim.gravity.gravitational_constant == pytest.approx(TUNED_G)


def test_build_simulation_from_template():
    sim, name = build_simulation("anchored_lens.json")
    assert name == "Anchored lens"
    assert not sim.bodies[0].movable


def test_safe_point_rejects_wild_coordinates():
    assert _safe_point((1.6, 2.2)) == (1, 2)
    assert _safe_point((1e9, 0)) is None
    assert _safe_point((float("nan"), 0)) is None


def test_pygame_sink_draws_onto_surface():
    surface = pygame.Surface((50, 50))
    sink = PygameSink(surface)
    sink.circle((25.0, 25.0), 5.0, (255, 0, 0), outline=(255, 255, 0), thickness=1)
    sink.line((0.0, 0.0), (49.0, 0.0), 1, (0, 255, 0))
    assert tuple(surface.get_at((25, 25)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((10, 0)))[:3] == (0, 255, 0)
