import pytest

from blackhole.constants import TUNED_G
from blackhole.data_models import BLACK_HOLE, BlackHole, Body, LightSource
from blackhole.simulation import (
    Command,
    InputState,
    Simulation,
    SimulationSettings,
    rescale_mass,
)

DT = 1.0 / 60.0


def test_rescale_mass_scales_and_floors():
    body = Body(mass=100.0, position=(0.0, 0.0))
    rescale_mass(body, 1.0)
    assert body.mass == pytest.approx(200.0)
    rescale_mass(body, -3.0)
    assert body.mass == pytest.approx(50.0)
    rescale_mass(body, 0.0)
    assert body.mass == pytest.approx(50.0)


@pytest.mark.parametrize("scroll", [-0.5, -1.0, -7.0, -1e9])
def test_negative_scroll_never_drops_below_min_mass(scroll):
    body = Body(mass=10.0, position=(0.0, 0.0))
    rescale_mass(body, scroll, min_mass=10.0)
    assert body.mass == 10.0


def test_scroll_over_body_changes_mass_even_when_paused():
    body = Body(mass=100.0, position=(200.0, 200.0), velocity=(5.0, 0.0))
    sim = Simulation([body])
    sim.paused = True
    sim.step(InputState(pointer=(201.0, 200.0), scroll=1.0), DT)
    assert body.mass == pytest.approx(200.0)
    assert body.position == (200.0, 200.0)


def test_pointer_outside_radius_has_no_effect():
    body = Body(mass=100.0, position=(200.0, 200.0))
    sim = Simulation([body])
    sim.paused = True
    sim.step(InputState(pointer=(300.0, 300.0), scroll=1.0, secondary_down=True), DT)
    assert body.mass == 100.0
    assert sim.bodies == [body]


def test_primary_button_drags_body_and_skips_physics():
    hole = BlackHole(mass=100000.0, position=(500.0, 500.0), movable=False)
    body = Body(mass=1000.0, position=(100.0, 100.0), velocity=(300.0, 0.0))
    sim = Simulation([hole, body], SimulationSettings(gravitational_constant=1.0))
    sim.step(InputState(pointer=(105.0, 102.0), primary_down=True), DT)
    assert body.position == (105.0, 102.0)
    assert body.velocity == (0.0, 0.0)
    # the pull from the hole is kept for the next integration
    assert body.acceleration != (0.0, 0.0)


def test_secondary_button_deletes_body_before_draw(sink):
    keep = Body(mass=100.0, position=(800.0, 800.0))
    doomed = Body(mass=100.0, position=(200.0, 200.0))
    sim = Simulation([keep, doomed])
    sim.step(InputState(pointer=(200.0, 200.0), secondary_down=True), DT)
    assert sim.bodies == [keep]
    sim.draw(sink)
    assert len(sink.circles) == 1


def test_pause_freezes_physics():
    body = Body(mass=10.0, position=(200.0, 200.0), velocity=(60.0, 0.0))
    sim = Simulation([body])
    sim.handle_command(Command.TOGGLE_PAUSE, (0.0, 0.0))
    assert sim.paused
    sim.step(InputState(), DT)
    assert body.position == (200.0, 200.0)
    sim.handle_command(Command.TOGGLE_PAUSE, (0.0, 0.0))
    sim.step(InputState(), DT)
    assert body.position == pytest.approx((201.0, 200.0))


def test_spawned_black_hole_joins_after_the_update_pass():
    sim = Simulation([Body(mass=10.0, position=(100.0, 100.0))])
    sim.handle_command(Command.SPAWN_BLACK_HOLE, (400.0, 300.0))
    assert len(sim.bodies) == 1
    sim.step(InputState(), DT)
    assert len(sim.bodies) == 2
    spawned = sim.bodies[-1]
    assert spawned.kind == BLACK_HOLE
    assert spawned.movable
    assert spawned.mass == 100000.0
    assert spawned.density == 100.0
    assert spawned.position == (400.0, 300.0)


def test_light_commands():
    sim = Simulation()
    sim.handle_command(Command.TOGGLE_LIGHT, (0.0, 0.0))
    assert sim.light is None

    sim.handle_command(Command.PLACE_LIGHT, (10.0, 20.0))
    assert isinstance(sim.light, LightSource)
    assert sim.light.position == (10.0, 20.0)

    sim.handle_command(Command.PLACE_LIGHT, (30.0, 40.0))
    assert sim.light.position == (30.0, 40.0)

    sim.handle_command(Command.TOGGLE_LIGHT, (0.0, 0.0))
    assert not sim.light.on

    sim.handle_command(Command.REMOVE_LIGHT, (0.0, 0.0))
    assert sim.light is None


def test_empty_simulation_steps_and_draws_nothing(sink):
    sim = Simulation()
    sim.step(InputState(), DT)
    assert sim.draw(sink) == 0
    assert sink.circles == [] and sink.lines == []


def test_draw_emits_light_then_bodies(sink):
    hole = BlackHole(mass=100000.0, position=(500.0, 500.0))
    sim = Simulation([hole])
    sim.handle_command(Command.PLACE_LIGHT, (100.0, 100.0))
    segments = sim.draw(sink)
    assert segments == 72 * 5
    assert len(sink.lines) == segments
    assert [c["center"] for c in sink.circles] == [(100.0, 100.0), (500.0, 500.0)]


def test_black_hole_deflects_passing_body_and_stays_anchored():
    hole = BlackHole(mass=100000.0, position=(500.0, 500.0), movable=False)
    body = Body(mass=10.0, position=(700.0, 500.0), velocity=(0.0, 900.0))
    sim = Simulation([hole, body])

    sim.step(InputState(), DT)

    assert body.velocity[0] < 0
    assert body.velocity[1] == pytest.approx(900.0)
    assert hole.position == (500.0, 500.0)


def test_black_hole_deflection_with_tuned_constant():
    hole = BlackHole(mass=100000.0, position=(500.0, 500.0), movable=False)
    body = Body(mass=10.0, position=(700.0, 500.0), velocity=(0.0, 900.0))
    sim = Simulation([hole, body], SimulationSettings(gravitational_constant=TUNED_G))

    sim.step(InputState(), DT)

    # a = G * M / d = 6.674 * 100000 / 200
    assert body.velocity[0] == pytest.approx(-6.674 * 100000.0 / 200.0 * DT)
    assert body.position[0] < 700.0
    assert hole.position == (500.0, 500.0)


def test_black_holes_pull_each_other_in_list_order():
    first = BlackHole(mass=1000.0, position=(400.0, 500.0))
    second = BlackHole(mass=1000.0, position=(600.0, 500.0))
    sim = Simulation([first, second], SimulationSettings(gravitational_constant=1.0))

    sim.step(InputState(), DT)
    # first integrated before second pulled on it
    assert first.velocity == (0.0, 0.0)
    assert second.velocity[0] < 0

    sim.step(InputState(), DT)
    assert first.velocity[0] > 0
