import math
import numpy as np
import pytest
from planet_sim.simulation import Simulation
from planet_sim.scenarios import spawn_grid, spawn_orbiting, launch_velocity, describe_launch
from planet_sim.util import volume_of_sphere, inverse_volume_of_sphere, from_polar, get_angle


def test_grid_layout():
    sim = Simulation()
    ids = spawn_grid(sim, (260.0, 360.0), columns=3, rows=2, gap=50.0, radius=2.0)

    assert ids == list(range(6))
    positions = [tuple(b.position) for b in sim.snapshot()]
    assert positions[0] == (260.0, 360.0)
    assert positions[1] == (260.0, 410.0)
    assert positions[2] == (310.0, 360.0)
    assert all(b.mass == pytest.approx(volume_of_sphere(2.0)) for b in sim.snapshot())


def test_dense_grid_collapses_into_one_body():
    sim = Simulation()
    spawn_grid(sim, (0.0, 0.0), columns=4, rows=4, gap=1.0, radius=0.6, mass=1.0)
    result = sim.step()
    assert len(result.removed) == 16
    assert len(sim) == 1
    assert sim.snapshot()[0].mass == pytest.approx(16.0)


def test_orbiting_body_velocity():
    sim = Simulation(G=1.0)
    host = sim.spawn((10.0, 10.0), velocity=(1.0, 0.0), mass=400.0, radius=3.0)
    moon = spawn_orbiting(sim, host, distance=100.0, radius=1.0, angle=math.pi / 2, mass=1.0)

    body = sim.get(moon)
    assert np.allclose(body.position, [10.0, 110.0])
    # Counterclockwise at the top of the orbit moves in -x, plus the host's drift
    assert np.allclose(body.velocity, [1.0 - 2.0, 0.0])

    cw = spawn_orbiting(sim, host, distance=100.0, radius=1.0, mass=1.0, clockwise=True)
    assert np.allclose(sim.get(cw).velocity, [1.0, -2.0])


def test_launch_velocity():
    v = launch_velocity((100.0, 100.0), (90.0, 120.0))
    assert np.allclose(v, [10.0, -20.0])
    assert np.allclose(launch_velocity((0, 0), (1, 1), scale=2.0), [-2.0, -2.0])
    speed, heading = describe_launch((0.0, 0.0), (0.0, -3.0))
    assert speed == pytest.approx(3.0)
    assert heading == pytest.approx(math.pi / 2)


def test_sphere_helpers():
    assert inverse_volume_of_sphere(volume_of_sphere(2.5)) == pytest.approx(2.5)
    v = from_polar(2.0, math.pi / 4)
    assert np.allclose(v, [math.sqrt(2), math.sqrt(2)])
    assert get_angle(v) == pytest.approx(math.pi / 4)
