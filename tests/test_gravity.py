import numpy as np
import pytest
from planet_sim.simulation import Simulation
from planet_sim.types import Body
from planet_sim.core.gravity import newtonian_force, apply_newtonian_gravity
from planet_sim.core.invariants import linear_momentum
from planet_sim.errors import DegenerateDistance

G = 1e-4


def test_two_body_first_step():
    """
    Two equal bodies at rest, 100 apart:
      F = G m1 m2 / r^2,   v(dt) = F/m * dt
    Each must move toward the other.
    """
    sim = Simulation(G=G)
    a = sim.spawn((0.0, 0.0), mass=10.0, radius=1.0)
    b = sim.spawn((100.0, 0.0), mass=10.0, radius=1.0)

    result = sim.step(1.0)
    assert not result.removed and not result.created

    F = G * 10 * 10 / 100**2
    va = sim.get(a).velocity
    vb = sim.get(b).velocity
    assert va[0] == pytest.approx(F / 10.0) and va[1] == 0.0
    assert vb[0] == pytest.approx(-F / 10.0) and vb[1] == 0.0

    # Semi-implicit Euler: position uses the updated velocity
    assert sim.get(a).position[0] == pytest.approx(F / 10.0)
    assert sim.get(b).position[0] == pytest.approx(100.0 - F / 10.0)


def test_newtons_third_law():
    a = Body(position=(1.0, 2.0), mass=3.0, radius=0.5)
    b = Body(position=(-4.0, 7.5), mass=11.0, radius=0.5)

    f = apply_newtonian_gravity(a, b, G)

    assert np.allclose(a.force, f)
    assert np.allclose(b.force, -f)
    assert np.allclose(a.force + b.force, 0.0)
    # Force on a points toward b
    assert np.dot(f, b.position - a.position) > 0


def test_force_magnitude_inverse_square():
    f1 = newtonian_force(np.zeros(2), np.array([10.0, 0.0]), 2.0, 5.0, G)
    f2 = newtonian_force(np.zeros(2), np.array([20.0, 0.0]), 2.0, 5.0, G)
    assert np.linalg.norm(f1) == pytest.approx(G * 2 * 5 / 100)
    assert np.linalg.norm(f1) / np.linalg.norm(f2) == pytest.approx(4.0)


def test_distance_floor_caps_force():
    close = newtonian_force(np.zeros(2), np.array([1e-6, 0.0]), 1.0, 1.0, G, min_distance=1e-3)
    assert np.linalg.norm(close) == pytest.approx(G / 1e-6)


def test_coincident_bodies_with_floor_yield_zero_force():
    f = newtonian_force(np.ones(2), np.ones(2), 1.0, 1.0, G, min_distance=1e-3)
    assert np.allclose(f, 0.0)


def test_coincident_bodies_without_floor_raise():
    with pytest.raises(DegenerateDistance):
        newtonian_force(np.ones(2), np.ones(2), 1.0, 1.0, G, min_distance=0.0, ids=(3, 4))
    # Also catchable as a plain ZeroDivisionError
    with pytest.raises(ZeroDivisionError):
        newtonian_force(np.ones(2), np.ones(2), 1.0, 1.0, G, min_distance=0.0)


def test_colliding_pair_gets_no_gravity():
    """An overlapping pair is merged instead of attracting each other."""
    sim = Simulation(G=G)
    sim.spawn((0.0, 0.0), mass=10.0, radius=5.0)
    sim.spawn((1.0, 0.0), mass=10.0, radius=5.0)

    result = sim.step(1.0)

    (new_id,) = result.created
    assert np.allclose(sim.get(new_id).velocity, 0.0)


def test_step_conserves_momentum_without_collisions():
    sim = Simulation(G=5.0)
    sim.spawn((0.0, 0.0), velocity=(0.5, -0.2), mass=40.0, radius=1.0)
    sim.spawn((30.0, 10.0), velocity=(-1.0, 0.3), mass=3.0, radius=1.0)
    sim.spawn((-25.0, 15.0), velocity=(0.0, 2.0), mass=12.0, radius=1.0)
    sim.spawn((5.0, -40.0), velocity=(1.5, 0.0), mass=0.5, radius=1.0)
    p0 = linear_momentum(sim.snapshot())

    result = sim.step(0.1)

    assert not result.created and not result.removed
    assert np.allclose(linear_momentum(sim.snapshot()), p0, rtol=0.0, atol=1e-12)
    # Forces are large enough to actually change the individual momenta
    assert not np.allclose(sim.snapshot()[3].velocity, [1.5, 0.0])
