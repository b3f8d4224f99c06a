# MIT License (see LICENSE)
"""
Numerical integration of body motion.

Bodies follow dx/dt = v, dv/dt = F/m. Forces are accumulated for the whole
step before integration and held constant across it.

The scheme is semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + F/m · dt
    x(t+dt) = x(t) + v(t+dt) · dt
The velocity update comes first and the position update uses the new
velocity. Like velocity Verlet it is symplectic, so orbits do not spiral
outward the way they do under explicit Euler.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import math

import numpy as np

from ..errors import InvariantViolation
from ..types import Body


def check_body(body: Body) -> None:
    """
    Verify a body satisfies the data-model contract.

    Raises:
        InvariantViolation: If mass or radius is not a positive finite number,
            or any state component is NaN/inf.
    """
    if not (body.mass > 0.0 and math.isfinite(body.mass)):
        raise InvariantViolation(f"Body {body.id} has invalid mass {body.mass}")
    if not (body.radius > 0.0 and math.isfinite(body.radius)):
        raise InvariantViolation(f"Body {body.id} has invalid radius {body.radius}")
    if not (np.all(np.isfinite(body.position)) and np.all(np.isfinite(body.velocity))
            and np.all(np.isfinite(body.force))):
        raise InvariantViolation(f"Body {body.id} has non-finite state")


def symplectic_euler_step(body: Body, dt: float) -> None:
    """
    Advance one body by dt using its accumulated force.

    Does not clear body.force; the caller does that once every body has
    been integrated.

    Args:
        body: Body to integrate (modified in-place).
        dt: Timestep.
    """
    check_body(body)
    body.velocity = body.velocity + (body.force / body.mass) * dt
    body.position = body.position + body.velocity * dt
