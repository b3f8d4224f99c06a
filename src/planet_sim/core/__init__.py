# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Gravity: pairwise Newtonian attraction with a distance floor.
    - Integrators: semi-implicit (symplectic) Euler.
    - Invariants: conserved quantities for verification.

Typical usage:
    from planet_sim.core import apply_newtonian_gravity, symplectic_euler_step

    apply_newtonian_gravity(a, b, G=1e-4)
    symplectic_euler_step(a, dt=1/60)
"""
from .gravity import newtonian_force, apply_newtonian_gravity
from .integrators import check_body, symplectic_euler_step
from .invariants import (
    total_mass,
    total_volume,
    linear_momentum,
    center_of_mass,
    kinetic_energy,
    potential_energy,
)

__all__ = [
    # Gravity
    "newtonian_force",
    "apply_newtonian_gravity",
    # Integrators
    "check_body",
    "symplectic_euler_step",
    # Invariants
    "total_mass",
    "total_volume",
    "linear_momentum",
    "center_of_mass",
    "kinetic_energy",
    "potential_energy",
]
