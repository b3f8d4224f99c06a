# MIT License (see LICENSE)
"""
Utility functions for vector math and sphere geometry.

Provides low-level 2D vector operations used by the gravity evaluator,
collision detector and merger. All vector functions operate on 2D vectors
represented as numpy arrays of shape (2,).
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def get_angle(v: np.ndarray) -> float:
    """Angle of v in radians, counterclockwise from the +x axis."""
    return float(math.atan2(v[1], v[0]))


def from_polar(magnitude: float, angle: float) -> np.ndarray:
    """Vector with the given length, rotated `angle` radians from +x."""
    return np.array([magnitude * math.cos(angle), magnitude * math.sin(angle)], dtype=np.float64)


def volume_of_sphere(radius: float) -> float:
    """V = (4/3)·π·r³"""
    return (4.0 / 3.0) * math.pi * radius ** 3


def inverse_volume_of_sphere(volume: float) -> float:
    """
    Radius of the sphere with the given volume.

    Inverse of volume_of_sphere: r = (3V / 4π)^(1/3).
    """
    return ((3.0 * volume) / (4.0 * math.pi)) ** (1.0 / 3.0)


def circular_orbit_speed(G: float, host_mass: float, distance: float) -> float:
    """
    Speed needed for a circular orbit at `distance` from a host.

    Centripetal force equals gravitational force:
      m v² / r = G M m / r²   →   v = sqrt(G M / r)
    """
    return math.sqrt(G * host_mass / distance)
