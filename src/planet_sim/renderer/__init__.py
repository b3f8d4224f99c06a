# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - TrailTracker: Per-body position trails that follow StepResult.

The physics engine has no rendering dependency; these adapters are optional.

Typical usage:
    from planet_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_simulation(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    Trail,
    TrailTracker,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "Trail",
    "TrailTracker",
]
