"""Framing: extent, field of view, rotation, lighting and the render call."""

from molframe.framing.extent import Extent, compute_extent, model_subset
from molframe.framing.fov import solve_fov
from molframe.framing.lighting import add_lighting, build_lighting_rig
from molframe.framing.pipeline import (
    FramedScene,
    Renderer,
    frame_scene,
    render_model,
)
from molframe.framing.rotation import RotateFn, rotate_point, rotate_scene

__all__ = [
    "Extent",
    "FramedScene",
    "Renderer",
    "RotateFn",
    "add_lighting",
    "build_lighting_rig",
    "compute_extent",
    "frame_scene",
    "model_subset",
    "render_model",
    "rotate_point",
    "rotate_scene",
    "solve_fov",
]
