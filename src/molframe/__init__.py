"""molframe: automatic camera framing and lighting for molecular scenes.

molframe takes a scene of spheres and cylinders (the atoms and bonds
of a ball-and-stick model), works out a field of view, a camera
position and a lighting rig that show the whole model, and hands the
result to a renderer in a single call.

Example usage::

    from molframe import Scene, render_model, sphere

    scene = Scene((sphere(0, 0, 0, 0.4), sphere(1.1, 0.6, 0, 0.25)))
    render_model(scene, lights="both", output="model.png")
"""

from molframe.construction import (
    bond_cylinder,
    cylinder,
    light_sphere,
    load_options,
    save_options,
    sphere,
)
from molframe.errors import (
    InvalidAngleError,
    InvalidLightingModeError,
    InvalidRotationOrderError,
    InvalidSceneError,
    MolframeError,
)
from molframe.framing import (
    Extent,
    FramedScene,
    Renderer,
    add_lighting,
    build_lighting_rig,
    compute_extent,
    frame_scene,
    model_subset,
    render_model,
    rotate_point,
    rotate_scene,
    solve_fov,
)
from molframe.model import (
    CameraSpec,
    Colour,
    FramingOptions,
    LightingMode,
    Primitive,
    Rotation,
    Scene,
    Shape,
    normalise_colour,
    normalise_rotation,
)
from molframe.rendering import render_mpl

__all__ = [
    "CameraSpec",
    "Colour",
    "Extent",
    "FramedScene",
    "FramingOptions",
    "InvalidAngleError",
    "InvalidLightingModeError",
    "InvalidRotationOrderError",
    "InvalidSceneError",
    "LightingMode",
    "MolframeError",
    "Primitive",
    "Renderer",
    "Rotation",
    "Scene",
    "Shape",
    "add_lighting",
    "bond_cylinder",
    "build_lighting_rig",
    "compute_extent",
    "cylinder",
    "frame_scene",
    "light_sphere",
    "load_options",
    "model_subset",
    "normalise_colour",
    "normalise_rotation",
    "render_model",
    "render_mpl",
    "rotate_point",
    "rotate_scene",
    "save_options",
    "solve_fov",
    "sphere",
]
