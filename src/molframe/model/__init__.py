"""Core data model for molframe: primitives, scenes, camera and options.

Everything is re-exported here so that ``from molframe.model import
Scene`` works regardless of which submodule defines the type.
"""

from molframe.model.camera import CameraSpec
from molframe.model.colour import Colour, normalise_colour
from molframe.model.options import FramingOptions, LightingMode
from molframe.model.primitive import (
    Primitive,
    Shape,
    is_model_primitive,
    is_model_sphere,
)
from molframe.model.rotation import (
    DEFAULT_ORDER,
    AxisSpec,
    Rotation,
    normalise_order,
    normalise_rotation,
)
from molframe.model.scene import Scene

__all__ = [
    "AxisSpec",
    "CameraSpec",
    "Colour",
    "DEFAULT_ORDER",
    "FramingOptions",
    "LightingMode",
    "Primitive",
    "Rotation",
    "Scene",
    "Shape",
    "is_model_primitive",
    "is_model_sphere",
    "normalise_colour",
    "normalise_order",
    "normalise_rotation",
]
