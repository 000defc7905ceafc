"""Scene construction: primitive constructors and framing option files."""

from molframe.construction.options import load_options, save_options
from molframe.construction.primitives import (
    bond_cylinder,
    cylinder,
    light_sphere,
    sphere,
)

__all__ = [
    "bond_cylinder",
    "cylinder",
    "light_sphere",
    "load_options",
    "save_options",
    "sphere",
]
