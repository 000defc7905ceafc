from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import StrEnum

from molframe._constants import LIGHT_TYPE
from molframe.model._util import _field_defaults
from molframe.model.colour import normalise_colour


class Shape(StrEnum):
    """Geometric shape of a :class:`Primitive`.

    Only spheres and cylinders contribute to automatic framing; every
    other shape a scene generator might emit is collapsed to
    :attr:`OTHER`.
    """

    SPHERE = "sphere"
    CYLINDER = "cylinder"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: str | Shape) -> Shape:
        """Return the member matching *value*, or :attr:`OTHER`."""
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.OTHER


# Alternative column names used by tabular scene generators.
_FIELD_ALIASES: dict[str, str] = {
    "lightintensity": "light_intensity",
    "color": "colour",
}


def _coerce_optional(value: float | None) -> float | None:
    """Convert *value* to float, mapping ``None`` and NaN to ``None``."""
    if value is None:
        return None
    f = float(value)
    if math.isnan(f):
        return None
    return f


@dataclass(frozen=True)
class Primitive:
    """A single geometric object in a scene.

    Primitives are immutable; transformations build new instances
    with :meth:`with_position` or :func:`dataclasses.replace`.

    Attributes:
        shape: Geometric shape.  Strings are coerced with
            :meth:`Shape.coerce`.
        x: Position along x, or ``None`` if missing.
        y: Position along y, or ``None`` if missing.
        z: Position along z, or ``None`` if missing.
        radius: Sphere radius, or cylinder radius.
        light_intensity: Emission strength, or ``None`` for an object
            that does not emit light.  NaN is treated as ``None``.
        type: Material type tag (``"diffuse"``, ``"light"``, ...).
        colour: Surface colour, normalised to an RGB tuple.
        length: Cylinder length.  Ignored for other shapes.
        axis: Cylinder axis direction.  Ignored for other shapes.

    Raises:
        ValueError: If *radius*, *length* or *light_intensity* is
            negative, or *axis* is not a non-zero 3-vector.
    """

    shape: Shape
    x: float | None = 0.0
    y: float | None = 0.0
    z: float | None = 0.0
    radius: float = 1.0
    light_intensity: float | None = None
    type: str = "diffuse"
    colour: tuple[float, float, float] = (1.0, 1.0, 1.0)
    length: float = 1.0
    axis: tuple[float, float, float] = (0.0, 1.0, 0.0)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalised values are written back with
        # object.__setattr__.
        object.__setattr__(self, "shape", Shape.coerce(self.shape))
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, _coerce_optional(getattr(self, name)))

        object.__setattr__(self, "radius", float(self.radius))
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")

        intensity = _coerce_optional(self.light_intensity)
        if intensity is not None and intensity < 0:
            raise ValueError(
                f"light_intensity must be non-negative, got {intensity}"
            )
        object.__setattr__(self, "light_intensity", intensity)

        object.__setattr__(self, "colour", normalise_colour(self.colour))

        object.__setattr__(self, "length", float(self.length))
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")

        if len(self.axis) != 3:
            raise ValueError(
                f"axis must have 3 components, got {len(self.axis)}"
            )
        axis = tuple(float(a) for a in self.axis)
        if not any(axis):
            raise ValueError("axis must be non-zero")
        object.__setattr__(self, "axis", axis)

    @property
    def is_light(self) -> bool:
        """Whether this primitive emits light."""
        return self.light_intensity is not None

    @property
    def has_position(self) -> bool:
        """Whether all three coordinates are present."""
        return None not in (self.x, self.y, self.z)

    @property
    def position(self) -> tuple[float, float, float]:
        """Position as floats, with NaN standing in for missing values."""
        return tuple(  # type: ignore[return-value]
            math.nan if c is None else c for c in (self.x, self.y, self.z)
        )

    def with_position(self, x: float, y: float, z: float) -> Primitive:
        """Return a copy of this primitive moved to ``(x, y, z)``."""
        return replace(self, x=x, y=y, z=z)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Missing
        coordinates are written as ``None``.
        """
        defaults = _field_defaults(type(self), exclude=frozenset({"shape"}))
        d: dict = {"shape": str(self.shape)}
        for field_name, default in defaults.items():
            val = getattr(self, field_name)
            if val != default:
                d[field_name] = list(val) if isinstance(val, tuple) else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Primitive:
        """Deserialise from a dictionary.

        Keys that do not name a field are ignored, so that records
        carrying extra material columns can be read directly.  The
        aliases ``lightintensity`` and ``color`` are accepted.
        """
        defaults = _field_defaults(cls, exclude=frozenset({"shape"}))
        kwargs: dict = {"shape": d["shape"]}
        for key, val in d.items():
            field_name = _FIELD_ALIASES.get(key, key)
            if field_name not in defaults:
                continue
            if isinstance(val, list):
                val = tuple(val)
            kwargs[field_name] = val
        return cls(**kwargs)


def is_model_primitive(primitive: Primitive) -> bool:
    """Whether *primitive* is part of the molecule geometry.

    Model primitives are spheres and cylinders that do not emit
    light.
    """
    return (
        not primitive.is_light
        and primitive.shape in (Shape.SPHERE, Shape.CYLINDER)
    )


def is_model_sphere(primitive: Primitive) -> bool:
    """Whether *primitive* is a sphere whose type is not a light."""
    return primitive.shape == Shape.SPHERE and primitive.type != LIGHT_TYPE
