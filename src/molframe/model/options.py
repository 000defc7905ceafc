from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from molframe._constants import DEFAULT_LIGHT_INTENSITY
from molframe.errors import InvalidLightingModeError
from molframe.model._util import _field_defaults
from molframe.model.rotation import (
    DEFAULT_ORDER,
    AxisSpec,
    Rotation,
    normalise_rotation,
)


class LightingMode(StrEnum):
    """Named lighting rigs added around a framed model.

    ``BOTTOM`` and ``BOTH`` build the same rig: the two ``TOP`` lights
    plus one light underneath the model.  ``BOTTOM`` does not remove
    the top lights.
    """

    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    BOTH = "both"

    @classmethod
    def parse(cls, value: str | LightingMode) -> LightingMode:
        """Return the mode named by *value* (case-insensitive).

        Raises:
            InvalidLightingModeError: If *value* names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(repr(m.value) for m in cls)
        raise InvalidLightingModeError(
            f"lights must be one of {valid}, got {value!r}"
        )


@dataclass
class FramingOptions:
    """Reusable settings for :func:`~molframe.framing.pipeline.frame_scene`.

    Every field mirrors the keyword argument of the same name.

    Attributes:
        fov: Field of view in degrees, or ``None`` to solve it from
            the scene extent.
        angle: Degrees about x, y and z.  A single number (or
            1-sequence) is a rotation about the vertical axis and is
            normalised to ``(0, angle, 0)``.
        order_rotation: Order in which the per-axis rotations are
            applied, as axis indices or names.
        lights: Lighting mode, see :class:`LightingMode`.
        light_intensity: Emission strength of each added light.

    Raises:
        ValueError: If *fov* is not finite, or
            *light_intensity* is negative.
        InvalidAngleError: If *angle* has a length other than 1 or 3.
        InvalidRotationOrderError: If *order_rotation* is not a
            permutation of the three axes.
        InvalidLightingModeError: If *lights* names no mode.
    """

    fov: float | None = None
    angle: float | Sequence[float] = (0.0, 0.0, 0.0)
    order_rotation: Sequence[AxisSpec] = DEFAULT_ORDER
    lights: LightingMode | str = LightingMode.TOP
    light_intensity: float = DEFAULT_LIGHT_INTENSITY

    def __post_init__(self) -> None:
        if self.fov is not None:
            self.fov = float(self.fov)
            if not math.isfinite(self.fov):
                raise ValueError(
                    f"fov must be a finite angle, got {self.fov}"
                )
        rotation = normalise_rotation(self.angle, self.order_rotation)
        self.angle = rotation.angles
        self.order_rotation = rotation.order
        self.lights = LightingMode.parse(self.lights)
        self.light_intensity = float(self.light_intensity)
        if self.light_intensity < 0:
            raise ValueError(
                f"light_intensity must be non-negative, "
                f"got {self.light_intensity}"
            )

    @property
    def rotation(self) -> Rotation:
        """The rotation described by :attr:`angle` and :attr:`order_rotation`."""
        return Rotation(self.angle, order=self.order_rotation)  # type: ignore[arg-type]

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        d: dict = {}
        for field_name, default in _field_defaults(type(self)).items():
            val = getattr(self, field_name)
            if isinstance(val, tuple):
                if val != tuple(default):
                    d[field_name] = list(val)
            elif val != default:
                d[field_name] = str(val) if field_name == "lights" else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> FramingOptions:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that name no field.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ValueError(
                f"unknown framing option(s): {', '.join(sorted(unknown))}"
            )
        return cls(**d)
