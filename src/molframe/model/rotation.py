from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral, Real

from molframe.errors import InvalidAngleError, InvalidRotationOrderError

#: An axis given by index (``0``, ``1``, ``2``) or name (``"x"``, ``"y"``, ``"z"``).
AxisSpec = int | str

_AXIS_NAMES: dict[str, int] = {"x": 0, "y": 1, "z": 2}

DEFAULT_ORDER: tuple[int, int, int] = (0, 1, 2)
"""Rotate about x, then y, then z."""


def _normalise_axis(axis: AxisSpec) -> int:
    if isinstance(axis, str):
        try:
            return _AXIS_NAMES[axis.lower()]
        except KeyError:
            raise InvalidRotationOrderError(
                f"unrecognised axis name {axis!r}, expected 'x', 'y' or 'z'"
            )
    if isinstance(axis, bool) or not isinstance(axis, Integral):
        raise InvalidRotationOrderError(
            f"axis must be an index or name, got {axis!r}"
        )
    return int(axis)


def normalise_order(order: Sequence[AxisSpec]) -> tuple[int, int, int]:
    """Convert a rotation order to a tuple of axis indices.

    Args:
        order: A permutation of the three axes, as indices or names.

    Returns:
        A tuple of three distinct axis indices.

    Raises:
        InvalidRotationOrderError: If *order* is not a permutation of
            ``(0, 1, 2)``.
    """
    axes = tuple(_normalise_axis(a) for a in order)
    if sorted(axes) != [0, 1, 2]:
        raise InvalidRotationOrderError(
            f"order must be a permutation of the axes (0, 1, 2), got {tuple(order)}"
        )
    return axes  # type: ignore[return-value]


@dataclass(frozen=True)
class Rotation:
    """Per-axis rotation angles and the order in which to apply them.

    Rotations about different axes do not commute, so *order* is part
    of the value: ``Rotation((30, 30, 0), order=(0, 1, 2))`` and
    ``Rotation((30, 30, 0), order=(1, 0, 2))`` move a generic point to
    different places.

    Use :meth:`about_vertical` or :meth:`from_angles` to build one, or
    :func:`normalise_rotation` to accept either form from a caller.

    Attributes:
        angles: Degrees about the x, y and z axes.
        order: Axis indices in application order.

    Raises:
        InvalidAngleError: If *angles* does not have three finite
            components.
        InvalidRotationOrderError: If *order* is not a permutation of
            the three axes.
    """

    angles: tuple[float, float, float] = (0.0, 0.0, 0.0)
    order: tuple[int, int, int] = DEFAULT_ORDER

    def __post_init__(self) -> None:
        if len(self.angles) != 3:
            raise InvalidAngleError(
                f"angles must have 3 components, got {len(self.angles)}"
            )
        angles = tuple(float(a) for a in self.angles)
        if not all(math.isfinite(a) for a in angles):
            raise InvalidAngleError(f"angles must be finite, got {angles}")
        object.__setattr__(self, "angles", angles)
        object.__setattr__(self, "order", normalise_order(self.order))

    @classmethod
    def about_vertical(
        cls,
        degrees: float,
        order: Sequence[AxisSpec] = DEFAULT_ORDER,
    ) -> Rotation:
        """Rotate about the vertical (y) axis only."""
        return cls((0.0, degrees, 0.0), order=tuple(order))

    @classmethod
    def from_angles(
        cls,
        x: float,
        y: float,
        z: float,
        order: Sequence[AxisSpec] = DEFAULT_ORDER,
    ) -> Rotation:
        """Rotate about all three axes."""
        return cls((x, y, z), order=tuple(order))

    @property
    def is_identity(self) -> bool:
        """Whether every angle is exactly zero."""
        return not any(self.angles)

    def steps(self) -> list[tuple[int, float]]:
        """Return ``(axis, degrees)`` pairs in application order."""
        return [(axis, self.angles[axis]) for axis in self.order]


def normalise_rotation(
    angle: float | Sequence[float] | Rotation,
    order: Sequence[AxisSpec] = DEFAULT_ORDER,
) -> Rotation:
    """Build a :class:`Rotation` from a caller's angle specification.

    A single number, or a sequence with one element, is a rotation
    about the vertical axis.  A sequence of three numbers gives the
    rotation about x, y and z.  A :class:`Rotation` is returned
    unchanged, ignoring *order*.

    Args:
        angle: Degrees, as a scalar, a 1-sequence or a 3-sequence.
        order: Axis application order.

    Returns:
        The normalised rotation.

    Raises:
        InvalidAngleError: If *angle* has a length other than 1 or 3.
        InvalidRotationOrderError: If *order* is not a permutation of
            the three axes.
    """
    if isinstance(angle, Rotation):
        return angle
    if isinstance(angle, Real) and not isinstance(angle, bool):
        return Rotation.about_vertical(angle, order=order)
    if isinstance(angle, str):
        raise InvalidAngleError(f"angle must be numeric, got {angle!r}")

    values = list(angle)
    if len(values) == 1:
        return Rotation.about_vertical(values[0], order=order)
    if len(values) == 3:
        return Rotation.from_angles(*values, order=order)
    raise InvalidAngleError(
        f"angle must have 1 or 3 components, got {len(values)}"
    )
