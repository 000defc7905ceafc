"""Convenience constructors for scene primitives."""

from __future__ import annotations

from molframe._constants import LIGHT_TYPE
from molframe.model import Colour, Primitive, Shape


def sphere(
    x: float | None = 0.0,
    y: float | None = 0.0,
    z: float | None = 0.0,
    radius: float = 1.0,
    *,
    colour: Colour = "white",
    type: str = "diffuse",
) -> Primitive:
    """Create a sphere centred on ``(x, y, z)``.

    Example::

        atom = sphere(1.2, 0.0, -0.4, radius=0.35, colour="red")
    """
    return Primitive(
        shape=Shape.SPHERE, x=x, y=y, z=z, radius=radius,
        colour=colour, type=type,
    )


def cylinder(
    x: float | None = 0.0,
    y: float | None = 0.0,
    z: float | None = 0.0,
    radius: float = 1.0,
    length: float = 1.0,
    *,
    axis: tuple[float, float, float] = (0.0, 1.0, 0.0),
    colour: Colour = "white",
    type: str = "diffuse",
) -> Primitive:
    """Create a cylinder centred on ``(x, y, z)`` and aligned with *axis*.

    Args:
        x: Centre along x.
        y: Centre along y.
        z: Centre along z.
        radius: Cylinder radius.
        length: Distance between the two end caps.
        axis: Direction of the cylinder axis.  Need not be normalised.
        colour: Surface colour.
        type: Material type tag.

    Returns:
        The cylinder primitive.
    """
    return Primitive(
        shape=Shape.CYLINDER, x=x, y=y, z=z, radius=radius, length=length,
        axis=axis, colour=colour, type=type,
    )


def bond_cylinder(
    start: tuple[float, float, float],
    end: tuple[float, float, float],
    radius: float = 0.1,
    *,
    colour: Colour = "grey",
) -> Primitive:
    """Create a cylinder spanning the segment from *start* to *end*.

    Raises:
        ValueError: If *start* and *end* coincide.
    """
    direction = tuple(float(e) - float(s) for s, e in zip(start, end))
    length = sum(d * d for d in direction) ** 0.5
    if length == 0:
        raise ValueError(f"bond endpoints must differ, both are {tuple(start)}")
    centre = tuple((float(s) + float(e)) / 2 for s, e in zip(start, end))
    return cylinder(
        *centre, radius=radius, length=length, axis=direction,  # type: ignore[arg-type]
        colour=colour,
    )


def light_sphere(
    x: float,
    y: float,
    z: float,
    radius: float,
    intensity: float,
) -> Primitive:
    """Create a light-emitting sphere.

    The primitive carries both markers of a light: a set
    ``light_intensity`` and the ``"light"`` type tag.
    """
    return Primitive(
        shape=Shape.SPHERE, x=x, y=y, z=z, radius=radius,
        light_intensity=intensity, type=LIGHT_TYPE,
    )
