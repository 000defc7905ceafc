"""Rotation of a whole scene about the origin, in a caller-given axis order."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

import numpy as np

from molframe.model import Primitive, Rotation, Scene, Shape

logger = logging.getLogger("molframe.framing.rotation")

#: Rotate a 3-vector about one axis: ``rotate(point, axis, degrees)``.
RotateFn = Callable[[np.ndarray, int, float], np.ndarray]


def _rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


def _rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


def _rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [  c,  -s, 0.0],
        [  s,   c, 0.0],
        [0.0, 0.0, 1.0],
    ])


_AXIS_MATRICES = (_rotation_x, _rotation_y, _rotation_z)


def rotate_point(point: np.ndarray, axis: int, degrees: float) -> np.ndarray:
    """Rotate *point* about the origin by *degrees* around one axis.

    Rotations are right-handed: a positive angle about z turns +x
    towards +y.

    Args:
        point: A 3-vector.
        axis: Axis index (0 = x, 1 = y, 2 = z).
        degrees: Rotation angle in degrees.

    Returns:
        The rotated 3-vector.
    """
    matrix = _AXIS_MATRICES[axis](np.deg2rad(degrees))
    return matrix @ np.asarray(point, dtype=float)


def _rotate_primitive(
    primitive: Primitive,
    steps: list[tuple[int, float]],
    rotate: RotateFn,
) -> Primitive:
    if not primitive.has_position:
        return primitive
    position = np.array(primitive.position, dtype=float)
    direction = np.array(primitive.axis, dtype=float)
    is_cylinder = primitive.shape == Shape.CYLINDER
    for axis, degrees in steps:
        position = rotate(position, axis, degrees)
        if is_cylinder:
            direction = rotate(direction, axis, degrees)
    x, y, z = (float(c) for c in position)
    if is_cylinder:
        return replace(
            primitive, x=x, y=y, z=z,
            axis=tuple(float(c) for c in direction),
        )
    return primitive.with_position(x, y, z)


def rotate_scene(
    scene: Scene,
    rotation: Rotation,
    rotate: RotateFn = rotate_point,
) -> Scene:
    """Rotate every primitive in *scene* about the origin.

    The single-axis rotations are applied in ``rotation.order``.
    Cylinders have their axis direction rotated along with their
    centre.  Primitives with a missing coordinate are left where
    they are.

    Args:
        scene: The full scene, lights included.
        rotation: Angles and axis order.
        rotate: Single-axis rotation transform.  Defaults to
            :func:`rotate_point`.

    Returns:
        The rotated scene, or *scene* itself when every angle is
        zero.
    """
    if rotation.is_identity:
        return scene
    steps = rotation.steps()
    logger.debug(
        "Rotating %d primitive(s): %s",
        len(scene),
        ", then ".join(f"{deg:g} deg about {'xyz'[axis]}" for axis, deg in steps),
    )
    return scene.map_primitives(
        lambda p: _rotate_primitive(p, steps, rotate)
    )
