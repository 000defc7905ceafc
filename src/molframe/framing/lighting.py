"""Lighting rigs placed around a framed model."""

from __future__ import annotations

import logging

from molframe.construction.primitives import light_sphere
from molframe.framing.extent import Extent
from molframe.model import LightingMode, Primitive, Scene

logger = logging.getLogger("molframe.framing.lighting")


def build_lighting_rig(
    mode: LightingMode | str,
    intensity: float,
    offset_dist: float,
    widest: float,
) -> tuple[Primitive, ...]:
    """Build the light spheres for a lighting mode.

    Every light is a sphere of radius ``widest / 2``.  With
    ``d = offset_dist``:

    - ``"none"``: no lights.
    - ``"top"``: lights at ``(2d, 2d, 2d)`` and ``(-2d, 2d, -2d)``.
    - ``"bottom"`` and ``"both"``: the two top lights plus one at
      ``(0, -4d, 0)``.  The two modes give identical rigs; the
      underside light is added to the top lights, never substituted
      for them.

    Args:
        mode: Lighting mode name or member.
        intensity: Emission strength of each light.
        offset_dist: Padded model extent, see :attr:`Extent.offset_dist`.
        widest: Model extent, see :attr:`Extent.widest`.

    Returns:
        The light primitives, in placement order.

    Raises:
        InvalidLightingModeError: If *mode* names no lighting mode.
        ValueError: If *intensity* is negative.
    """
    mode = LightingMode.parse(mode)
    if intensity < 0:
        raise ValueError(f"intensity must be non-negative, got {intensity}")
    if mode is LightingMode.NONE:
        return ()

    d = offset_dist
    radius = widest / 2
    lights = [
        light_sphere(2 * d, 2 * d, 2 * d, radius, intensity),
        light_sphere(-2 * d, 2 * d, -2 * d, radius, intensity),
    ]
    if mode in (LightingMode.BOTTOM, LightingMode.BOTH):
        lights.append(light_sphere(0.0, -4 * d, 0.0, radius, intensity))
    return tuple(lights)


def add_lighting(
    scene: Scene,
    mode: LightingMode | str,
    intensity: float,
    extent: Extent,
) -> Scene:
    """Return *scene* with the lighting rig for *mode* appended.

    Existing primitives keep their order; the new lights follow them.
    """
    lights = build_lighting_rig(
        mode, intensity, extent.offset_dist, extent.widest,
    )
    logger.debug(
        "Adding %d light(s) for lighting mode %r at intensity %g",
        len(lights), str(LightingMode.parse(mode)), intensity,
    )
    if not lights:
        return scene
    return scene.add_objects(*lights)
