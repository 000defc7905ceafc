"""Model extent: the isotropic size that drives camera and light placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from molframe._constants import (
    CAMERA_DISTANCE_FACTOR,
    DEFAULT_SPHERE_RADIUS,
    MARGIN_DIVISOR,
)
from molframe.errors import InvalidSceneError
from molframe.model import Scene, is_model_sphere

logger = logging.getLogger("molframe.framing.extent")


@dataclass(frozen=True)
class Extent:
    """Size of the model geometry in a scene.

    Attributes:
        widest: Largest absolute coordinate among the per-axis
            minima and maxima of the model primitives.  One scalar is
            used for all three axes.
        max_sphere_radii: Largest radius among the model spheres, or
            0.5 when the model has no spheres.
    """

    widest: float
    max_sphere_radii: float = DEFAULT_SPHERE_RADIUS

    @property
    def offset_dist(self) -> float:
        """Padded extent: ``widest`` plus a 20% margin plus the largest sphere radius."""
        return self.widest + self.widest / MARGIN_DIVISOR + self.max_sphere_radii

    @property
    def camera_distance(self) -> float:
        """Distance of the camera from the origin along +z."""
        return self.widest * CAMERA_DISTANCE_FACTOR


def model_subset(scene: Scene) -> Scene:
    """Select the primitives that make up the molecule geometry.

    Spheres and cylinders without a light intensity are kept, in
    order.  Lights already present in *scene* and any other shapes
    (ground planes, boxes, ...) are dropped.
    """
    return scene.model_subset()


def compute_extent(scene: Scene) -> Extent:
    """Compute the :class:`Extent` of the model geometry in *scene*.

    Missing coordinates are ignored rather than treated as zero, so
    that an incomplete primitive cannot shrink the apparent model
    size.

    Args:
        scene: The full scene.  Lights and non-model shapes are
            filtered out with :func:`model_subset` before measuring.

    Returns:
        The model extent.

    Raises:
        InvalidSceneError: If the scene has no model primitives, or none
            of them has a coordinate.
    """
    model = model_subset(scene)
    if len(model) == 0:
        raise InvalidSceneError(
            f"scene has no model geometry to frame: none of its "
            f"{len(scene)} primitive(s) is a sphere or cylinder "
            f"without a light intensity"
        )

    coords = model.coords()
    present = ~np.isnan(coords)
    if not present.any():
        raise InvalidSceneError(
            f"none of the {len(model)} model primitive(s) has a coordinate"
        )

    bounds = []
    for axis in range(3):
        # Axes with no coordinate at all contribute no bounds.
        if present[:, axis].any():
            values = coords[:, axis]
            bounds.extend([np.nanmin(values), np.nanmax(values)])
    widest = float(np.max(np.abs(bounds)))

    sphere_radii = [p.radius for p in model if is_model_sphere(p)]
    sphere_radii = [r for r in sphere_radii if not np.isnan(r)]
    if sphere_radii:
        max_sphere_radii = float(max(sphere_radii))
    else:
        max_sphere_radii = DEFAULT_SPHERE_RADIUS

    extent = Extent(widest=widest, max_sphere_radii=max_sphere_radii)
    logger.debug(
        "Model extent from %d primitive(s): widest=%.4g, "
        "max_sphere_radii=%.4g, offset_dist=%.4g",
        len(model), extent.widest, extent.max_sphere_radii,
        extent.offset_dist,
    )
    return extent
