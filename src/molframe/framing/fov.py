"""Field-of-view solver."""

from __future__ import annotations

import logging
import math

from molframe.framing.extent import Extent

logger = logging.getLogger("molframe.framing.fov")


def solve_fov(extent: Extent, fov: float | None = None) -> float:
    """Return the camera field of view in degrees.

    An explicit *fov* is returned unchanged.  Otherwise the field of
    view is twice the angle subtended by the padded extent
    (:attr:`Extent.offset_dist`) at a camera
    :attr:`Extent.camera_distance` away, so the whole model, margin
    included, is visible.

    The extent must be measured before any rotation is applied to the
    scene.

    Args:
        extent: Model extent.
        fov: Optional caller override, in degrees.

    Returns:
        Full field-of-view angle in degrees.
    """
    if fov is not None:
        logger.debug("Using caller field of view %.4g deg", fov)
        return fov
    half_angle = math.atan2(extent.offset_dist, extent.camera_distance)
    solved = half_angle / math.pi * 180 * 2
    logger.debug("Solved field of view %.4g deg", solved)
    return solved
