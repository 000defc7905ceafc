from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from molframe._constants import CAMERA_DISTANCE_FACTOR

if TYPE_CHECKING:
    from molframe.framing.extent import Extent


@dataclass(frozen=True)
class CameraSpec:
    """Camera parameters handed to a renderer.

    Attributes:
        fov: Full field-of-view angle in degrees.
        lookfrom: Camera position.
        lookat: Point the camera is aimed at.

    Raises:
        ValueError: If *fov* is not finite, or a position does not
            have three components.
    """

    fov: float
    lookfrom: tuple[float, float, float]
    lookat: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        fov = float(self.fov)
        if not math.isfinite(fov):
            raise ValueError(f"fov must be a finite angle, got {fov}")
        object.__setattr__(self, "fov", fov)
        for name in ("lookfrom", "lookat"):
            vec = getattr(self, name)
            if len(vec) != 3:
                raise ValueError(
                    f"{name} must have 3 components, got {len(vec)}"
                )
            object.__setattr__(self, name, tuple(float(v) for v in vec))

    @classmethod
    def for_extent(cls, extent: Extent, fov: float) -> CameraSpec:
        """Place the camera on the +z axis, far enough to see *extent*.

        The camera sits at ``(0, 0, widest * 5)`` looking at the
        origin.
        """
        return cls(
            fov=fov,
            lookfrom=(0.0, 0.0, extent.widest * CAMERA_DISTANCE_FACTOR),
        )
