"""Perspective projection through a :class:`CameraSpec`."""

from __future__ import annotations

import numpy as np

from molframe.model import CameraSpec

# Default unit circle for sphere rendering (closed polygon).
_N_CIRCLE = 48
_UNIT_CIRCLE = np.column_stack([
    np.cos(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
    np.sin(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
])


def camera_basis(
    camera: CameraSpec,
    up: tuple[float, float, float] = (0.0, 1.0, 0.0),
) -> np.ndarray:
    """Return the camera's orthonormal basis as rows ``[right, up, forward]``.

    *forward* points from :attr:`CameraSpec.lookfrom` towards
    :attr:`CameraSpec.lookat`.  If *up* is parallel to the viewing
    direction, ``[0, 0, 1]`` is used as the up hint instead.
    """
    fwd = np.asarray(camera.lookat, dtype=float) - np.asarray(camera.lookfrom, dtype=float)
    fwd /= np.linalg.norm(fwd)
    u = np.asarray(up, dtype=float)

    right = np.cross(fwd, u)
    right_len = np.linalg.norm(right)
    if right_len < 1e-12:
        u = np.array([0.0, 0.0, 1.0])
        right = np.cross(fwd, u)
        right_len = np.linalg.norm(right)
    right /= right_len
    up_actual = np.cross(right, fwd)
    return np.array([right, up_actual, fwd])


def project(
    coords: np.ndarray,
    camera: CameraSpec,
    radii: np.ndarray | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Project world coordinates onto the camera's image plane.

    Screen coordinates are scaled so that the vertical field of view
    spans ``[-1, 1]``.

    Args:
        coords: Array of shape ``(n, 3)``.
        camera: The camera.
        radii: Optional array of shape ``(n,)`` of sphere radii.

    Returns:
        Tuple of ``(xy, depth, projected_radii)`` where:

        - *xy*: ``(n, 2)`` screen coordinates.
        - *depth*: ``(n,)`` distance in front of the camera along the
          viewing direction (points behind the camera are negative).
        - *projected_radii*: ``(n,)`` screen-space radii, zeros when
          *radii* is not given.
    """
    coords = np.asarray(coords, dtype=float)
    basis = camera_basis(camera)
    rel = (coords - np.asarray(camera.lookfrom, dtype=float)) @ basis.T
    depth = rel[:, 2]

    half_height = np.tan(np.deg2rad(camera.fov) / 2)
    # Guard points on or behind the camera plane; callers drop them.
    safe_depth = np.where(depth > 1e-12, depth, 1e-12)
    scale = 1.0 / (safe_depth * half_height)
    xy = rel[:, :2] * scale[:, np.newaxis]

    if radii is not None:
        projected_radii = np.asarray(radii, dtype=float) * scale
    else:
        projected_radii = np.zeros(len(depth))
    return xy, depth, projected_radii
