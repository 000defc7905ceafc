"""Tests for the camera basis and perspective projection."""

import numpy as np
import pytest

from molframe.model import CameraSpec
from molframe.rendering.projection import camera_basis, project


class TestCameraBasis:
    def test_camera_on_z_axis(self):
        cam = CameraSpec(fov=30.0, lookfrom=(0.0, 0.0, 10.0))
        np.testing.assert_allclose(
            camera_basis(cam),
            [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, -1.0]],
            atol=1e-14,
        )

    def test_basis_is_orthonormal(self):
        cam = CameraSpec(fov=30.0, lookfrom=(3.0, -2.0, 7.0), lookat=(1.0, 1.0, 0.0))
        basis = camera_basis(cam)
        np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-12)

    def test_looking_along_up_falls_back(self):
        cam = CameraSpec(fov=30.0, lookfrom=(0.0, 10.0, 0.0))
        basis = camera_basis(cam)
        np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-12)


class TestProject:
    CAMERA = CameraSpec(fov=90.0, lookfrom=(0.0, 0.0, 10.0))

    def test_origin_projects_to_centre(self):
        xy, depth, _ = project(np.array([[0.0, 0.0, 0.0]]), self.CAMERA)
        np.testing.assert_allclose(xy, [[0.0, 0.0]], atol=1e-12)
        np.testing.assert_allclose(depth, [10.0])

    def test_edge_of_view(self):
        # tan(45 deg) = 1, so at depth 10 the view spans y in [-10, 10].
        xy, _, _ = project(np.array([[0.0, 10.0, 0.0]]), self.CAMERA)
        np.testing.assert_allclose(xy, [[0.0, 1.0]], atol=1e-12)

    def test_farther_points_appear_smaller(self):
        coords = np.array([[1.0, 0.0, 0.0], [1.0, 0.0, -10.0]])
        xy, depth, _ = project(coords, self.CAMERA)
        assert depth[1] > depth[0]
        assert xy[1, 0] == pytest.approx(xy[0, 0] / 2)

    def test_projected_radii(self):
        _, _, radii = project(
            np.array([[0.0, 0.0, 0.0]]), self.CAMERA, np.array([2.0]),
        )
        np.testing.assert_allclose(radii, [0.2])

    def test_radii_default_zero(self):
        _, _, radii = project(np.array([[0.0, 0.0, 0.0]]), self.CAMERA)
        np.testing.assert_array_equal(radii, [0.0])

    def test_behind_camera_negative_depth(self):
        _, depth, _ = project(np.array([[0.0, 0.0, 20.0]]), self.CAMERA)
        assert depth[0] < 0
