"""Tests for the lighting rig builder."""

import pytest

from molframe.construction.primitives import sphere
from molframe.errors import InvalidLightingModeError
from molframe.framing.extent import Extent
from molframe.framing.lighting import add_lighting, build_lighting_rig
from molframe.model import LightingMode, Scene, Shape


def _positions(lights):
    return [p.position for p in lights]


class TestBuildLightingRig:
    def test_none_adds_nothing(self):
        assert build_lighting_rig("none", 80.0, 7.0, 5.0) == ()

    def test_top_positions(self):
        lights = build_lighting_rig("top", 80.0, 7.0, 5.0)
        assert _positions(lights) == [(14.0, 14.0, 14.0), (-14.0, 14.0, -14.0)]

    def test_bottom_adds_underside_light_to_top_pair(self):
        lights = build_lighting_rig("bottom", 80.0, 7.0, 5.0)
        assert _positions(lights) == [
            (14.0, 14.0, 14.0),
            (-14.0, 14.0, -14.0),
            (0.0, -28.0, 0.0),
        ]

    def test_bottom_and_both_identical(self):
        bottom = build_lighting_rig(LightingMode.BOTTOM, 50.0, 3.0, 2.0)
        both = build_lighting_rig(LightingMode.BOTH, 50.0, 3.0, 2.0)
        assert bottom == both

    @pytest.mark.parametrize("mode", ["top", "bottom", "both"])
    def test_light_properties(self, mode):
        for light in build_lighting_rig(mode, 65.0, 7.0, 5.0):
            assert light.shape is Shape.SPHERE
            assert light.radius == 2.5
            assert light.light_intensity == 65.0
            assert light.type == "light"
            assert light.is_light

    def test_unknown_mode_raises(self):
        with pytest.raises(InvalidLightingModeError, match="'above'"):
            build_lighting_rig("above", 80.0, 7.0, 5.0)

    def test_none_object_is_not_a_mode(self):
        with pytest.raises(InvalidLightingModeError, match="None"):
            build_lighting_rig(None, 80.0, 7.0, 5.0)  # type: ignore[arg-type]

    def test_negative_intensity_raises(self):
        with pytest.raises(ValueError, match="intensity"):
            build_lighting_rig("top", -1.0, 7.0, 5.0)


class TestAddLighting:
    EXTENT = Extent(widest=5.0, max_sphere_radii=1.0)

    @pytest.mark.parametrize(
        "mode, n_added", [("none", 0), ("top", 2), ("bottom", 3), ("both", 3)],
    )
    def test_light_counts(self, single_sphere_scene, mode, n_added):
        lit = add_lighting(single_sphere_scene, mode, 80.0, self.EXTENT)
        assert len(lit) == len(single_sphere_scene) + n_added

    def test_none_returns_scene_unchanged(self, single_sphere_scene):
        lit = add_lighting(single_sphere_scene, "none", 80.0, self.EXTENT)
        assert lit is single_sphere_scene

    def test_lights_appended_after_existing(self, water_scene):
        lit = add_lighting(water_scene, "top", 80.0, self.EXTENT)
        n = len(water_scene)
        assert lit.primitives[:n] == water_scene.primitives
        assert all(p.type == "light" for p in lit.primitives[n:])

    def test_input_not_modified(self):
        scene = Scene((sphere(1.0, 0.0, 0.0),))
        add_lighting(scene, "both", 80.0, self.EXTENT)
        assert len(scene) == 1
