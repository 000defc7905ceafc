"""Tests for Primitive, Shape, and the model-primitive predicates."""

import math

import pytest

from molframe.model.primitive import (
    Primitive,
    Shape,
    is_model_primitive,
    is_model_sphere,
)


class TestShape:
    def test_members(self):
        assert Shape("sphere") is Shape.SPHERE
        assert Shape("cylinder") is Shape.CYLINDER

    def test_coerce_known(self):
        assert Shape.coerce("Sphere") is Shape.SPHERE

    def test_coerce_unknown_is_other(self):
        assert Shape.coerce("xz_rect") is Shape.OTHER

    def test_coerce_member(self):
        assert Shape.coerce(Shape.CYLINDER) is Shape.CYLINDER


class TestPrimitive:
    def test_defaults(self):
        p = Primitive(shape=Shape.SPHERE)
        assert (p.x, p.y, p.z) == (0.0, 0.0, 0.0)
        assert p.radius == 1.0
        assert p.light_intensity is None
        assert p.type == "diffuse"
        assert p.colour == (1.0, 1.0, 1.0)
        assert p.axis == (0.0, 1.0, 0.0)

    def test_shape_string_coerced(self):
        p = Primitive(shape="cylinder")  # type: ignore[arg-type]
        assert p.shape is Shape.CYLINDER

    def test_colour_normalised(self):
        p = Primitive(shape=Shape.SPHERE, colour="red")  # type: ignore[arg-type]
        assert p.colour == (1.0, 0.0, 0.0)

    def test_nan_coordinate_is_missing(self):
        p = Primitive(shape=Shape.SPHERE, x=math.nan)
        assert p.x is None
        assert not p.has_position

    def test_position_uses_nan_for_missing(self):
        p = Primitive(shape=Shape.SPHERE, x=1.0, y=None, z=3.0)
        x, y, z = p.position
        assert x == 1.0
        assert math.isnan(y)
        assert z == 3.0

    def test_nan_intensity_is_not_light(self):
        p = Primitive(shape=Shape.SPHERE, light_intensity=math.nan)
        assert p.light_intensity is None
        assert not p.is_light

    def test_is_light(self):
        p = Primitive(shape=Shape.SPHERE, light_intensity=5.0)
        assert p.is_light

    def test_is_frozen(self):
        p = Primitive(shape=Shape.SPHERE)
        with pytest.raises(AttributeError):
            p.x = 2.0  # type: ignore[misc]

    def test_with_position_returns_new(self):
        p = Primitive(shape=Shape.SPHERE, radius=0.3)
        moved = p.with_position(1.0, 2.0, 3.0)
        assert (moved.x, moved.y, moved.z) == (1.0, 2.0, 3.0)
        assert moved.radius == 0.3
        assert (p.x, p.y, p.z) == (0.0, 0.0, 0.0)


class TestPrimitiveValidation:
    def test_negative_radius_raises(self):
        with pytest.raises(ValueError, match="radius"):
            Primitive(shape=Shape.SPHERE, radius=-1.0)

    def test_negative_intensity_raises(self):
        with pytest.raises(ValueError, match="light_intensity"):
            Primitive(shape=Shape.SPHERE, light_intensity=-1.0)

    def test_negative_length_raises(self):
        with pytest.raises(ValueError, match="length"):
            Primitive(shape=Shape.CYLINDER, length=-0.5)

    def test_zero_axis_raises(self):
        with pytest.raises(ValueError, match="axis"):
            Primitive(shape=Shape.CYLINDER, axis=(0.0, 0.0, 0.0))

    def test_short_axis_raises(self):
        with pytest.raises(ValueError, match="3 components"):
            Primitive(shape=Shape.CYLINDER, axis=(1.0, 0.0))  # type: ignore[arg-type]


class TestPrimitiveDict:
    def test_defaults_omitted(self):
        assert Primitive(shape=Shape.SPHERE).to_dict() == {"shape": "sphere"}

    def test_non_defaults_included(self):
        p = Primitive(shape=Shape.SPHERE, x=1.5, radius=0.4, colour=(0.5, 0.5, 0.5))
        d = p.to_dict()
        assert d["x"] == 1.5
        assert d["radius"] == 0.4
        assert d["colour"] == [0.5, 0.5, 0.5]

    def test_missing_coordinate_written_as_none(self):
        d = Primitive(shape=Shape.SPHERE, z=None).to_dict()
        assert d["z"] is None

    def test_from_dict_restores(self):
        p = Primitive(
            shape=Shape.CYLINDER, x=1.0, y=-2.0, z=0.5, radius=0.1,
            length=2.0, axis=(1.0, 0.0, 0.0),
        )
        assert Primitive.from_dict(p.to_dict()) == p

    def test_from_dict_aliases(self):
        p = Primitive.from_dict({
            "shape": "sphere", "lightintensity": 80, "color": [1, 0, 0],
        })
        assert p.light_intensity == 80.0
        assert p.colour == (1.0, 0.0, 0.0)

    def test_from_dict_ignores_unknown_keys(self):
        p = Primitive.from_dict({"shape": "sphere", "fuzz": 0.2})
        assert p.shape is Shape.SPHERE


class TestModelPredicates:
    def test_sphere_and_cylinder_are_model(self):
        assert is_model_primitive(Primitive(shape=Shape.SPHERE))
        assert is_model_primitive(Primitive(shape=Shape.CYLINDER))

    def test_other_shape_is_not_model(self):
        assert not is_model_primitive(Primitive(shape=Shape.OTHER))

    def test_light_is_not_model(self):
        assert not is_model_primitive(
            Primitive(shape=Shape.SPHERE, light_intensity=1.0)
        )

    def test_model_sphere_excludes_light_type(self):
        assert is_model_sphere(Primitive(shape=Shape.SPHERE))
        assert not is_model_sphere(Primitive(shape=Shape.SPHERE, type="light"))
        assert not is_model_sphere(Primitive(shape=Shape.CYLINDER))
