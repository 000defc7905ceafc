"""Shared test fixtures for molframe."""

import pytest

from molframe.construction.primitives import (
    bond_cylinder,
    light_sphere,
    sphere,
)
from molframe.model import Primitive, Scene, Shape


class RecordingRenderer:
    """Renderer stand-in that records every call it receives."""

    def __init__(self, result="image"):
        self.result = result
        self.calls = []

    def __call__(self, scene, *, camera, **options):
        self.calls.append({"scene": scene, "camera": camera, "options": options})
        return self.result


@pytest.fixture
def single_sphere_scene():
    """One model sphere of radius 1 at (5, 0, 0)."""
    return Scene((sphere(5.0, 0.0, 0.0, radius=1.0),))


@pytest.fixture
def water_scene():
    """A bent triatomic with two bonds, an existing light and a ground plane."""
    o = (0.0, 0.0, 0.0)
    h1 = (0.76, 0.59, 0.0)
    h2 = (-0.76, 0.59, 0.0)
    return Scene((
        sphere(*o, radius=0.4, colour="red"),
        sphere(*h1, radius=0.25, colour="white"),
        sphere(*h2, radius=0.25, colour="white"),
        bond_cylinder(o, h1, radius=0.1),
        bond_cylinder(o, h2, radius=0.1),
        light_sphere(0.0, 50.0, 0.0, radius=5.0, intensity=10.0),
        Primitive(shape=Shape.OTHER, x=0.0, y=-100.0, z=0.0, radius=500.0),
    ))


@pytest.fixture
def recording_renderer():
    """Return a fresh :class:`RecordingRenderer`."""
    return RecordingRenderer()
