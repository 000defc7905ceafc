"""Shared constants used across the model and framing layers."""

DEFAULT_SPHERE_RADIUS: float = 0.5
"""Largest model-sphere radius assumed when a scene contains no spheres."""

MARGIN_DIVISOR: float = 5.0
"""Padding around the model is the widest extent divided by this (20%)."""

CAMERA_DISTANCE_FACTOR: float = 5.0
"""Camera distance along +z, as a multiple of the widest extent."""

DEFAULT_LIGHT_INTENSITY: float = 80.0
"""Emission strength of the light spheres added by the lighting rig."""

LIGHT_TYPE: str = "light"
"""Material type tag carried by light-emitting primitives."""
