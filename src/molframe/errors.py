"""Exception types raised while framing a scene.

Every error subclasses :class:`ValueError` as well as
:class:`MolframeError`, so callers that already guard against invalid
input with ``except ValueError`` keep working.  Errors raised by a
renderer are never wrapped: they propagate to the caller unchanged.
"""


class MolframeError(Exception):
    """Base class for all molframe errors."""


class InvalidSceneError(MolframeError, ValueError):
    """The scene has no model geometry to frame."""


class InvalidAngleError(MolframeError, ValueError):
    """A rotation angle specification has the wrong shape or value."""


class InvalidRotationOrderError(MolframeError, ValueError):
    """A rotation order is not a permutation of the three axes."""


class InvalidLightingModeError(MolframeError, ValueError):
    """A lighting mode is not one of the recognised values."""
