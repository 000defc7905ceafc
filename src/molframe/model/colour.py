from __future__ import annotations

from collections.abc import Sequence

#: A primitive colour.
#:
#: Either a CSS colour name or hex string (``"grey"``, ``"#ff0000"``),
#: a grey level in ``[0, 1]``, or an RGB sequence with components in
#: ``[0, 1]``.  Primitives store the normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float]


def _check_unit(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"colour {name} must be in [0, 1], got {value}")
    return value


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert *colour* to an ``(r, g, b)`` tuple of floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return tuple(float(c) for c in to_rgb(colour))  # type: ignore[return-value]
        except ValueError:
            raise ValueError(f"unrecognised colour name: {colour!r}") from None

    if isinstance(colour, bool):
        raise ValueError(f"cannot interpret colour: {colour!r}")

    if isinstance(colour, (int, float)):
        grey = _check_unit("grey level", float(colour))
        return (grey, grey, grey)

    if isinstance(colour, Sequence) or hasattr(colour, "__array__"):
        components = [float(c) for c in colour]  # type: ignore[union-attr]
        if len(components) != 3:
            raise ValueError(
                f"RGB colour needs 3 components, got {len(components)}"
            )
        r, g, b = (
            _check_unit(name, value)
            for name, value in zip(("r", "g", "b"), components)
        )
        return (r, g, b)

    raise ValueError(f"cannot interpret colour: {colour!r}")
