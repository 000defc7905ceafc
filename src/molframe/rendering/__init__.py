"""Rendering: flat-shaded matplotlib preview of a framed scene."""

from molframe.rendering.static import render_mpl

__all__ = [
    "render_mpl",
]
