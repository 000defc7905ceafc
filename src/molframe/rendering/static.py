"""Static matplotlib preview renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

from molframe.model import CameraSpec, Colour, Scene, Shape, normalise_colour
from molframe.rendering.projection import _UNIT_CIRCLE, project

logger = logging.getLogger("molframe.rendering.static")

# Options understood by path-tracing renderers that have no meaning
# for a flat-shaded preview.
_RAYTRACER_OPTIONS = frozenset({
    "ambient_light",
    "aperture",
    "clamp_value",
    "debug_channel",
    "focal_distance",
    "max_depth",
    "min_variance",
    "parallel",
    "progress",
    "sample_method",
    "samples",
    "tonemap",
})

# Brightness of a surface facing away from every light.
_AMBIENT = 0.3


def _shade(
    colour: tuple[float, float, float],
    centre: np.ndarray,
    eye: np.ndarray,
    light_pos: np.ndarray,
    light_weights: np.ndarray,
) -> tuple[float, float, float]:
    """Lambert-shade *colour* at *centre* for the surface facing the eye.

    Unlit scenes are drawn at full brightness.
    """
    if len(light_pos) == 0:
        return colour
    normal = eye - centre
    normal /= np.linalg.norm(normal)
    to_light = light_pos - centre
    to_light /= np.linalg.norm(to_light, axis=1)[:, np.newaxis]
    diffuse = float(np.sum(np.clip(to_light @ normal, 0.0, None) * light_weights))
    brightness = _AMBIENT + (1.0 - _AMBIENT) * diffuse
    r, g, b = colour
    return (r * brightness, g * brightness, b * brightness)


def _light_arrays(scene: Scene) -> tuple[np.ndarray, np.ndarray]:
    """Return positions and normalised weights of the positioned lights."""
    lights = [p for p in scene.lights if p.has_position]
    if not lights:
        return np.empty((0, 3)), np.empty(0)
    positions = np.array([p.position for p in lights], dtype=float)
    intensities = np.array([p.light_intensity for p in lights], dtype=float)
    total = intensities.sum()
    if total <= 0:
        return positions, np.zeros(len(lights))
    return positions, intensities / total


def _cylinder_polygon(
    start_xy: np.ndarray,
    end_xy: np.ndarray,
    start_r: float,
    end_r: float,
) -> np.ndarray | None:
    """Screen-space quadrilateral for a cylinder seen side-on."""
    d = end_xy - start_xy
    length = np.linalg.norm(d)
    if length < 1e-12:
        return None
    perp = np.array([-d[1], d[0]]) / length
    return np.array([
        start_xy + perp * start_r,
        end_xy + perp * end_r,
        end_xy - perp * end_r,
        start_xy - perp * start_r,
    ])


def _collect_polygons(
    scene: Scene,
    camera: CameraSpec,
) -> tuple[list[np.ndarray], list[tuple[float, float, float]], list[float]]:
    """Project every visible model primitive to a shaded polygon.

    Lights, non-model shapes, primitives with missing coordinates and
    anything behind the camera are skipped.
    """
    eye = np.asarray(camera.lookfrom, dtype=float)
    light_pos, light_weights = _light_arrays(scene)

    verts: list[np.ndarray] = []
    colours: list[tuple[float, float, float]] = []
    depths: list[float] = []

    for p in scene.model_subset():
        if not p.has_position:
            continue
        centre = np.array(p.position, dtype=float)

        if p.shape == Shape.SPHERE:
            xy, depth, rad = project(
                centre[np.newaxis, :], camera, np.array([p.radius]),
            )
            if depth[0] <= 0:
                continue
            poly = xy[0] + _UNIT_CIRCLE * rad[0]
            d = depth[0]
        else:
            axis = np.array(p.axis, dtype=float)
            half = axis / np.linalg.norm(axis) * p.length / 2
            ends = np.array([centre - half, centre + half])
            xy, depth, rad = project(ends, camera, np.full(2, p.radius))
            if np.any(depth <= 0):
                continue
            poly = _cylinder_polygon(xy[0], xy[1], rad[0], rad[1])
            if poly is None:
                continue
            d = float(depth.mean())

        verts.append(poly)
        colours.append(_shade(p.colour, centre, eye, light_pos, light_weights))
        depths.append(float(d))

    return verts, colours, depths


def render_mpl(
    scene: Scene,
    camera: CameraSpec,
    *,
    width: int = 400,
    height: int = 400,
    dpi: int = 100,
    background: Colour = "black",
    output: str | Path | None = None,
    show: bool | None = None,
    **options: Any,
) -> Figure:
    """Render a framed scene as a flat-shaded matplotlib figure.

    A quick preview of what a path tracer would produce from the same
    scene and camera.  Spheres and cylinders are projected through a
    perspective camera and painted back to front; each surface is
    shaded by the light spheres in the scene.  Lights themselves are
    not drawn.

    Example usage::

        framed = frame_scene(scene, lights="both")
        fig = render_mpl(framed.scene, camera=framed.camera,
                         width=800, height=600, output="preview.png")

    Args:
        scene: The scene to draw.
        camera: Camera position and field of view.  The field of view
            is the vertical angle; the horizontal one follows from
            *width* / *height*.
        width: Image width in pixels.
        height: Image height in pixels.
        dpi: Resolution used to convert pixels to figure inches.
        background: Background colour (CSS name, hex string, grey
            float, or RGB tuple).
        output: Optional file path to save the figure.  The format is
            inferred from the extension.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving to a file.
        **options: Path-tracer options such as ``samples`` or
            ``clamp_value`` are accepted and ignored, so the same
            options can be passed to either kind of renderer.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.

    Raises:
        TypeError: If an option is neither a parameter of this
            function nor a recognised path-tracer option.
        ValueError: If *width* or *height* is not positive, the
            camera fov is outside (0, 180) degrees, or the camera sits
            on its look-at point.
    """
    unknown = options.keys() - _RAYTRACER_OPTIONS
    if unknown:
        raise TypeError(
            f"Unknown renderer option(s): {', '.join(sorted(unknown))}"
        )
    if options:
        logger.debug(
            "Ignoring path-tracer option(s) in preview: %s", sorted(options),
        )
    if width <= 0 or height <= 0:
        raise ValueError(
            f"width and height must be positive, got {width}x{height}"
        )
    if not 0 < camera.fov < 180:
        raise ValueError(
            f"preview needs a perspective fov in (0, 180) degrees, "
            f"got {camera.fov}"
        )
    if camera.lookfrom == camera.lookat:
        raise ValueError(
            f"preview camera has no viewing direction: lookfrom and "
            f"lookat are both {camera.lookfrom}"
        )

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    ax.set_facecolor(bg_rgb)
    aspect = width / height
    ax.set_xlim(-aspect, aspect)
    ax.set_ylim(-1.0, 1.0)
    ax.set_aspect("equal")
    ax.axis("off")

    verts, colours, depths = _collect_polygons(scene, camera)
    if verts:
        # Painter's algorithm: farthest first.
        order = np.argsort(depths)[::-1]
        pc = PolyCollection(
            [verts[i] for i in order],
            facecolors=[colours[i] for i in order],
            edgecolors="none",
        )
        ax.add_collection(pc)
    logger.debug("Drew %d primitive(s) of %d", len(verts), len(scene))

    if output is not None:
        fig.savefig(str(output), dpi=dpi, facecolor=bg_rgb)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
