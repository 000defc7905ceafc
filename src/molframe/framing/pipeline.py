"""Automatic framing and the single renderer call: :func:`render_model`."""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from dataclasses import dataclass, replace
from typing import Any, Protocol

from molframe.framing.extent import Extent, compute_extent
from molframe.framing.fov import solve_fov
from molframe.framing.lighting import add_lighting
from molframe.framing.rotation import RotateFn, rotate_point, rotate_scene
from molframe.model import CameraSpec, FramingOptions, Scene

logger = logging.getLogger("molframe.framing.pipeline")

_OPTION_FIELDS = frozenset(f.name for f in dataclasses.fields(FramingOptions))
_DEFAULT_OPTIONS = FramingOptions()

# Fields where ``None`` is a meaningful value (not just "unset").
_NULLABLE_OPTION_FIELDS = frozenset(
    name for name, tp in typing.get_type_hints(FramingOptions).items()
    if typing.get_origin(tp) is types.UnionType
    and type(None) in typing.get_args(tp)
)


class Renderer(Protocol):
    """A callable that turns a framed scene into an image.

    The renderer receives the lit, rotated scene, the camera, and
    every option the caller passed to :func:`render_model` that is not
    a framing option.  Its return value is handed back to the caller
    untouched.
    """

    def __call__(
        self, scene: Scene, *, camera: CameraSpec, **options: Any,
    ) -> Any: ...


@dataclass(frozen=True)
class FramedScene:
    """A scene ready to render.

    Attributes:
        scene: The rotated scene with its lighting rig appended.
        camera: Camera placed to show the whole model.
        extent: Model extent measured before rotation.
    """

    scene: Scene
    camera: CameraSpec
    extent: Extent


def _resolve_options(
    options: FramingOptions | None,
    **kwargs: Any,
) -> FramingOptions:
    """Build :class:`FramingOptions` from an optional base plus overrides.

    Any kwarg whose name matches a ``FramingOptions`` field replaces
    that field's value.  Passing ``None`` preserves the base value,
    except for fields where ``None`` is meaningful (``fov``).

    Raises:
        TypeError: If a kwarg name does not match any ``FramingOptions``
            field.
    """
    unknown = kwargs.keys() - _OPTION_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown framing keyword argument(s): {', '.join(sorted(unknown))}"
        )

    base = options if options is not None else _DEFAULT_OPTIONS
    overrides = {
        k: v for k, v in kwargs.items()
        if v is not None or k in _NULLABLE_OPTION_FIELDS
    }
    if overrides or options is None:
        # replace() re-runs validation, so overrides are checked here.
        return replace(base, **overrides)
    return base


def frame_scene(
    scene: Scene,
    options: FramingOptions | None = None,
    *,
    rotate: RotateFn = rotate_point,
    **option_kwargs: Any,
) -> FramedScene:
    """Derive the camera and lighting for *scene*.

    The stages run in a fixed order, each returning a new scene:

    1. Measure the model extent (lights and non-model shapes are
       ignored).
    2. Solve the field of view, unless one is given.
    3. Rotate the whole scene, if any angle is non-zero.
    4. Append the lighting rig.

    The extent, and everything derived from it, is measured before
    the rotation and is not updated afterwards.

    Args:
        scene: The scene to frame.  It is not modified.
        options: Base framing options.  ``None`` uses the defaults.
        rotate: Single-axis rotation transform used by the rotation
            stage.
        **option_kwargs: Any :class:`FramingOptions` field name
            (``fov``, ``angle``, ``order_rotation``, ``lights``,
            ``light_intensity``) to override the matching option.

    Returns:
        The framed scene, its camera and the measured extent.

    Raises:
        InvalidSceneError: If *scene* has no model geometry.
        InvalidAngleError: If *angle* has a length other than 1 or 3.
        InvalidRotationOrderError: If *order_rotation* is not a
            permutation of the three axes.
        InvalidLightingModeError: If *lights* names no lighting mode.
        TypeError: If an unknown keyword argument is given.
    """
    resolved = _resolve_options(options, **option_kwargs)

    extent = compute_extent(scene)
    fov = solve_fov(extent, resolved.fov)
    camera = CameraSpec.for_extent(extent, fov)

    framed = rotate_scene(scene, resolved.rotation, rotate=rotate)
    framed = add_lighting(
        framed, resolved.lights, resolved.light_intensity, extent,
    )
    return FramedScene(scene=framed, camera=camera, extent=extent)


def render_model(
    scene: Scene,
    options: FramingOptions | None = None,
    *,
    renderer: Renderer | None = None,
    rotate: RotateFn = rotate_point,
    **kwargs: Any,
) -> Any:
    """Frame *scene* automatically and render it.

    The camera field of view and position and a lighting rig are all
    derived from the model geometry, so a scene straight from a scene
    generator can be rendered without any manual camera work.  Only
    spheres and cylinders are measured: adding other shapes (a ground
    plane, say) does not change the framing.

    Example usage::

        from molframe import Scene, render_model, sphere

        scene = Scene((
            sphere(0.0, 0.0, 0.0, radius=0.4, colour="grey"),
            sphere(1.1, 0.6, 0.0, radius=0.25, colour="white"),
        ))

        # Preview with matplotlib:
        fig = render_model(scene, output="preview.png")

        # Light from below as well, rotated 30 degrees about y then z:
        fig = render_model(scene, lights="both", angle=(0, 30, 30))

        # Hand the framed scene to a path tracer, forwarding its
        # options untouched:
        image = render_model(
            scene, renderer=my_tracer, samples=400, width=800,
            height=800, clamp_value=10,
        )

    Args:
        scene: The scene to render.
        options: Base framing options.  ``None`` uses the defaults.
        renderer: Callable that produces the image, see
            :class:`Renderer`.  Defaults to the matplotlib preview
            renderer :func:`~molframe.rendering.static.render_mpl`.
        rotate: Single-axis rotation transform.
        **kwargs: :class:`FramingOptions` field names override the
            framing options.  Everything else is forwarded to the
            renderer without inspection.

    Returns:
        Whatever the renderer returns.

    Raises:
        InvalidSceneError: If *scene* has no model geometry.
        InvalidAngleError: If *angle* has a length other than 1 or 3.
        InvalidRotationOrderError: If *order_rotation* is not a
            permutation of the three axes.
        InvalidLightingModeError: If *lights* names no lighting mode.

    Any exception raised by the renderer propagates unchanged.
    """
    option_kwargs = {k: v for k, v in kwargs.items() if k in _OPTION_FIELDS}
    render_options = {
        k: v for k, v in kwargs.items() if k not in _OPTION_FIELDS
    }

    framed = frame_scene(scene, options, rotate=rotate, **option_kwargs)

    if renderer is None:
        from molframe.rendering.static import render_mpl

        renderer = render_mpl

    logger.info(
        "Rendering %d primitive(s): fov=%.4g deg, lookfrom=%s, "
        "renderer options=%s",
        len(framed.scene), framed.camera.fov, framed.camera.lookfrom,
        sorted(render_options),
    )
    return renderer(framed.scene, camera=framed.camera, **render_options)
