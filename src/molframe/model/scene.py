from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np

from molframe.model.primitive import Primitive, is_model_primitive


@dataclass(frozen=True)
class Scene:
    """An ordered, immutable collection of primitives.

    Order only affects render layering.  Operations that change the
    scene return a new :class:`Scene` and leave this one untouched, so
    a scene value can be threaded safely from one framing stage to
    the next.

    Attributes:
        primitives: The primitives, in scene order.  Any iterable is
            accepted and stored as a tuple.

    Raises:
        TypeError: If an element is not a :class:`Primitive`.
    """

    primitives: tuple[Primitive, ...] = ()

    def __post_init__(self) -> None:
        primitives = tuple(self.primitives)
        for i, p in enumerate(primitives):
            if not isinstance(p, Primitive):
                raise TypeError(
                    f"scene element {i} must be a Primitive, "
                    f"got {type(p).__name__}"
                )
        object.__setattr__(self, "primitives", primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __getitem__(self, index: int) -> Primitive:
        return self.primitives[index]

    def add_objects(self, *primitives: Primitive) -> Scene:
        """Return a new scene with *primitives* appended at the end."""
        return Scene(self.primitives + primitives)

    def model_subset(self) -> Scene:
        """Return the primitives that make up the molecule geometry.

        Keeps spheres and cylinders that do not emit light, in their
        original order.
        """
        return Scene(tuple(p for p in self.primitives if is_model_primitive(p)))

    def map_primitives(self, fn: Callable[[Primitive], Primitive]) -> Scene:
        """Return a new scene with *fn* applied to every primitive."""
        return Scene(tuple(fn(p) for p in self.primitives))

    def coords(self) -> np.ndarray:
        """Return positions as an ``(n, 3)`` array with NaN for missing values."""
        if not self.primitives:
            return np.empty((0, 3), dtype=float)
        return np.array([p.position for p in self.primitives], dtype=float)

    def radii(self) -> np.ndarray:
        """Return radii as an ``(n,)`` array."""
        return np.array([p.radius for p in self.primitives], dtype=float)

    @property
    def lights(self) -> tuple[Primitive, ...]:
        """The light-emitting primitives, in scene order."""
        return tuple(p for p in self.primitives if p.is_light)

    def to_records(self) -> list[dict]:
        """Serialise to a list of dictionaries, one per primitive."""
        return [p.to_dict() for p in self.primitives]

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> Scene:
        """Build a scene from an iterable of primitive dictionaries.

        See :meth:`Primitive.from_dict` for the accepted keys.
        """
        return cls(tuple(Primitive.from_dict(r) for r in records))

    def render(self, **kwargs: Any) -> Any:
        """Frame this scene automatically and render it.

        Accepts the same keyword arguments as
        :func:`~molframe.framing.pipeline.render_model`.

        Returns:
            Whatever the renderer returns; a matplotlib
            :class:`~matplotlib.figure.Figure` for the default
            preview renderer.
        """
        from molframe.framing.pipeline import render_model

        return render_model(self, **kwargs)
