"""Default lookup shared by ``Primitive`` and ``FramingOptions`` records."""

from __future__ import annotations

import dataclasses
from functools import lru_cache


@lru_cache(maxsize=None)
def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Map each defaulted field of *cls* to its default, minus *exclude*.

    Record conversion omits fields still at these values.
    """
    return {
        f.name: f.default
        for f in dataclasses.fields(cls)
        if f.default is not dataclasses.MISSING and f.name not in exclude
    }
