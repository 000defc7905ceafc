"""Framing option save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from molframe.model import FramingOptions


def save_options(path: str | Path, options: FramingOptions) -> None:
    """Save framing options to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        options: The options to save.
    """
    Path(path).write_text(json.dumps(options.to_dict(), indent=2) + "\n")


def load_options(path: str | Path) -> FramingOptions:
    """Load framing options from a JSON file.

    Missing fields take their defaults.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`FramingOptions`.

    Raises:
        ValueError: If the file is not a JSON object or contains
            unknown keys.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"framing options file must hold a JSON object, "
            f"got {type(data).__name__}"
        )
    return FramingOptions.from_dict(data)
