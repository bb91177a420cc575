"""Locate files beneath the configured source directories."""

from __future__ import annotations

import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def find_first(sources: cabc.Iterable[Path], relative_path: str) -> Path | None:
    """Return the first file matching ``**/<relative_path>`` across ``sources``.

    Directories are scanned in order and scanning stops at the first directory
    yielding any match; within that directory the lexically first match wins.
    """
    pattern = f"**/{relative_path.strip().lstrip('/')}"
    for source in sources:
        matches = sorted(path for path in Path(source).glob(pattern) if path.is_file())
        if matches:
            return matches[0]
    return None


__all__ = ["find_first"]
