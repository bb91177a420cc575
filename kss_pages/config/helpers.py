"""Utility helpers shared by the generator configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import GeneratorConfigError


def _normalize_list(value: str | list[object] | None) -> list[str]:
    """Normalize a scalar-or-list option into a list of non-empty strings."""
    if isinstance(value, str):
        text = value.strip()
        return [text] if text else []
    if isinstance(value, list):
        normalized: list[str] = []
        for item in value:
            text = str(item).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _normalize_paths(value: str | list[object] | None) -> list[Path]:
    """Return a list of paths from a scalar-or-list option."""
    return [Path(item) for item in _normalize_list(value)]


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_nav_depth(raw: typ.Mapping[str, typ.Any], default: int) -> int:
    """Return the navigation depth from ``nav-depth`` or ``nav_depth`` keys."""
    value = raw.get("nav-depth", raw.get("nav_depth", default))
    match value:
        case bool():
            pass
        case int():
            return value
        case str() as text if text.strip().isdigit():
            return int(text)
    msg = f"Navigation depth must be an integer, got {value!r}."
    raise GeneratorConfigError(msg)


__all__ = [
    "_normalize_list",
    "_normalize_paths",
    "_optional_str",
    "_parse_nav_depth",
]
