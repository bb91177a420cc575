"""Load a serialized style guide model from YAML or JSON."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import Modifier, Parameter, Section, StyleGuide

TRAILING_ZERO_PATTERN = re.compile(r"(?:\.0)+$")


class StyleGuideFormatError(ValueError):
    """Raised when a serialized style guide is malformed."""


def normalize_reference(reference: object) -> str:
    """Trim whitespace and drop trailing ``.`` / ``.0`` segments."""
    text = str(reference).strip()
    text = TRAILING_ZERO_PATTERN.sub("", text)
    return text.rstrip(".")


def load_style_guide(path: Path) -> StyleGuide:
    """Load a parsed style guide dump.

    Parameters
    ----------
    path : Path
        YAML (or JSON) file with a ``sections`` list and an optional ``files``
        list, as written by the comment parser.

    Returns
    -------
    StyleGuide
        Initialized style guide in declaration order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    StyleGuideFormatError
        If the document is not a mapping or a section lacks a reference.
    """
    if not path.exists():
        msg = f"Style guide file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level style guide structure must be a mapping."
        raise StyleGuideFormatError(msg)

    sections = [_build_section(payload) for payload in loaded.get("sections") or []]
    files = [str(item) for item in loaded.get("files") or []]
    return StyleGuide(sections, files=files)


def _build_section(payload: object) -> Section:
    if not isinstance(payload, dict):
        msg = f"Section entries must be mappings, got {payload!r}."
        raise StyleGuideFormatError(msg)
    raw = typ.cast("dict[str, typ.Any]", payload)
    if raw.get("reference") in (None, ""):
        msg = f"Section '{raw.get('header', '?')}' is missing a reference."
        raise StyleGuideFormatError(msg)
    reference = normalize_reference(raw["reference"])
    modifiers = tuple(
        Modifier(name=str(item.get("name", "")), description=item.get("description", ""))
        for item in raw.get("modifiers") or []
        if isinstance(item, dict)
    )
    parameters = tuple(
        Parameter(
            name=str(item.get("name", "")),
            description=item.get("description", ""),
            default_value=item.get("default_value"),
        )
        for item in raw.get("parameters") or []
        if isinstance(item, dict)
    )
    return Section(
        header=str(raw.get("header") or reference),
        reference=reference,
        description=raw.get("description", "") or "",
        markup=(raw.get("markup") or "").strip(),
        modifiers=modifiers,
        parameters=parameters,
        source=dict(raw.get("source") or {}),
    )


__all__ = ["StyleGuideFormatError", "load_style_guide", "normalize_reference"]
