"""Load generator configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _normalize_list, _normalize_paths, _optional_str, _parse_nav_depth
from .models import DEFAULT_TEMPLATE_DIR, GeneratorConfig, GeneratorConfigError


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load the YAML configuration describing a style guide build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``kss-config.yaml``).

    Returns
    -------
    GeneratorConfig
        Parsed configuration with defaults applied for every optional key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    GeneratorConfigError
        If ``source`` or ``destination`` is missing, or the navigation depth is
        not an integer.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from kss_pages.config import load_generator_config
    >>> config = load_generator_config(Path("kss-config.yaml"))  # doctest: +SKIP
    >>> config.nav_depth  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_generator_config(raw)


def build_generator_config(raw: typ.Mapping[str, typ.Any]) -> GeneratorConfig:
    """Build a GeneratorConfig from an already-parsed mapping."""
    defaults = GeneratorConfig(source=[], destination=Path())

    source = _normalize_paths(raw.get("source"))
    if not source:
        msg = "No source directories defined in generator configuration."
        raise GeneratorConfigError(msg)
    destination = _optional_str(raw.get("destination"))
    if not destination:
        msg = "Generator configuration is missing 'destination'."
        raise GeneratorConfigError(msg)

    template = _optional_str(raw.get("template"))
    return GeneratorConfig(
        source=source,
        destination=Path(destination),
        template=Path(template) if template else DEFAULT_TEMPLATE_DIR,
        helpers=_normalize_paths(raw.get("helpers")),
        homepage=_optional_str(raw.get("homepage")) or defaults.homepage,
        placeholder=_optional_str(raw.get("placeholder")) or defaults.placeholder,
        nav_depth=_parse_nav_depth(raw, defaults.nav_depth),
        verbose=bool(raw.get("verbose", defaults.verbose)),
        css=_normalize_list(raw.get("css")),
        js=_normalize_list(raw.get("js")),
        title=_optional_str(raw.get("title")) or defaults.title,
        pygments_style=(
            _optional_str(raw.get("pygments_style")) or defaults.pygments_style
        ),
    )


__all__ = ["build_generator_config", "load_generator_config"]
