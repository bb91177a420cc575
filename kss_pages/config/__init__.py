"""Load and validate generator configuration for style guide builds.

This subpackage parses a YAML configuration file, applies defaults for every
optional option, and produces a :class:`GeneratorConfig` that the page
generator consumes. The primary entry point is :func:`load_generator_config`.

Examples
--------
>>> from pathlib import Path
>>> from kss_pages.config import load_generator_config
>>> config = load_generator_config(Path("kss-config.yaml"))  # doctest: +SKIP
>>> config.homepage  # doctest: +SKIP
'homepage.md'
"""

from .loader import build_generator_config, load_generator_config
from .models import DEFAULT_TEMPLATE_DIR, GeneratorConfig, GeneratorConfigError

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "GeneratorConfig",
    "GeneratorConfigError",
    "build_generator_config",
    "load_generator_config",
]
