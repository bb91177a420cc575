"""Render KSS style guides into static HTML pages.

This package takes a parsed style guide (sections documented in stylesheet
comments), registers each section's markup as a Jinja partial, and writes one
page per top-level grouping plus a homepage.

Exports
-------
- ``StyleGuideGenerator``: renders a style guide into a destination folder.
- ``GeneratorConfig``: options consumed by the generator.
- ``load_generator_config``: read a ``GeneratorConfig`` from YAML.
- ``load_style_guide``: read a serialized style guide model.

Examples
--------
>>> from pathlib import Path
>>> from kss_pages import GeneratorConfig, StyleGuideGenerator, load_style_guide
>>> config = GeneratorConfig(source=[Path("css")], destination=Path("out"))
>>> StyleGuideGenerator(config).generate(load_style_guide(Path("kss.yaml")))  # doctest: +SKIP
[PosixPath('out/section-1.html'), PosixPath('out/index.html')]
"""

from __future__ import annotations

from .config import GeneratorConfig, load_generator_config
from .generator import StyleGuideGenerator
from .styleguide import load_style_guide

__all__ = [
    "GeneratorConfig",
    "StyleGuideGenerator",
    "load_generator_config",
    "load_style_guide",
]
