"""Typed dataclasses describing style guide generator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates" / "default"


class GeneratorConfigError(ValueError):
    """Raised when the generator configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class GeneratorConfig:
    """Options recognized by :class:`~kss_pages.generator.StyleGuideGenerator`.

    Attributes
    ----------
    source : list[Path]
        Directories searched, in order, for markup files and homepage content.
    destination : Path
        Directory receiving the generated HTML pages.
    template : Path
        Directory holding ``index.html`` and an optional ``kss-assets`` folder.
    helpers : list[Path]
        Directories of helper plugins exposing ``register(env, config)``.
    homepage : str
        File name of the homepage's Markdown file.
    placeholder : str
        Text substituted for modifier classes when no modifier is rendered.
    nav_depth : int
        Deepest section depth listed as a navigation child.
    verbose : bool
        Print progress lines while generating.
    css : list[str]
        Stylesheet URLs linked from every page.
    js : list[str]
        Script URLs loaded by every page.
    title : str
        Title shown by the bundled template.
    pygments_style : str
        Pygments style used for homepage code blocks and markup listings.
    """

    source: list[Path]
    destination: Path
    template: Path = DEFAULT_TEMPLATE_DIR
    helpers: list[Path] = dc.field(default_factory=list)
    homepage: str = "homepage.md"
    placeholder: str = "[modifier class]"
    nav_depth: int = 3
    verbose: bool = False
    css: list[str] = dc.field(default_factory=list)
    js: list[str] = dc.field(default_factory=list)
    title: str = "KSS Style Guide"
    pygments_style: str = "monokai"


__all__ = ["DEFAULT_TEMPLATE_DIR", "GeneratorConfig", "GeneratorConfigError"]
