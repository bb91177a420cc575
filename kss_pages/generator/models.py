"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

if typ.TYPE_CHECKING:
    from kss_pages.config import GeneratorConfig
    from kss_pages.styleguide import StyleGuide

    from .partials import PartialRegistry


@dc.dataclass(slots=True)
class Partial:
    """A markup fragment registered with the template environment.

    Attributes
    ----------
    name : str
        Template name: the file stem for file-backed markup, otherwise the
        section reference.
    reference : str
        Reference of the section that owns the markup.
    markup : str
        Resolved markup text.
    file : Path | None
        File the markup was loaded from, if any.
    data : dict[str, typ.Any]
        Sample data loaded from the sibling ``<name>.json`` file.
    """

    name: str
    reference: str
    markup: str
    file: Path | None = None
    data: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class MenuItem:
    """Navigation entry derived from a section."""

    reference: str
    header: str
    depth: int
    reference_uri: str
    is_active: bool
    is_grand_child: bool
    children: list[MenuItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class RenderContext:
    """Data handed to the page template for a single render."""

    page_reference: str
    sections: list[dict[str, typ.Any]]
    menu: list[MenuItem]
    homepage: str
    styles: str
    scripts: str
    has_numeric_references: bool
    partials: PartialRegistry
    style_guide: StyleGuide
    options: GeneratorConfig
    pygments_css: str

    def as_template_vars(self) -> dict[str, typ.Any]:
        """Return the context as keyword arguments for ``Template.render``."""
        return {field.name: getattr(self, field.name) for field in dc.fields(self)}


__all__ = ["MenuItem", "Partial", "RenderContext"]
