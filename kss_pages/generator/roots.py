"""Make sure every root grouping has a section of its own."""

from __future__ import annotations

import typing as typ

from kss_pages.styleguide import Section, reference_root

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from kss_pages.styleguide import StyleGuide


def collect_roots(sections: cabc.Iterable[Section]) -> list[str]:
    """Return distinct root grouping keys in first-seen order."""
    roots: list[str] = []
    for section in sections:
        root = reference_root(section.reference)
        if root not in roots:
            roots.append(root)
    return roots


def ensure_root_sections(
    style_guide: StyleGuide, roots: cabc.Iterable[str]
) -> list[Section]:
    """Add placeholder sections for roots that lack one.

    The style guide is reinitialized once after all placeholders are added,
    and not at all when nothing was missing.

    Returns
    -------
    list[Section]
        The synthesized placeholder sections.
    """
    added: list[Section] = []
    for root in roots:
        if style_guide.section(root) is None:
            placeholder = Section(header=root, reference=root)
            style_guide.add_section(placeholder, reinit=False)
            added.append(placeholder)
    if added:
        style_guide.reinitialize()
    return added


__all__ = ["collect_roots", "ensure_root_sections"]
