"""Build the two-level navigation menu shown on every style guide page."""

from __future__ import annotations

import typing as typ

from .models import MenuItem

if typ.TYPE_CHECKING:
    from kss_pages.styleguide import Section, StyleGuide

ROOT_QUERY = "x"


class MenuBuilder:
    """Derive menu items for root sections and their shallow descendants."""

    def __init__(self, style_guide: StyleGuide, nav_depth: int) -> None:
        self.style_guide = style_guide
        self.nav_depth = nav_depth

    def build(self, page_reference: str) -> list[MenuItem]:
        """Return one item per root section, each carrying its children.

        Parameters
        ----------
        page_reference : str
            Reference of the page being rendered; the matching item is flagged
            ``is_active``.

        Returns
        -------
        list[MenuItem]
            Root items in style guide order. Children deeper than
            ``nav_depth`` are left out.
        """
        menu: list[MenuItem] = []
        for root in self.style_guide.sections(ROOT_QUERY):
            item = self._to_menu_item(root, page_reference)
            descendants = self.style_guide.sections(f"{root.reference}.*")[1:]
            item.children = [
                self._to_menu_item(child, page_reference)
                for child in descendants
                if child.depth <= self.nav_depth
            ]
            menu.append(item)
        return menu

    @staticmethod
    def _to_menu_item(section: Section, page_reference: str) -> MenuItem:
        return MenuItem(
            reference=section.reference,
            header=section.header,
            depth=section.depth,
            reference_uri=section.reference_uri,
            is_active=section.reference == page_reference,
            is_grand_child=section.depth > 2,
        )


__all__ = ["MenuBuilder"]
