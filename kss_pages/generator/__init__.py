"""Utilities for resolving partials, building menus, and writing style guide pages."""

from .helpers import HelperPluginError
from .menu import MenuBuilder
from .models import MenuItem, Partial, RenderContext
from .page_generator import NoDocumentationError, StyleGuideGenerator
from .partials import PartialRegistry, PartialResolver
from .renderer import HtmlContentRenderer
from .roots import collect_roots, ensure_root_sections

__all__ = [
    "HelperPluginError",
    "HtmlContentRenderer",
    "MenuBuilder",
    "MenuItem",
    "NoDocumentationError",
    "Partial",
    "PartialRegistry",
    "PartialResolver",
    "RenderContext",
    "StyleGuideGenerator",
    "collect_roots",
    "ensure_root_sections",
]
