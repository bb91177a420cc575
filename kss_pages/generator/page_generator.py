"""High-level orchestration for style guide page generation.

This module turns a parsed :class:`~kss_pages.styleguide.StyleGuide` into
static HTML. :class:`StyleGuideGenerator` registers every section's markup as a
partial, synthesizes missing root sections, and writes one
``section-<reference>.html`` page per root grouping plus ``index.html``.

Example
-------
>>> from pathlib import Path
>>> from kss_pages.config import GeneratorConfig
>>> from kss_pages.generator import StyleGuideGenerator
>>> from kss_pages.styleguide import load_style_guide
>>> config = GeneratorConfig(source=[Path("css")], destination=Path("styleguide"))
>>> generator = StyleGuideGenerator(config)  # doctest: +SKIP
>>> generator.generate(load_style_guide(Path("kss.yaml")))  # doctest: +SKIP
[PosixPath('styleguide/section-1.html'), ..., PosixPath('styleguide/index.html')]
"""

from __future__ import annotations

import shutil
import typing as typ
from html import escape
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

from kss_pages._constants import (
    ASSETS_DIRNAME,
    HOMEPAGE_FILENAME,
    HOMEPAGE_REFERENCE,
    NO_DOCUMENTATION_MESSAGE,
    SECTION_FILENAME_TEMPLATE,
    TEMPLATE_NAME,
)

from . import helpers, sources
from .menu import MenuBuilder
from .models import MenuItem, RenderContext
from .partials import PartialRegistry, PartialResolver
from .renderer import HtmlContentRenderer
from .roots import collect_roots, ensure_root_sections

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from kss_pages.config import GeneratorConfig
    from kss_pages.styleguide import Section, StyleGuide


class NoDocumentationError(RuntimeError):
    """Raised when the style guide contains no sections to render."""


class StyleGuideGenerator:
    """Render a style guide into themed HTML pages."""

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        log: cabc.Callable[[str], None] = print,
    ) -> None:
        """Initialize the generator, its Jinja environment, and helpers.

        Parameters
        ----------
        config : GeneratorConfig
            Source directories, destination, template, and display options.
        log : Callable[[str], None], optional
            Receives progress lines and warnings; defaults to ``print``.

        Raises
        ------
        jinja2.TemplateNotFound
            If the template directory has no ``index.html``.
        HelperPluginError
            If a helper module lacks ``register(env, config)``.
        """
        self.config = config
        self.log = log
        self.renderer = HtmlContentRenderer(config.pygments_style)
        self.partials = PartialRegistry()
        self.style_guide: StyleGuide | None = None
        self._template_loader = FileSystemLoader(str(config.template))

        if config.verbose:
            self._log_banner()

        self.env = Environment(
            loader=ChoiceLoader([self._template_loader, self.partials.loader]),
            # Partials are registered under extension-less names.
            autoescape=select_autoescape(["html", "xml"], default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        helpers.register(self.env, config)
        helpers.load_helper_plugins(self.env, config)
        self.template = self.env.get_template(TEMPLATE_NAME)

    def generate(
        self,
        style_guide: StyleGuide,
        cb: cabc.Callable[[Exception | None], typ.Any] | None = None,
    ) -> list[Path]:
        """Write every style guide page to the destination directory.

        Parameters
        ----------
        style_guide : StyleGuide
            Parsed style guide; placeholder root sections may be added to it.
        cb : Callable[[Exception | None], Any], optional
            Completion callback. When given, it receives ``None`` on success
            or the :class:`NoDocumentationError` instead of it being raised.

        Returns
        -------
        list[Path]
            Paths of the written pages: one per root grouping, then
            ``index.html``. Empty when the run was aborted.

        Raises
        ------
        NoDocumentationError
            When the style guide has no sections and no callback was given.
        """
        self.style_guide = style_guide
        self._reset_partials()

        if self.config.verbose and style_guide.meta.files:
            self.log("\n".join(f" - {name}" for name in style_guide.meta.files))

        sections = style_guide.sections()
        if not sections:
            error = NoDocumentationError(NO_DOCUMENTATION_MESSAGE)
            if cb is None:
                raise error
            cb(error)
            return []

        self._prepare_destination()

        if self.config.verbose:
            self.log("...Determining section markup:")
        resolver = PartialResolver(
            self.config, self.partials, env=self.env, log=self.log
        )
        for section in sections:
            resolver.resolve(section)
        roots = collect_roots(sections)
        ensure_root_sections(style_guide, roots)

        if self.config.verbose:
            self.log("...Generating style guide pages:")
        written = [
            self.generate_page(root, style_guide.sections(f"{root}.*"))
            for root in roots
        ]
        written.append(self.generate_page(HOMEPAGE_REFERENCE, []))

        if cb is not None:
            cb(None)
        return written

    def create_menu(self, page_reference: str) -> list[MenuItem]:
        """Return the navigation menu with ``page_reference`` marked active."""
        if self.style_guide is None:
            return []
        return MenuBuilder(self.style_guide, self.config.nav_depth).build(
            page_reference
        )

    def generate_page(
        self, page_reference: str, sections: cabc.Sequence[Section]
    ) -> Path:
        """Render one page and write it to the destination directory.

        Parameters
        ----------
        page_reference : str
            Root reference of the page, or ``"styleGuide.homepage"``.
        sections : Sequence[Section]
            Sections shown on the page, root first.

        Returns
        -------
        Path
            The written file; any existing file is overwritten.
        """
        style_guide = self.style_guide
        if style_guide is None:
            msg = "generate_page() requires a style guide; call generate() first."
            raise RuntimeError(msg)

        homepage = ""
        if page_reference == HOMEPAGE_REFERENCE:
            filename = HOMEPAGE_FILENAME
            if self.config.verbose:
                self.log(" - homepage")
            homepage = self._load_homepage_text()
        else:
            root_section = style_guide.section(page_reference)
            if root_section is None:
                msg = f"No section found for page reference '{page_reference}'."
                raise KeyError(msg)
            filename = SECTION_FILENAME_TEMPLATE.format(slug=root_section.reference_uri)
            if self.config.verbose:
                header = root_section.header or "Unnamed"
                self.log(f" - section {page_reference} [ {header} ]")

        context = RenderContext(
            page_reference=page_reference,
            sections=[section.to_dict() for section in sections],
            menu=self.create_menu(page_reference),
            homepage=homepage,
            styles="".join(
                f'<link rel="stylesheet" href="{escape(url, quote=True)}">\n'
                for url in self.config.css
            ),
            scripts="".join(
                f'<script src="{escape(url, quote=True)}"></script>\n'
                for url in self.config.js
            ),
            has_numeric_references=style_guide.has_numeric_references,
            partials=self.partials,
            style_guide=style_guide,
            options=self.config,
            pygments_css=self.renderer.stylesheet,
        )
        html = self.template.render(**context.as_template_vars())
        output_path = self.config.destination / filename
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def _load_homepage_text(self) -> str:
        """Return homepage HTML prefixed with a space, or a single space."""
        found = sources.find_first(self.config.source, self.config.homepage)
        if found is not None:
            return " " + self.renderer.markdown(found.read_text(encoding="utf-8"))
        if self.config.verbose:
            self.log(f"   ...no homepage content found in {self.config.homepage}.")
        else:
            self.log(f"WARNING: no homepage content found in {self.config.homepage}.")
        return " "

    def _reset_partials(self) -> None:
        """Start the run with an empty partial registry."""
        self.partials = PartialRegistry()
        self.env.loader = ChoiceLoader([self._template_loader, self.partials.loader])
        if self.env.cache is not None:
            self.env.cache.clear()

    def _prepare_destination(self) -> Path | None:
        """Create the destination and copy the template's assets, if it has any.

        Returns
        -------
        Path | None
            The copied assets directory, or ``None`` when the template ships
            no assets.
        """
        self.config.destination.mkdir(parents=True, exist_ok=True)
        assets_source = self.config.template / ASSETS_DIRNAME
        if not assets_source.is_dir():
            return None
        assets_target = self.config.destination / ASSETS_DIRNAME
        shutil.copytree(
            assets_source,
            assets_target,
            ignore=shutil.ignore_patterns(".*"),
            dirs_exist_ok=True,
        )
        return assets_target

    def _log_banner(self) -> None:
        self.log("")
        self.log("Generating your KSS style guide!")
        self.log("")
        self.log(" * KSS Source  : " + ", ".join(str(path) for path in self.config.source))
        self.log(f" * Destination : {self.config.destination}")
        self.log(f" * Template    : {self.config.template}")
        if self.config.helpers:
            self.log(
                " * Helpers     : " + ", ".join(str(path) for path in self.config.helpers)
            )
        self.log("")


__all__ = ["NoDocumentationError", "StyleGuideGenerator"]
