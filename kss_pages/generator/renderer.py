"""Markdown and syntax-highlighting helpers for style guide pages."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]


class HtmlContentRenderer:
    """Render homepage markdown and markup listings with consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer using the named Pygments style."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Convert markdown ``text`` into HTML; blank input yields ``""``."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return self._annotate_languages(md.convert(text), text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` as highlighted HTML tagged with its language.

        Parameters
        ----------
        code : str
            Source snippet to highlight, typically a section's markup.
        language : str, optional
            Pygments lexer name; unknown or missing names fall back to
            ``"text"``.

        Returns
        -------
        str
            HTML with a ``data-language`` attribute on the wrapper ``div``.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lang = "text"
            lexer = get_lexer_by_name(lang)
        html = highlight(code, lexer, self._formatter)
        safe_lang = escape(lang, quote=True)
        return CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{safe_lang}">', html, 1
        )

    @staticmethod
    def _annotate_languages(html: str, source_markdown: str) -> str:
        """Attach fence languages to each highlighted block, in order."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(_match: re.Match[str]) -> str:
            lang = escape(next(lang_iter, "text"), quote=True)
            return f'<div class="codehilite" data-language="{lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["HtmlContentRenderer"]
