"""Resolve section markup into partials registered with the template environment.

Markup is either inline HTML or a single line naming a markup file such as
``components/button.html``. File references are looked up beneath the
configured source directories; a sibling ``<name>.json`` supplies sample data
for the partial. Every resolved partial is stored in a run-scoped
:class:`PartialRegistry`, which doubles as a Jinja loader so templates can
``{% include %}`` partials by name.
"""

from __future__ import annotations

import json
import re
import typing as typ
from pathlib import Path

from jinja2 import DictLoader, TemplateSyntaxError

from kss_pages._constants import NOT_FOUND_SUFFIX

from . import sources
from .models import Partial

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from kss_pages.config import GeneratorConfig
    from kss_pages.styleguide import Section

MARKUP_FILE_PATTERN = re.compile(r"[^\n]+\.(?:html|jinja|j2)")
SAMPLE_DATA_SUFFIX = ".json"
RAW_BLOCK_TEMPLATE = "{{% raw %}}{markup}{{% endraw %}}"


class PartialRegistry:
    """Partials for one generation run, keyed by name and section reference."""

    def __init__(self) -> None:
        self._markup: dict[str, str] = {}
        self._by_reference: dict[str, Partial] = {}
        self.loader = DictLoader(self._markup)

    def __contains__(self, reference: object) -> bool:
        return reference in self._by_reference

    def __len__(self) -> int:
        return len(self._by_reference)

    def __iter__(self) -> cabc.Iterator[Partial]:
        return iter(self._by_reference.values())

    def register(self, partial: Partial) -> None:
        """Register ``partial``; a later partial with the same name wins."""
        self._markup[partial.name] = partial.markup
        self._by_reference[partial.reference] = partial

    def get(self, reference: str) -> Partial | None:
        """Return the partial owned by the section ``reference``."""
        return self._by_reference.get(reference)

    def markup_for(self, name: str) -> str | None:
        """Return the markup registered under the template ``name``."""
        return self._markup.get(name)


class PartialResolver:
    """Turn section markup into :class:`Partial` objects."""

    def __init__(
        self,
        config: GeneratorConfig,
        registry: PartialRegistry,
        *,
        env: Environment | None = None,
        log: cabc.Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.registry = registry
        self.env = env
        self.log = log

    def resolve(self, section: Section) -> Partial | None:
        """Resolve and register the markup of ``section``.

        Returns
        -------
        Partial | None
            The registered partial, or ``None`` when the section has no markup.
        """
        if not section.markup:
            return None
        if is_markup_file(section.markup):
            partial = self._load_file_partial(section)
        else:
            partial = Partial(
                name=section.reference,
                reference=section.reference,
                markup=section.markup,
            )
            if self.config.verbose:
                self.log(f" - {section.reference}: inline markup")
        self._check_syntax(partial)
        self.registry.register(partial)
        return partial

    def _check_syntax(self, partial: Partial) -> None:
        """Replace markup Jinja cannot parse with its literal source, and warn."""
        if self.env is None:
            return
        try:
            self.env.parse(partial.markup)
        except TemplateSyntaxError as exc:
            self.log(
                f"WARNING: In section {partial.reference}, markup is not a valid "
                f"template ({exc.message}); showing it verbatim."
            )
            partial.markup = RAW_BLOCK_TEMPLATE.format(markup=partial.markup)

    def _load_file_partial(self, section: Section) -> Partial:
        relative = section.markup.strip()
        name = Path(relative).stem
        found = sources.find_first(self.config.source, relative)
        if found is None:
            markup = relative + NOT_FOUND_SUFFIX
            if self.config.verbose:
                self.log(f" - {section.reference}: {markup}")
            else:
                self.log(f"WARNING: In section {section.reference}, {markup}")
            return Partial(name=name, reference=section.reference, markup=markup)

        if self.config.verbose:
            self.log(f" - {section.reference}: {relative}")
        data = read_sample_data(found.with_name(name + SAMPLE_DATA_SUFFIX))
        return Partial(
            name=name,
            reference=section.reference,
            markup=found.read_text(encoding="utf-8"),
            file=found,
            data=data or {},
        )


def is_markup_file(markup: str) -> bool:
    """Return True when ``markup`` is a single line naming a markup file."""
    return MARKUP_FILE_PATTERN.fullmatch(markup.strip()) is not None


def read_sample_data(path: Path) -> dict[str, typ.Any] | None:
    """Return the JSON object stored at ``path``.

    Returns ``None`` when the file is missing, is not UTF-8 encoded JSON, or
    does not hold an object.
    """
    if not path.is_file():
        return None
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except ValueError:
        return None
    if not isinstance(loaded, dict):
        return None
    return loaded


__all__ = [
    "MARKUP_FILE_PATTERN",
    "PartialRegistry",
    "PartialResolver",
    "is_markup_file",
    "read_sample_data",
]
