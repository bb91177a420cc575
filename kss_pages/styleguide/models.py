r"""Style guide sections and the query interface the generator relies on.

A :class:`StyleGuide` holds the ordered :class:`Section` objects produced by a
comment parser. Sections are keyed by hierarchical references such as
``"2.1.3"`` or ``"Forms - Buttons"`` and can be looked up exactly, by shape
(``"x.x"``), or as a root plus its descendants (``"2.*"``).

Example
-------
>>> guide = StyleGuide([Section(header="Buttons", reference="1.2")])
>>> guide.section("1.2").depth
2
>>> [s.reference for s in guide.sections("1.*")]
['1.2']
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from urllib.parse import quote

REFERENCE_DELIMITER = re.compile(r"\.|\s-\s")
NUMERIC_REFERENCE = re.compile(r"\d+(?:\.\d+)*")
SHAPE_SEGMENT = "x"
DESCENDANTS_SUFFIX = ".*"


def split_reference(reference: str) -> list[str]:
    """Split a reference into its hierarchy segments."""
    return [segment.strip() for segment in REFERENCE_DELIMITER.split(reference)]


def reference_root(reference: str) -> str:
    """Return the root grouping key (first segment) of ``reference``."""
    return split_reference(reference)[0]


@dc.dataclass(slots=True, frozen=True)
class Modifier:
    """A documented variation of a section's markup.

    Attributes
    ----------
    name : str
        Modifier selector as written in the comment, e.g. ``".primary"`` or
        ``":hover"``.
    description : str
        Prose describing the modifier.
    """

    name: str
    description: str = ""

    @property
    def class_name(self) -> str:
        """Return the CSS class string substituted into markup."""
        name = self.name.strip()
        name = re.sub(r":", " pseudo-class-", name)
        name = name.replace(".", " ")
        return " ".join(name.split())

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "class_name": self.class_name,
        }


@dc.dataclass(slots=True, frozen=True)
class Parameter:
    """A documented argument of a preprocessor mixin or function."""

    name: str
    description: str = ""
    default_value: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "description": self.description,
            "default_value": self.default_value,
        }


@dc.dataclass(slots=True, frozen=True)
class Section:
    """One documented element of the style guide.

    Attributes
    ----------
    header : str
        Section title.
    reference : str
        Hierarchical reference; segments are separated by ``.`` or `` - ``.
    description : str
        HTML description rendered from the comment body.
    markup : str
        Inline markup or a relative path to a markup file; may be empty.
    modifiers : tuple[Modifier, ...]
        Documented modifier classes.
    parameters : tuple[Parameter, ...]
        Documented parameters.
    source : dict[str, typ.Any]
        Where the comment came from (``filename``, ``line``).
    """

    header: str
    reference: str
    description: str = ""
    markup: str = ""
    modifiers: tuple[Modifier, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    source: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def depth(self) -> int:
        """Return the number of levels in the reference."""
        return len(split_reference(self.reference))

    @property
    def root(self) -> str:
        """Return the root grouping this section belongs to."""
        return reference_root(self.reference)

    @property
    def reference_uri(self) -> str:
        """Return a URI-safe slug of the reference, e.g. ``"2-1-3"``."""
        slug = self.reference.replace(" - ", "-")
        slug = re.sub(r"[^\w-]+", "-", slug).strip("-").lower()
        return quote(slug)

    def to_dict(self) -> dict[str, typ.Any]:
        """Serialize the section for use as template data."""
        return {
            "header": self.header,
            "reference": self.reference,
            "reference_uri": self.reference_uri,
            "depth": self.depth,
            "description": self.description,
            "markup": self.markup,
            "modifiers": [modifier.to_dict() for modifier in self.modifiers],
            "parameters": [parameter.to_dict() for parameter in self.parameters],
            "source": dict(self.source),
        }


@dc.dataclass(slots=True)
class StyleGuideMeta:
    """Metadata captured by the comment parser."""

    files: list[str] = dc.field(default_factory=list)


class StyleGuide:
    """Ordered collection of sections with reference queries."""

    def __init__(
        self,
        sections: typ.Iterable[Section] = (),
        *,
        files: typ.Iterable[str] = (),
    ) -> None:
        self.meta = StyleGuideMeta(files=list(files))
        self._sections: list[Section] = list(sections)
        self._index: dict[str, Section] = {}
        self._numeric = False
        self.reinitialize()

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> typ.Iterator[Section]:
        return iter(self._sections)

    @property
    def has_numeric_references(self) -> bool:
        """Return True when every reference is made of dotted digits."""
        return self._numeric

    def section(self, reference: str) -> Section | None:
        """Return the section with exactly ``reference`` or None."""
        return self._index.get(reference)

    def sections(self, query: str | None = None) -> list[Section]:
        """Return the sections matching ``query``.

        Parameters
        ----------
        query : str, optional
            ``None`` returns every section. ``"<ref>.*"`` returns ``<ref>``
            followed by its descendants. A query with ``x`` segments (``"x"``,
            ``"1.x"``) returns sections of that exact shape. Anything else is
            an exact reference lookup.

        Returns
        -------
        list[Section]
            Matches in style guide order.
        """
        if query is None:
            return list(self._sections)
        if query.endswith(DESCENDANTS_SUFFIX):
            return self._descendants(query[: -len(DESCENDANTS_SUFFIX)])
        segments = split_reference(query)
        if SHAPE_SEGMENT in segments:
            return [
                section
                for section in self._sections
                if _matches_shape(split_reference(section.reference), segments)
            ]
        match = self.section(query)
        return [match] if match else []

    def add_section(self, section: Section, *, reinit: bool = True) -> None:
        """Append ``section``; indices stay stale until reinitialized."""
        self._sections.append(section)
        if reinit:
            self.reinitialize()

    def reinitialize(self) -> None:
        """Rebuild ordering, the reference index, and the numeric flag."""
        group_order: dict[str, int] = {}
        for section in self._sections:
            group_order.setdefault(section.root, len(group_order))
        positions = {id(section): idx for idx, section in enumerate(self._sections)}
        self._sections.sort(
            key=lambda section: (
                group_order[section.root],
                section.depth != 1,
                positions[id(section)],
            )
        )
        self._index = {section.reference: section for section in self._sections}
        self._numeric = bool(self._sections) and all(
            NUMERIC_REFERENCE.fullmatch(section.reference)
            for section in self._sections
        )

    def _descendants(self, prefix: str) -> list[Section]:
        prefix_segments = split_reference(prefix)
        size = len(prefix_segments)
        matches: list[Section] = []
        root: Section | None = None
        for section in self._sections:
            segments = split_reference(section.reference)
            if segments[:size] != prefix_segments:
                continue
            if len(segments) == size:
                root = root or section
            else:
                matches.append(section)
        return [root, *matches] if root else matches


def _matches_shape(segments: list[str], pattern: list[str]) -> bool:
    """Return True when ``segments`` fit the ``x``-wildcard ``pattern``."""
    if len(segments) != len(pattern):
        return False
    return all(
        expected in (SHAPE_SEGMENT, actual)
        for actual, expected in zip(segments, pattern, strict=True)
    )


__all__ = [
    "Modifier",
    "Parameter",
    "Section",
    "StyleGuide",
    "StyleGuideMeta",
    "reference_root",
    "split_reference",
]
