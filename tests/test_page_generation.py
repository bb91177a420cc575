"""End-to-end tests for style guide HTML generation.

This module drives ``kss_pages.generator.StyleGuideGenerator`` against small
source trees built under ``tmp_path`` and the bundled default template. The
tests verify that the generated pages:

* Cover every root grouping (synthesizing missing roots) plus ``index.html``.
* Render inline and file-backed partials, including sample data, modifier
  classes, and the ``NOT FOUND!`` marker for missing markup files.
* Emit stylesheet and script tags in configuration order.
* Render the homepage Markdown, or fall back to a blank homepage with a
  warning.

The fatal "no documentation" path, completion callbacks, template asset
copying, and custom helper plugins are covered as well.

Fixtures
--------
* ``source_dir`` builds a source tree with a markup file and homepage.
* ``generator_state`` constructs a generator with a captured log.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from kss_pages.config import GeneratorConfig
from kss_pages.generator import (
    HelperPluginError,
    NoDocumentationError,
    StyleGuideGenerator,
)
from kss_pages.styleguide import Modifier, Section, StyleGuide

HOMEPAGE_MARKDOWN = "# Welcome\n\nThe **pattern library**.\n\n```css\n.btn { color: red; }\n```\n"


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Create a source directory with a button partial and homepage."""
    root = tmp_path / "src"
    (root / "components").mkdir(parents=True)
    (root / "components" / "button.html").write_text(
        '<button class="btn {{ modifier_class }}">{{ label }}</button>',
        encoding="utf-8",
    )
    (root / "components" / "button.json").write_text(
        '{"label": "Save"}', encoding="utf-8"
    )
    (root / "homepage.md").write_text(HOMEPAGE_MARKDOWN, encoding="utf-8")
    return root


@pytest.fixture
def generator_state(source_dir: Path, tmp_path: Path) -> dict[str, typ.Any]:
    """Return a generator writing to ``tmp_path / "out"`` plus its log."""
    messages: list[str] = []
    config = GeneratorConfig(
        source=[source_dir],
        destination=tmp_path / "out",
        css=["styles/site.css", "styles/theme.css"],
        js=["scripts/app.js"],
    )
    generator = StyleGuideGenerator(config, log=messages.append)
    return {"generator": generator, "config": config, "messages": messages}


def _style_guide() -> StyleGuide:
    return StyleGuide(
        [
            Section(header="Buttons", reference="1"),
            Section(
                header="Primary button",
                reference="1.1",
                markup="components/button.html",
                modifiers=(Modifier(".btn--large", "Bigger"),),
            ),
            Section(header="Alerts", reference="2.3", markup="<div>{{ modifier_class }}</div>"),
            Section(header="Cards", reference="2.4", markup="components/card.html"),
        ],
        files=["css/buttons.css"],
    )


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_generates_one_page_per_root_plus_homepage(
    generator_state: dict[str, typ.Any],
) -> None:
    """References 1, 1.1, 2.3 yield section-1, section-2, and index pages."""
    guide = StyleGuide(
        Section(header=ref, reference=ref) for ref in ("1", "1.1", "2.3")
    )

    written = generator_state["generator"].generate(guide)

    assert [path.name for path in written] == [
        "section-1.html",
        "section-2.html",
        "index.html",
    ]
    out_dir = generator_state["config"].destination
    assert sorted(path.name for path in out_dir.glob("*.html")) == [
        "index.html",
        "section-1.html",
        "section-2.html",
    ]
    assert guide.section("2") is not None


def test_empty_style_guide_is_fatal_and_writes_nothing(
    generator_state: dict[str, typ.Any],
) -> None:
    """An empty style guide raises and leaves the destination untouched."""
    with pytest.raises(NoDocumentationError, match="No KSS documentation"):
        generator_state["generator"].generate(StyleGuide())
    assert not generator_state["config"].destination.exists()


def test_callback_receives_fatal_error(generator_state: dict[str, typ.Any]) -> None:
    """With a callback, the fatal error is passed instead of raised."""
    errors: list[Exception | None] = []

    written = generator_state["generator"].generate(StyleGuide(), errors.append)

    assert written == []
    assert len(errors) == 1
    assert isinstance(errors[0], NoDocumentationError)


def test_callback_receives_none_on_success(
    generator_state: dict[str, typ.Any],
) -> None:
    """A successful run reports completion with ``None``."""
    errors: list[Exception | None] = []
    generator_state["generator"].generate(_style_guide(), errors.append)
    assert errors == [None]


def test_section_page_renders_partials_and_modifiers(
    generator_state: dict[str, typ.Any],
) -> None:
    """File partials render with sample data, placeholder, and modifier class."""
    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[0])

    buttons = soup.select(".kss-modifier__example button")
    assert [button.get_text(strip=True) for button in buttons] == ["Save", "Save"]
    assert buttons[0]["class"] == ["btn", "[modifier", "class]"]
    assert buttons[1]["class"] == ["btn", "btn--large"]
    assert soup.select_one("#kssref-1-1 .codehilite") is not None


def test_missing_markup_file_renders_not_found(
    generator_state: dict[str, typ.Any],
) -> None:
    """Missing markup files are rendered with a NOT FOUND marker and warned."""
    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[1])

    example = soup.select_one("#kssref-2-4 .kss-modifier__example--default")
    assert example is not None
    assert example.get_text(strip=True).endswith(" NOT FOUND!")
    assert (
        "WARNING: In section 2.4, components/card.html NOT FOUND!"
        in generator_state["messages"]
    )


def test_inline_markup_uses_placeholder(generator_state: dict[str, typ.Any]) -> None:
    """Inline markup receives the configured placeholder as modifier class."""
    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[1])
    example = soup.select_one("#kssref-2-3 .kss-modifier__example--default")
    assert example is not None
    assert example.get_text(strip=True) == "[modifier class]"


def test_styles_and_scripts_follow_config_order(
    generator_state: dict[str, typ.Any],
) -> None:
    """Every page links configured CSS and JS in order."""
    written = generator_state["generator"].generate(_style_guide())
    for path in written:
        soup = _soup(path)
        hrefs = [link["href"] for link in soup.select("link[rel=stylesheet]")]
        assert hrefs == ["kss-assets/kss.css", "styles/site.css", "styles/theme.css"]
        assert [s["src"] for s in soup.select("script[src]")] == ["scripts/app.js"]


def test_menu_marks_current_page(generator_state: dict[str, typ.Any]) -> None:
    """The sidebar marks exactly the rendered root as active."""
    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[1])
    active = soup.select(".kss-nav__menu-item.is-active")
    assert len(active) == 1
    assert active[0].select_one(".kss-nav__ref").get_text(strip=True) == "2"


def test_homepage_renders_markdown(generator_state: dict[str, typ.Any]) -> None:
    """Homepage markdown is converted to HTML with highlighted code."""
    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[-1])
    homepage = soup.select_one(".kss-homepage")
    assert homepage is not None
    assert homepage.select_one("h1").get_text(strip=True) == "Welcome"
    assert homepage.select_one('.codehilite[data-language="css"]') is not None
    assert not any(m.startswith("WARNING") and "homepage" in m for m in generator_state["messages"])


def test_missing_homepage_warns_and_renders_blank(
    generator_state: dict[str, typ.Any], source_dir: Path
) -> None:
    """Without homepage content the index page is still written."""
    (source_dir / "homepage.md").unlink()

    written = generator_state["generator"].generate(_style_guide())

    assert written[-1].name == "index.html"
    assert written[-1].exists()
    assert (
        "WARNING: no homepage content found in homepage.md."
        in generator_state["messages"]
    )


def test_template_assets_are_copied(generator_state: dict[str, typ.Any]) -> None:
    """The template's kss-assets folder is copied to the destination."""
    generator_state["generator"].generate(_style_guide())
    assets = generator_state["config"].destination / "kss-assets" / "kss.css"
    assert assets.is_file()


def test_template_without_assets_is_accepted(
    source_dir: Path, tmp_path: Path
) -> None:
    """A template lacking kss-assets still generates pages."""
    template_dir = tmp_path / "template"
    template_dir.mkdir()
    (template_dir / "index.html").write_text(
        "{{ page_reference }}|{{ sections|length }}|{{ menu|length }}",
        encoding="utf-8",
    )
    config = GeneratorConfig(
        source=[source_dir], destination=tmp_path / "out", template=template_dir
    )

    written = StyleGuideGenerator(config, log=lambda _msg: None).generate(_style_guide())

    assert not (tmp_path / "out" / "kss-assets").exists()
    assert written[0].read_text(encoding="utf-8") == "1|2|2"
    assert written[-1].read_text(encoding="utf-8") == "styleGuide.homepage|0|2"


def test_verbose_run_logs_progress(source_dir: Path, tmp_path: Path) -> None:
    """Verbose runs print the banner, files, partials, and pages."""
    messages: list[str] = []
    config = GeneratorConfig(
        source=[source_dir], destination=tmp_path / "out", verbose=True
    )

    StyleGuideGenerator(config, log=messages.append).generate(_style_guide())

    assert "Generating your KSS style guide!" in messages
    assert " - css/buttons.css" in messages
    assert " - 1.1: components/button.html" in messages
    assert " - 2.3: inline markup" in messages
    assert " - section 1 [ Buttons ]" in messages
    assert " - homepage" in messages


def test_custom_helpers_are_registered(source_dir: Path, tmp_path: Path) -> None:
    """Helper modules expose register(env, config) and load eagerly."""
    helpers_dir = tmp_path / "helpers"
    helpers_dir.mkdir()
    (helpers_dir / "shout.py").write_text(
        "def register(env, config):\n"
        "    env.filters['shout'] = lambda value: str(value).upper() + '!'\n",
        encoding="utf-8",
    )
    template_dir = tmp_path / "template"
    template_dir.mkdir()
    (template_dir / "index.html").write_text(
        "{{ page_reference|shout }}", encoding="utf-8"
    )
    config = GeneratorConfig(
        source=[source_dir],
        destination=tmp_path / "out",
        template=template_dir,
        helpers=[helpers_dir, tmp_path / "missing"],
    )

    written = StyleGuideGenerator(config, log=lambda _msg: None).generate(
        StyleGuide([Section(header="Buttons", reference="Buttons")])
    )

    assert written[0].name == "section-buttons.html"
    assert written[0].read_text(encoding="utf-8") == "BUTTONS!"


def test_helper_without_register_is_rejected(source_dir: Path, tmp_path: Path) -> None:
    """Helper modules lacking register() fail at construction."""
    helpers_dir = tmp_path / "helpers"
    helpers_dir.mkdir()
    (helpers_dir / "broken.py").write_text("VALUE = 1\n", encoding="utf-8")
    config = GeneratorConfig(
        source=[source_dir], destination=tmp_path / "out", helpers=[helpers_dir]
    )

    with pytest.raises(HelperPluginError, match="broken.py"):
        StyleGuideGenerator(config)


def test_partials_do_not_leak_between_runs(
    generator_state: dict[str, typ.Any],
) -> None:
    """Each run starts with a fresh partial registry."""
    generator = generator_state["generator"]
    generator.generate(_style_guide())
    first_registry = generator.partials

    generator.generate(
        StyleGuide([Section(header="Only", reference="5", markup="<p>five</p>")])
    )

    assert generator.partials is not first_registry
    assert [partial.reference for partial in generator.partials] == ["5"]


def test_sample_data_is_escaped_in_partials(
    generator_state: dict[str, typ.Any], source_dir: Path
) -> None:
    """Sample data values are HTML-escaped when a partial renders."""
    (source_dir / "components" / "button.json").write_text(
        '{"label": "<script>alert(1)</script>"}', encoding="utf-8"
    )

    written = generator_state["generator"].generate(_style_guide())
    soup = _soup(written[0])

    assert soup.select_one(".kss-modifier__example script") is None
    button = soup.select_one(".kss-modifier__example button")
    assert button is not None
    assert button.get_text() == "<script>alert(1)</script>"


def test_unparsable_inline_markup_does_not_abort(
    generator_state: dict[str, typ.Any],
) -> None:
    """Markup with broken template syntax is shown literally and warned about."""
    guide = StyleGuide(
        [Section(header="Anchor", reference="1", markup='<a href="{#top}">Top</a>')]
    )

    written = generator_state["generator"].generate(guide)

    assert [path.name for path in written] == ["section-1.html", "index.html"]
    link = _soup(written[0]).select_one(".kss-modifier__example--default a")
    assert link is not None
    assert link["href"] == "{#top}"
    assert any(
        message.startswith("WARNING: In section 1, markup")
        for message in generator_state["messages"]
    )
