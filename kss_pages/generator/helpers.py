"""Template helpers and the helper plugin interface.

Helpers are registered on the Jinja environment through a single entry point,
``register(env, config)``. The built-in helpers below use it, and so must every
``*.py`` module found in a configured helper directory.

Built-in helpers
----------------
``render_markup(reference, modifier=None)``
    Render the partial owned by ``reference`` with its sample data and a
    ``modifier_class`` variable (the modifier's class, or the configured
    placeholder).
``highlight`` filter
    Syntax-highlight markup source for display next to the rendered example.
"""

from __future__ import annotations

import importlib.util
import typing as typ
from pathlib import Path

from jinja2 import pass_context
from markupsafe import Markup

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from jinja2 import Environment
    from jinja2.runtime import Context

    from kss_pages.config import GeneratorConfig


class HelperPluginError(RuntimeError):
    """Raised when a helper module cannot be registered."""


def register(env: Environment, config: GeneratorConfig) -> None:
    """Register the built-in helpers on ``env``."""
    renderer = HtmlContentRenderer(config.pygments_style)

    @pass_context
    def render_markup(
        context: Context, reference: str, modifier: typ.Any = None
    ) -> Markup:
        registry = context.get("partials")
        partial = registry.get(reference) if registry is not None else None
        if partial is None:
            return Markup("")
        if modifier is None:
            modifier_class = config.placeholder
        elif isinstance(modifier, dict):
            modifier_class = modifier.get("class_name", "")
        else:
            modifier_class = getattr(modifier, "class_name", str(modifier))
        variables = dict(partial.data)
        variables["modifier_class"] = modifier_class
        template = context.environment.get_template(partial.name)
        return Markup(template.render(variables))

    def highlight_markup(code: str, language: str = "html") -> Markup:
        return Markup(renderer.code_block(code, language))

    env.globals["render_markup"] = render_markup
    env.filters["highlight"] = highlight_markup


def load_helper_plugins(env: Environment, config: GeneratorConfig) -> list[Path]:
    """Import every helper module from ``config.helpers`` and register it.

    Missing directories are skipped. Modules are loaded in sorted filename
    order within each directory.

    Returns
    -------
    list[Path]
        Helper modules that were registered.

    Raises
    ------
    HelperPluginError
        When a module cannot be imported or lacks a callable ``register``.
    """
    loaded: list[Path] = []
    for directory in config.helpers:
        if not directory.is_dir():
            continue
        for module_path in sorted(directory.glob("*.py")):
            entry_point = _import_register(module_path)
            entry_point(env, config)
            loaded.append(module_path)
    return loaded


def _import_register(module_path: Path) -> typ.Callable[..., typ.Any]:
    spec = importlib.util.spec_from_file_location(
        f"kss_pages_helpers.{module_path.stem}", module_path
    )
    if spec is None or spec.loader is None:
        msg = f"Cannot import helper module '{module_path}'."
        raise HelperPluginError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    entry_point = getattr(module, "register", None)
    if not callable(entry_point):
        msg = f"Helper module '{module_path}' does not define register(env, config)."
        raise HelperPluginError(msg)
    return entry_point


__all__ = ["HelperPluginError", "load_helper_plugins", "register"]
