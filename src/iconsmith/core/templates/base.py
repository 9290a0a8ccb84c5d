"""Template discovery, Jinja environment, and placeholder substitution."""

from __future__ import annotations

from collections.abc import Mapping
import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
import jsbeautifier

from ..exceptions import TemplateError


TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
TEMPLATES: Mapping[str, Path] = {
    "css": TEMPLATES_DIR / "iconfont.css.jinja",
    "scss": TEMPLATES_DIR / "iconfont.scss.jinja",
    "html": TEMPLATES_DIR / "iconfont.html.jinja",
    "info": TEMPLATES_DIR / "info.js",
    "symbol": TEMPLATES_DIR / "symbol.js",
}

ICON_INFO_PLACEHOLDER = "<% ICON_INFO %>"
SVG_SYMBOL_PLACEHOLDER = "<% SVG_SYMBOL_CODE %>"

_PRETTY_INDENT = 4
_SOURCE_INDENT = 2


def build_environment(template_root: Path) -> Environment:
    """Return a Jinja environment rooted at the template directory."""
    return Environment(
        loader=FileSystemLoader(str(template_root)),
        autoescape=select_autoescape(enabled_extensions=("html", "html.jinja")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(
    template_path: Path,
    context: Mapping[str, Any],
    environment: Environment | None = None,
) -> str:
    """Render ``template_path`` with ``context``."""
    template_path = Path(template_path)
    environment = environment or build_environment(template_path.parent)
    try:
        template = environment.get_template(template_path.name)
    except TemplateNotFound as exc:
        raise TemplateError(f"Template '{template_path}' does not exist.") from exc
    return template.render(dict(context))


def substitute_placeholder(template_path: Path, placeholder: str, payload: Any) -> str:
    """Replace ``placeholder`` in a template with the JSON encoding of ``payload``.

    Only the first occurrence is substituted and the rest of the template is
    kept verbatim; these templates are not processed by Jinja.
    """
    try:
        source = Path(template_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"Unable to read template '{template_path}': {exc}") from exc
    if placeholder not in source:
        raise TemplateError(f"Template '{template_path}' has no '{placeholder}' placeholder.")
    encoded = json.dumps(payload, indent=_SOURCE_INDENT, ensure_ascii=False)
    return source.replace(placeholder, encoded, 1)


def prettify_script(source: str) -> str:
    """Reformat a generated script with four-space indents."""
    options = jsbeautifier.default_options()
    options.indent_size = _PRETTY_INDENT
    options.end_with_newline = True
    return jsbeautifier.beautify(source, options)


__all__ = [
    "ICON_INFO_PLACEHOLDER",
    "SVG_SYMBOL_PLACEHOLDER",
    "TEMPLATES",
    "TEMPLATES_DIR",
    "build_environment",
    "prettify_script",
    "render_template",
    "substitute_placeholder",
]
