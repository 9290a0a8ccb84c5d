"""Preview page rendering for generated icon fonts."""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from .base import build_environment, render_template
from .css import hex_codepoints, render_css


if TYPE_CHECKING:
    from ..config import BuildOptions
    from ..metadata import IconMetadataRecord


def relative_fonts_url(options: BuildOptions) -> str:
    """Return the font directory relative to the preview page location."""
    relative = os.path.relpath(options.dest, options.html_dest.parent)
    if relative == os.curdir:
        return ""
    return PurePath(relative).as_posix()


def render_html(
    options: BuildOptions,
    urls: Mapping[str, str] | None = None,
    *,
    infos: list[IconMetadataRecord] | None = None,
) -> str:
    """Render the HTML preview page of a resolved build.

    Embedded styles are rendered with the stylesheet template but point to
    the fonts relative to the page, not to ``css_fonts_url``.
    """
    styles = render_css(options, urls, fonts_url=relative_fonts_url(options))
    context: dict[str, Any] = {
        "names": list(options.names),
        "font_name": options.font_name,
        "styles": styles,
        "codepoints": hex_codepoints(options),
        "infos": [record.as_dict() for record in infos or ()],
    }
    context.update(options.template_options.context())
    context.setdefault("base_class", options.template_options.base_class)
    environment = build_environment(options.html_template.parent)
    options.html_context.extend(context, options, environment)
    return render_template(options.html_template, context, environment)


__all__ = ["relative_fonts_url", "render_html"]
