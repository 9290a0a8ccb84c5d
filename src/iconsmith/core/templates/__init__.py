"""Renderers and templates for the stylesheet, preview, info and symbol outputs."""

from __future__ import annotations

from .base import (
    ICON_INFO_PLACEHOLDER,
    SVG_SYMBOL_PLACEHOLDER,
    TEMPLATES,
    TEMPLATES_DIR,
    build_environment,
    prettify_script,
    render_template,
    substitute_placeholder,
)
from .css import make_src, make_urls, render_css, sources_hash
from .html import relative_fonts_url, render_html


__all__ = [
    "ICON_INFO_PLACEHOLDER",
    "SVG_SYMBOL_PLACEHOLDER",
    "TEMPLATES",
    "TEMPLATES_DIR",
    "build_environment",
    "make_src",
    "make_urls",
    "prettify_script",
    "relative_fonts_url",
    "render_css",
    "render_html",
    "render_template",
    "sources_hash",
    "substitute_placeholder",
]
