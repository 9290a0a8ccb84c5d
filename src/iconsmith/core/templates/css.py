"""Stylesheet rendering for generated icon fonts."""

from __future__ import annotations

from collections.abc import Mapping
import hashlib
from typing import TYPE_CHECKING, Any

from .base import build_environment, render_template


if TYPE_CHECKING:
    from ..config import BuildOptions


FONT_SRC_FORMATS: Mapping[str, str] = {
    "eot": 'url("{url}?#iefix") format("embedded-opentype")',
    "woff2": 'url("{url}") format("woff2")',
    "woff": 'url("{url}") format("woff")',
    "ttf": 'url("{url}") format("truetype")',
    "svg": 'url("{url}#{font_name}") format("svg")',
}


def sources_hash(options: BuildOptions) -> str:
    """Return an MD5 digest of every icon source, used to bust caches."""
    digest = hashlib.md5(usedforsecurity=False)
    for source in options.files:
        digest.update(source.read_bytes())
    return digest.hexdigest()


def _url_join(base: str, name: str) -> str:
    base = base.replace("\\", "/")
    if not base:
        return name
    return base.rstrip("/") + "/" + name


def make_urls(options: BuildOptions, fonts_url: str | None = None) -> dict[str, str]:
    """Return the default URL of every requested font format."""
    base_url = options.css_fonts_url if fonts_url is None else fonts_url
    digest = sources_hash(options)
    urls: dict[str, str] = {}
    for font_type in options.types:
        filename = f"{options.font_name}.{font_type}?{digest}"
        urls[font_type] = _url_join(base_url, filename) if base_url else filename
    return urls


def make_src(options: BuildOptions, urls: Mapping[str, str]) -> str:
    """Build the ``src`` descriptor of the ``@font-face`` rule.

    Formats follow ``options.order``; requested formats missing from the
    order (the symbol sprite for instance) are not part of the rule.
    """
    ordered = [font_type for font_type in options.order if font_type in options.types]
    entries = [
        FONT_SRC_FORMATS[font_type].format(url=urls[font_type], font_name=options.font_name)
        for font_type in ordered
        if font_type in FONT_SRC_FORMATS and font_type in urls
    ]
    return ",\n\t\t".join(entries)


def hex_codepoints(options: BuildOptions) -> dict[str, str]:
    """Return the code point of every built icon as a lowercase hex string."""
    return {name: format(options.codepoints[name], "x") for name in options.names}


def make_css_context(options: BuildOptions, urls: Mapping[str, str]) -> dict[str, Any]:
    context: dict[str, Any] = {
        "font_name": options.font_name,
        "src": make_src(options, urls),
        "codepoints": hex_codepoints(options),
    }
    context.update(options.template_options.context())
    context.setdefault("base_class", options.template_options.base_class)
    return context


def render_css(
    options: BuildOptions,
    urls: Mapping[str, str] | None = None,
    *,
    fonts_url: str | None = None,
) -> str:
    """Render the stylesheet of a resolved build.

    ``urls`` overrides the URL of selected formats; the others keep their
    default ``<fonts_url>/<font_name>.<type>?<hash>`` location.
    """
    resolved = make_urls(options, fonts_url)
    if urls:
        resolved.update(urls)
    context = make_css_context(options, resolved)
    environment = build_environment(options.css_template.parent)
    options.css_context.extend(context, options, environment)
    return render_template(options.css_template, context, environment)


__all__ = [
    "FONT_SRC_FORMATS",
    "hex_codepoints",
    "make_css_context",
    "make_src",
    "make_urls",
    "render_css",
    "sources_hash",
]
