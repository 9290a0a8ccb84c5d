"""SVG symbol sprite generation."""

from __future__ import annotations

from xml.etree import ElementTree as ET

from .base import ConversionRequest
from .svg import format_number, parse_svg, qualified, read_viewbox


SPRITE_STYLE = "position: absolute; width: 0; height: 0; overflow: hidden"


def build_symbol_sprite(request: ConversionRequest) -> str:
    """Wrap every icon into a ``<symbol>`` of a single hidden SVG document."""
    sprite = ET.Element(qualified("svg"), {"style": SPRITE_STYLE})
    for name, source in request.icons():
        root = parse_svg(source.read_bytes(), source.label)
        viewbox = read_viewbox(root, source.label)
        symbol = ET.SubElement(
            sprite,
            qualified("symbol"),
            {
                "id": request.symbol_ids.get(name, name),
                "viewBox": " ".join(format_number(value) for value in viewbox),
            },
        )
        for child in list(root):
            symbol.append(child)
    return ET.tostring(sprite, encoding="unicode")


__all__ = ["SPRITE_STYLE", "build_symbol_sprite"]
