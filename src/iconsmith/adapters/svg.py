"""SVG parsing helpers shared by the font and sprite generators."""

from __future__ import annotations

import re
from xml.etree import ElementTree as ET

from iconsmith.core.exceptions import IconSourceError


SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_LENGTH = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


def qualified(tag: str) -> str:
    """Return ``tag`` in the SVG namespace."""
    return f"{{{SVG_NS}}}{tag}"


def parse_svg(data: bytes, label: str) -> ET.Element:
    """Parse an SVG document, moving bare elements into the SVG namespace."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise IconSourceError(f"Invalid SVG in '{label}': {exc}") from exc
    for element in root.iter():
        if isinstance(element.tag, str) and not element.tag.startswith("{"):
            element.tag = qualified(element.tag)
    if root.tag != qualified("svg"):
        raise IconSourceError(f"'{label}' is not an SVG document.")
    return root


def _parse_length(value: str | None) -> float | None:
    if value is None:
        return None
    match = _LENGTH.match(value)
    return float(match.group(1)) if match else None


def read_viewbox(root: ET.Element, label: str) -> tuple[float, float, float, float]:
    """Return ``(x, y, width, height)`` from the viewBox or the root size."""
    viewbox = root.get("viewBox")
    if viewbox:
        parts = viewbox.replace(",", " ").split()
        try:
            x, y, width, height = (float(part) for part in parts)
        except ValueError as exc:
            raise IconSourceError(f"Bad viewBox '{viewbox}' in '{label}'.") from exc
    else:
        x = y = 0.0
        width = _parse_length(root.get("width"))
        height = _parse_length(root.get("height"))
        if width is None or height is None:
            raise IconSourceError(f"'{label}' declares neither a viewBox nor a size.")
    if width <= 0 or height <= 0:
        raise IconSourceError(f"'{label}' has an empty viewBox.")
    return x, y, width, height


def format_number(value: float) -> str:
    return f"{value:g}"


__all__ = [
    "SVG_NS",
    "XLINK_NS",
    "format_number",
    "parse_svg",
    "qualified",
    "read_viewbox",
]
