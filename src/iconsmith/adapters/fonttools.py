"""Default font converter built on fontTools.

Icons are traced once into recorded outlines, then replayed into a TrueType
glyph table (cubic curves converted to quadratic ones) and into SVG font
glyphs. WOFF, WOFF2 and EOT are derived from the TrueType binary.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
import io
import logging
from typing import Any
from xml.etree import ElementTree as ET

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.transform import Transform
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import SVGPath
from fontTools.ttLib import TTFont

from iconsmith.core.exceptions import FontConversionError, IconSourceError, UnsupportedFormatError

from .base import Artifact, ConversionRequest
from .eot import ttf_to_eot
from .sprite import build_symbol_sprite
from .svg import parse_svg, qualified, read_viewbox


logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: tuple[str, ...] = ("ttf", "woff", "woff2", "eot", "svg", "symbol")

UPM = 1000
ASCENT = 800
DESCENT = 200


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Vertical metrics and naming of the generated font."""

    units_per_em: int = UPM
    ascent: int = ASCENT
    descent: int = DESCENT
    version: str = "1.0"
    copyright: str = ""

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FontMetrics:
        units_per_em = int(options.get("units_per_em", UPM))
        descent = abs(int(options.get("descent", round(units_per_em * DESCENT / UPM))))
        ascent = int(options.get("ascent", units_per_em - descent))
        return cls(
            units_per_em=units_per_em,
            ascent=ascent,
            descent=descent,
            version=str(options.get("version", "1.0")),
            copyright=str(options.get("copyright", "")),
        )

    @property
    def height(self) -> int:
        return self.ascent + self.descent


@dataclass(slots=True)
class GlyphOutline:
    """Outline of one icon, recorded in font units."""

    name: str
    codepoint: int
    advance: int
    recording: RecordingPen

    @property
    def glyph_name(self) -> str:
        return glyph_name_for(self.codepoint)


def glyph_name_for(codepoint: int) -> str:
    """Return the AGL style glyph name of ``codepoint``."""
    if codepoint <= 0xFFFF:
        return f"uni{codepoint:04X}"
    return f"u{codepoint:05X}"


def trace_outlines(request: ConversionRequest, metrics: FontMetrics) -> list[GlyphOutline]:
    """Scale every icon to the em box and record its outline."""
    icons = []
    for name, source in request.icons():
        data = source.read_bytes()
        root = parse_svg(data, source.label)
        icons.append((name, source, data, read_viewbox(root, source.label)))

    tallest = max((icon[3][3] for icon in icons), default=1.0)
    outlines: list[GlyphOutline] = []
    for name, source, data, (x, y, width, height) in icons:
        scale = metrics.height / (height if request.normalize else tallest)
        transform = Transform(scale, 0, 0, -scale, -x * scale, metrics.ascent + y * scale)
        recording = RecordingPen()
        try:
            SVGPath.fromstring(data, transform=transform).draw(recording)
        except (ValueError, ET.ParseError) as exc:
            raise IconSourceError(f"Unable to trace '{source.label}': {exc}") from exc
        outlines.append(
            GlyphOutline(
                name=name,
                codepoint=request.codepoints[name],
                advance=round(width * scale),
                recording=recording,
            )
        )
    return outlines


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def _ligature_features(outlines: list[GlyphOutline], cmap: dict[int, str]) -> tuple[str, dict[int, str]]:
    """Return feature code mapping each icon name to its glyph, plus letter glyphs."""
    letters: dict[int, str] = {}
    rules: list[tuple[int, str]] = []
    for outline in outlines:
        if len(outline.name) < 2:
            continue
        components: list[str] = []
        for char in outline.name:
            codepoint = ord(char)
            glyph = cmap.get(codepoint) or letters.setdefault(codepoint, glyph_name_for(codepoint))
            components.append(glyph)
        rules.append((len(components), f"    sub {' '.join(components)} by {outline.glyph_name};"))
    if not rules:
        return "", letters
    rules.sort(key=lambda rule: -rule[0])
    lines = [
        "languagesystem DFLT dflt;",
        "languagesystem latn dflt;",
        "",
        "feature liga {",
        *(rule for _, rule in rules),
        "} liga;",
    ]
    return "\n".join(lines) + "\n", letters


def build_truetype(request: ConversionRequest, outlines: list[GlyphOutline], metrics: FontMetrics) -> bytes:
    """Compile the traced outlines into a TrueType font."""
    glyph_order = [".notdef"]
    glyphs = {".notdef": _empty_glyph()}
    advances = {".notdef": metrics.units_per_em // 2}
    cmap: dict[int, str] = {}

    for outline in outlines:
        tt_pen = TTGlyphPen(None)
        outline.recording.replay(Cu2QuPen(tt_pen, max_err=1.0, reverse_direction=True))
        glyph_name = outline.glyph_name
        glyph_order.append(glyph_name)
        glyphs[glyph_name] = tt_pen.glyph()
        advances[glyph_name] = outline.advance
        cmap[outline.codepoint] = glyph_name

    features = ""
    if request.ligature:
        features, letters = _ligature_features(outlines, cmap)
        for codepoint, glyph_name in sorted(letters.items()):
            glyph_order.append(glyph_name)
            glyphs[glyph_name] = _empty_glyph()
            advances[glyph_name] = 0
            cmap[codepoint] = glyph_name

    family = request.font_name
    ps_name = "".join(family.split()) or "iconfont"

    fb = FontBuilder(metrics.units_per_em, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    glyf_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (advances[name], getattr(glyf_table[name], "xMin", 0)) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=metrics.ascent, descent=-metrics.descent)
    name_strings = {
        "familyName": family,
        "styleName": "Regular",
        "uniqueFontIdentifier": f"{ps_name}-Regular",
        "fullName": f"{family} Regular",
        "psName": f"{ps_name}-Regular",
        "version": f"Version {metrics.version}",
    }
    if metrics.copyright:
        name_strings["copyright"] = metrics.copyright
    fb.setupNameTable(name_strings)
    fb.setupOS2(
        sTypoAscender=metrics.ascent,
        sTypoDescender=-metrics.descent,
        sTypoLineGap=0,
        usWinAscent=metrics.ascent,
        usWinDescent=metrics.descent,
    )
    fb.setupPost()
    fb.setupMaxp()
    if features:
        fb.addOpenTypeFeatures(features)

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def compress(ttf: bytes, flavor: str) -> bytes:
    """Return ``ttf`` wrapped as a WOFF or WOFF2 font."""
    font = TTFont(io.BytesIO(ttf))
    font.flavor = flavor
    buffer = io.BytesIO()
    try:
        font.save(buffer)
    except ImportError as exc:
        raise FontConversionError(f"{flavor.upper()} output requires brotli: {exc}") from exc
    return buffer.getvalue()


def build_svg_font(request: ConversionRequest, outlines: list[GlyphOutline], metrics: FontMetrics) -> str:
    """Return the outlines as an SVG font document."""
    svg = ET.Element(qualified("svg"))
    defs = ET.SubElement(svg, qualified("defs"))
    font = ET.SubElement(
        defs,
        qualified("font"),
        {"id": request.font_name, "horiz-adv-x": str(metrics.units_per_em)},
    )
    ET.SubElement(
        font,
        qualified("font-face"),
        {
            "font-family": request.font_name,
            "units-per-em": str(metrics.units_per_em),
            "ascent": str(metrics.ascent),
            "descent": str(-metrics.descent),
        },
    )
    ET.SubElement(font, qualified("missing-glyph"), {"horiz-adv-x": "0"})
    for outline in outlines:
        pen = SVGPathPen(None)
        outline.recording.replay(pen)
        ET.SubElement(
            font,
            qualified("glyph"),
            {
                "glyph-name": outline.name,
                "unicode": chr(outline.codepoint),
                "horiz-adv-x": str(outline.advance),
                "d": pen.getCommands(),
            },
        )
    return '<?xml version="1.0" standalone="no"?>\n' + ET.tostring(svg, encoding="unicode")


class FontToolsConverter:
    """Convert SVG icons into web font formats with fontTools."""

    formats = SUPPORTED_FORMATS

    async def convert(self, request: ConversionRequest) -> Mapping[str, Artifact]:
        unsupported = [fmt for fmt in request.formats if fmt not in SUPPORTED_FORMATS]
        if unsupported:
            raise UnsupportedFormatError(
                f"Unsupported font format(s): {', '.join(unsupported)}. "
                f"Supported formats: {', '.join(SUPPORTED_FORMATS)}."
            )
        return await asyncio.to_thread(self.convert_sync, request)

    def convert_sync(self, request: ConversionRequest) -> dict[str, Artifact]:
        metrics = FontMetrics.from_options(request.format_options.get("ttf", {}))
        outlines: list[GlyphOutline] = []
        if any(fmt != "symbol" for fmt in request.formats):
            outlines = trace_outlines(request, metrics)

        ttf: bytes | None = None
        results: dict[str, Artifact] = {}
        for fmt in request.formats:
            if fmt == "symbol":
                results[fmt] = build_symbol_sprite(request)
            elif fmt == "svg":
                results[fmt] = build_svg_font(request, outlines, metrics)
            else:
                if ttf is None:
                    ttf = build_truetype(request, outlines, metrics)
                if fmt == "ttf":
                    results[fmt] = ttf
                elif fmt == "eot":
                    results[fmt] = ttf_to_eot(ttf)
                else:
                    results[fmt] = compress(ttf, fmt)
            logger.debug("generated %s for '%s'", fmt, request.font_name)
        return results


__all__ = [
    "SUPPORTED_FORMATS",
    "FontMetrics",
    "FontToolsConverter",
    "GlyphOutline",
    "build_svg_font",
    "build_truetype",
    "compress",
    "glyph_name_for",
    "trace_outlines",
]
