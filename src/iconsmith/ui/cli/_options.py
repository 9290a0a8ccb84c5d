"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
FONT_PANEL = "Font"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

IconsArgument = Annotated[
    list[Path] | None,
    typer.Argument(
        metavar="ICON...",
        help="SVG icons to include, in code point allocation order.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML or JSON file providing build options. Command line flags take precedence.",
        exists=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

CodepointsOption = Annotated[
    Path | None,
    typer.Option(
        "--codepoints",
        help="YAML or JSON mapping of icon names to fixed code points (integers or hex strings).",
        exists=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=FONT_PANEL,
    ),
]

StartCodepointOption = Annotated[
    str | None,
    typer.Option(
        "--start-codepoint",
        help="First code point handed out, in hexadecimal (e.g. F101 or U+F101).",
        rich_help_panel=FONT_PANEL,
    ),
]

FontNameOption = Annotated[
    str | None,
    typer.Option(
        "--font-name",
        "-n",
        help="Font family name, also used as the base name of generated files.",
        rich_help_panel=FONT_PANEL,
    ),
]

TypesOption = Annotated[
    list[str] | None,
    typer.Option(
        "--type",
        "-t",
        help="Output format to generate (ttf, woff, woff2, eot, svg, symbol). Repeatable.",
        rich_help_panel=FONT_PANEL,
    ),
]

DestOption = Annotated[
    Path | None,
    typer.Option(
        "--dest",
        "-d",
        help="Directory receiving the generated files.",
        file_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CssOption = Annotated[
    bool | None,
    typer.Option(
        "--css/--no-css",
        help="Generate the stylesheet.",
        show_default=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

HtmlOption = Annotated[
    bool | None,
    typer.Option(
        "--html/--no-html",
        help="Generate the HTML preview page.",
        show_default=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

InfoOption = Annotated[
    bool | None,
    typer.Option(
        "--info/--no-info",
        help="Generate iconfontInfo.js.",
        show_default=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CssFontsUrlOption = Annotated[
    str | None,
    typer.Option(
        "--css-fonts-url",
        help="Base URL of the font files referenced by the stylesheet.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic detail (repeatable).",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only report warnings and errors.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on failure.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "CodepointsOption",
    "ConfigOption",
    "CssFontsUrlOption",
    "CssOption",
    "DebugOption",
    "DestOption",
    "FontNameOption",
    "HtmlOption",
    "IconsArgument",
    "InfoOption",
    "QuietOption",
    "StartCodepointOption",
    "TypesOption",
    "VerbosityOption",
]
