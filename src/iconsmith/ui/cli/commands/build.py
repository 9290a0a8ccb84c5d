"""Implementation of the `iconsmith build` command."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from iconsmith.api.service import IconFontService
from iconsmith.core.diagnostics import DiagnosticEmitter
from iconsmith.core.exceptions import IconsmithError, exception_hint

from .._options import (
    CodepointsOption,
    ConfigOption,
    CssFontsUrlOption,
    CssOption,
    DebugOption,
    DestOption,
    FontNameOption,
    HtmlOption,
    IconsArgument,
    InfoOption,
    QuietOption,
    StartCodepointOption,
    TypesOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_build_summary
from ..state import debug_enabled, emit_error, set_cli_state
from ..utils import assemble_config, parse_codepoint


def make_service(emitter: DiagnosticEmitter) -> IconFontService:
    """Return the build service used by the command."""
    return IconFontService(emitter=emitter)


def parse_start_codepoint(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return parse_codepoint(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--start-codepoint") from exc


def build(
    ctx: typer.Context,
    icons: IconsArgument = None,
    dest: DestOption = None,
    config: ConfigOption = None,
    font_name: FontNameOption = None,
    types: TypesOption = None,
    codepoints: CodepointsOption = None,
    start_codepoint: StartCodepointOption = None,
    css: CssOption = None,
    html: HtmlOption = None,
    info: InfoOption = None,
    css_fonts_url: CssFontsUrlOption = None,
    verbose: VerbosityOption = 0,
    quiet: QuietOption = False,
    debug: DebugOption = False,
) -> None:
    """Build an icon font, its stylesheet and companion files from SVG icons."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, quiet=quiet, debug=debug)
    start = parse_start_codepoint(start_codepoint)

    try:
        raw = assemble_config(
            config_path=config,
            icons=icons,
            codepoints_path=codepoints,
            overrides={
                "dest": dest,
                "font_name": font_name,
                "types": list(types) if types else None,
                "start_codepoint": start,
                "css": css,
                "html": html,
                "output_info": info,
                "css_fonts_url": css_fonts_url,
            },
        )
        service = make_service(CliEmitter(state))
        result = asyncio.run(service.build(raw))
    except IconsmithError as exc:
        if debug_enabled():
            raise
        emit_error(exception_hint(exc) or str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    present_build_summary(state=state, result=result)


__all__ = ["build", "make_service", "parse_start_codepoint"]
