"""Implementation of the `iconsmith codepoints` command."""

from __future__ import annotations

import json

import typer

from iconsmith.api.service import prepare_build
from iconsmith.core.exceptions import IconsmithError, exception_hint

from .._options import (
    CodepointsOption,
    ConfigOption,
    DebugOption,
    IconsArgument,
    StartCodepointOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..state import debug_enabled, emit_error, set_cli_state
from ..utils import assemble_config
from .build import parse_start_codepoint


def codepoints(
    ctx: typer.Context,
    icons: IconsArgument = None,
    config: ConfigOption = None,
    codepoints: CodepointsOption = None,
    start_codepoint: StartCodepointOption = None,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print the code point assigned to every icon as JSON, without building fonts."""
    # Allocation events would interleave with the JSON document on stdout.
    state = set_cli_state(ctx=ctx, verbosity=verbose, quiet=True, debug=debug)
    start = parse_start_codepoint(start_codepoint)

    try:
        raw = assemble_config(
            config_path=config,
            icons=icons,
            codepoints_path=codepoints,
            overrides={"start_codepoint": start},
        )
        raw.setdefault("dest", ".")
        context = prepare_build(raw, emitter=CliEmitter(state))
    except IconsmithError as exc:
        if debug_enabled():
            raise
        emit_error(exception_hint(exc) or str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    options = context.options
    allocated = {name: options.codepoints[name] for name in options.names}
    typer.echo(json.dumps(allocated, indent=2))


__all__ = ["codepoints"]
