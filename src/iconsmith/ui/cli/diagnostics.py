"""Diagnostic emitter bridging the build pipeline with CLI rendering utilities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from iconsmith.core.diagnostics import format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


# Summarised by the presenter once the build completes.
TABULATED_EVENTS = frozenset({"artifact_written"})


class CliEmitter:
    """Emit diagnostics using the rich-enabled CLI helpers.

    Events are recorded on the CLI state. Progress events are echoed as they
    arrive, while tabulated ones only show up inline with ``--verbose``.
    """

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    @property
    def debug_enabled(self) -> bool:
        return self._state.show_tracebacks

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self._state.record_event(name, payload)
        if name in TABULATED_EVENTS and self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["TABULATED_EVENTS", "CliEmitter"]
