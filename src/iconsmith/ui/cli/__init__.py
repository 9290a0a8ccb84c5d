"""Public CLI exports for iconsmith."""

from __future__ import annotations

from .app import app, main
from .commands import build, codepoints
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "build",
    "codepoints",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
]
