"""CLI command implementations."""

from __future__ import annotations

from .build import build
from .codepoints import codepoints


__all__ = ["build", "codepoints"]
