"""Translate deprecated configuration keys before validation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .diagnostics import DiagnosticEmitter, ensure_emitter


Migration = Callable[[dict[str, Any], DiagnosticEmitter], None]


def _migrate_css_fonts_path(raw: dict[str, Any], emitter: DiagnosticEmitter) -> None:
    for legacy, current in (("cssFontsPath", "cssFontsUrl"), ("css_fonts_path", "css_fonts_url")):
        if legacy not in raw:
            continue
        value = raw.pop(legacy)
        if not value:
            continue
        emitter.warning(f'Option "{legacy}" is deprecated. Use "{current}" instead.')
        raw[current] = value


def _migrate_base_class(raw: dict[str, Any], emitter: DiagnosticEmitter) -> None:
    for key in ("templateOptions", "template_options"):
        options = raw.get(key)
        if not isinstance(options, Mapping):
            continue
        options = dict(options)
        for legacy in ("baseClass", "base_class"):
            if legacy not in options:
                continue
            emitter.warning(
                f"Using deprecated template option '{legacy}'. Use 'baseSelector' instead."
            )
            # Both spellings would collide once aliases are resolved.
            options.pop("baseSelector", None)
            options["base_selector"] = "." + str(options.pop(legacy))
            break
        raw[key] = options


MIGRATIONS: tuple[tuple[str, Migration], ...] = (
    ("css-fonts-path", _migrate_css_fonts_path),
    ("template-base-class", _migrate_base_class),
)


def migrate_options(
    raw: Mapping[str, Any], emitter: DiagnosticEmitter | None = None
) -> dict[str, Any]:
    """Return a copy of ``raw`` with every registered migration applied in order."""
    emitter = ensure_emitter(emitter)
    migrated = dict(raw)
    for _name, migration in MIGRATIONS:
        migration(migrated, emitter)
    return migrated


__all__ = ["MIGRATIONS", "migrate_options"]
