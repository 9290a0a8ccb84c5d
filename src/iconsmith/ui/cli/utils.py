"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic.alias_generators import to_camel

from iconsmith.core.config import load_config_file
from iconsmith.core.exceptions import ConfigurationError
from iconsmith.core.metadata import parse_unicode_reference


def parse_codepoint(value: Any) -> int:
    """Parse a code point given as an integer or a hexadecimal string.

    ``F101``, ``0xF101``, ``U+F101`` and ``&#xf101;`` are all accepted.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid code point {value!r}.")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid code point {value!r}.")
    text = value.strip().lower()
    if text.startswith("&#x"):
        return parse_unicode_reference(text)
    for prefix in ("u+", "0x"):
        if text.startswith(prefix):
            text = text[len(prefix) :]
            break
    try:
        return int(text, 16)
    except ValueError as exc:
        raise ValueError(f"Invalid code point {value!r}.") from exc


def load_codepoints(path: Path) -> dict[str, int]:
    """Load a ``name -> code point`` mapping from a YAML or JSON file."""
    payload = load_config_file(path)
    codepoints: dict[str, int] = {}
    for name, value in payload.items():
        try:
            codepoints[str(name)] = parse_codepoint(value)
        except ValueError as exc:
            raise ConfigurationError(f"{exc} (icon '{name}' in '{path}')", field="codepoints") from exc
    return codepoints


def set_option(config: dict[str, Any], name: str, value: Any) -> None:
    """Set ``name`` in ``config``, replacing any camelCase spelling of it."""
    config.pop(to_camel(name), None)
    config[name] = value


def assemble_config(
    *,
    config_path: Path | None,
    icons: Iterable[Path] | None,
    overrides: Mapping[str, Any],
    codepoints_path: Path | None = None,
) -> dict[str, Any]:
    """Merge the configuration file with command line flags.

    Flags left to ``None`` keep the value from the configuration file.
    Code points from ``codepoints_path`` are merged over those of the file.
    """
    config = load_config_file(config_path) if config_path is not None else {}
    icons = list(icons or [])
    if icons:
        set_option(config, "files", icons)
    for name, value in overrides.items():
        if value is not None:
            set_option(config, name, value)
    if codepoints_path is not None:
        existing = config.pop("codepoints", None) or {}
        merged = {str(key): parse_codepoint(value) for key, value in dict(existing).items()}
        merged.update(load_codepoints(codepoints_path))
        config["codepoints"] = merged
    return config


__all__ = ["assemble_config", "load_codepoints", "parse_codepoint", "set_option"]
