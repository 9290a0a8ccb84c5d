"""Icon source entries accepted by the build configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .exceptions import IconSourceError


@dataclass(frozen=True, slots=True)
class IconSource:
    """A single vector icon, backed by a file or by in-memory contents."""

    path: Path | None = None
    name: str | None = None
    contents: bytes | None = None

    def __post_init__(self) -> None:
        if self.path is None and self.contents is None:
            raise ValueError("An icon source needs either a path or contents.")
        if self.path is None and not self.name:
            raise ValueError("An in-memory icon source needs a name.")

    @classmethod
    def coerce(cls, entry: Any) -> IconSource:
        """Build a source from a path, a mapping, or an object exposing metadata."""
        if isinstance(entry, IconSource):
            return entry
        if isinstance(entry, (str, Path)):
            return cls(path=Path(entry))
        if isinstance(entry, Mapping):
            path = entry.get("path")
            contents = entry.get("contents")
            if isinstance(contents, str):
                contents = contents.encode("utf-8")
            return cls(
                path=Path(path) if path is not None else None,
                name=entry.get("name"),
                contents=contents,
            )

        # File-like objects carrying ``metadata.name`` (vinyl style).
        metadata = getattr(entry, "metadata", None)
        name = getattr(metadata, "name", None) or getattr(entry, "name", None)
        path = getattr(entry, "path", None)
        contents = getattr(entry, "contents", None)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        if path is None and contents is None:
            raise TypeError(f"Unsupported icon source entry: {entry!r}")
        return cls(
            path=Path(path) if path is not None else None,
            name=name,
            contents=contents,
        )

    @property
    def label(self) -> str:
        if self.path is not None:
            return str(self.path)
        return self.name or "<memory>"

    def read_bytes(self) -> bytes:
        """Return the raw SVG payload."""
        if self.contents is not None:
            return self.contents
        if self.path is None:
            raise IconSourceError(f"Icon source '{self.label}' has no contents.")
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise IconSourceError(f"Unable to read icon source '{self.path}': {exc}") from exc


__all__ = ["IconSource"]
