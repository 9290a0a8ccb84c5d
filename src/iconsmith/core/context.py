"""Per-invocation build state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .codepoints import allocate_codepoints
from .config import BuildOptions
from .diagnostics import DiagnosticEmitter, LoggingEmitter
from .metadata import IconMetadataRecord, build_icon_metadata


@dataclass(slots=True)
class BuildContext:
    """State owned by a single build, discarded once it completes."""

    options: BuildOptions
    emitter: DiagnosticEmitter = field(default_factory=LoggingEmitter)
    infos: list[IconMetadataRecord] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)

    def allocate(self) -> dict[str, int]:
        """Complete the code point map of the build plan in place."""
        options = self.options
        allocate_codepoints(
            options.names,
            options.codepoints,
            start=options.start_codepoint,
            end=options.end_codepoint,
        )
        assigned = [options.codepoints[name] for name in options.names]
        self.emitter.event(
            "codepoints_allocated",
            {
                "count": len(assigned),
                "first": min(assigned) if assigned else None,
                "last": max(assigned) if assigned else None,
            },
        )
        return options.codepoints

    def describe(self) -> list[IconMetadataRecord]:
        """Derive the metadata record of every icon."""
        options = self.options
        return build_icon_metadata(
            options.names, options.codepoints, options.template_options, self.infos
        )

    @property
    def symbol_ids(self) -> dict[str, str]:
        return {record.name: record.symbol_id for record in self.infos}


__all__ = ["BuildContext"]
