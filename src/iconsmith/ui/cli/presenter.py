"""Rich presentation helpers for CLI summaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from iconsmith.api import BuildResult

from .state import CLIState


_LOCATION_STYLES = {
    ".ttf": "bright_green",
    ".woff": "bright_green",
    ".woff2": "bright_green",
    ".eot": "bright_green",
    ".svg": "magenta",
    ".css": "bright_cyan",
    ".html": "bright_cyan",
    ".js": "yellow",
}


def _format_path(path: Path) -> str:
    """Format a path relative to the current working directory for display."""
    resolved = path.resolve()
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(resolved)


def _size_details(size: object) -> str:
    """Return a human-readable size for a recorded byte count."""
    if not isinstance(size, int):
        return ""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.2f} MiB"
    if size >= 1024:
        return f"{size / 1024:.1f} KiB"
    return f"{size} B"


def _artifact_label(path: Path, result: BuildResult) -> str:
    options = result.options
    if path == options.css_dest:
        return "Stylesheet"
    if path == options.html_dest:
        return "Preview"
    if path.name == "iconfontInfo.js":
        return "Icon info"
    if path.stem.endswith("Symbol"):
        return "Symbol sprite"
    return f"Font ({path.suffix.lstrip('.')})"


def _render_summary(state: CLIState, rows: Sequence[tuple[str, str, str]]) -> None:
    """Display a summary table of generated artifacts."""
    table = Table(box=box.SQUARE, header_style="bold cyan")
    table.add_column("Artifact", style="cyan")
    table.add_column("Location")
    table.add_column("Filesize", style="magenta", justify="right", no_wrap=True)
    for artifact, location, details in rows:
        style = _LOCATION_STYLES.get(Path(location).suffix.lower())
        table.add_row(artifact, Text(location, style=style or ""), details)
    state.console.print(table)


def present_build_summary(*, state: CLIState, result: BuildResult) -> None:
    """List every file written by a build from the recorded write events."""
    written = state.consume_events("artifact_written")
    if state.quiet:
        return
    if not written:
        state.console.print(f"Generated {len(result)} artifact(s) in memory.", highlight=False)
        return
    rows = []
    for event in written:
        path = Path(event["path"])
        rows.append(
            (_artifact_label(path, result), _format_path(path), _size_details(event.get("size")))
        )
    _render_summary(state, rows)


__all__ = ["present_build_summary"]
