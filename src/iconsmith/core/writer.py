"""Persist build artifacts under the output directory."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path

from .context import BuildContext
from .templates import (
    ICON_INFO_PLACEHOLDER,
    SVG_SYMBOL_PLACEHOLDER,
    TEMPLATES,
    prettify_script,
    render_css,
    render_html,
    substitute_placeholder,
)


logger = logging.getLogger(__name__)

SYMBOL_KIND = "symbol"
INFO_FILENAME = "iconfontInfo.js"


def write_file(content: bytes | str, destination: Path) -> Path:
    """Write ``content`` to ``destination``, creating parent directories."""
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        destination.write_bytes(content)
    else:
        destination.write_text(content, encoding="utf-8")
    return destination


def _as_text(content: bytes | str) -> str:
    return content.decode("utf-8") if isinstance(content, bytes) else content


Output = tuple[Path, bytes | str]


class ArtifactWriter:
    """Write font artifacts, stylesheet, preview and info files of a build.

    Every output is rendered in memory before the first file is written, so a
    failing template leaves the output directory untouched.
    """

    def __init__(self, context: BuildContext) -> None:
        self.context = context
        self.options = context.options

    def _write(self, destination: Path, content: bytes | str) -> Path:
        path = write_file(content, destination)
        self.context.written.append(path)
        size = len(content) if isinstance(content, bytes) else len(content.encode("utf-8"))
        self.context.emitter.event("artifact_written", {"path": str(path), "size": size})
        return path

    def render_symbol(self, content: bytes | str) -> list[Output]:
        """Return the SVG sprite and its loader script."""
        dest = self.options.dest
        font_name = self.options.font_name
        script = substitute_placeholder(
            TEMPLATES["symbol"], SVG_SYMBOL_PLACEHOLDER, _as_text(content)
        )
        return [
            (dest / f"{font_name}Symbol.svg", content),
            (dest / f"{font_name}Symbol.js", script),
        ]

    def render_info(self) -> Output:
        """Return the metadata of every icon as ``iconfontInfo.js``."""
        payload = [record.as_dict() for record in self.context.infos]
        script = substitute_placeholder(TEMPLATES["info"], ICON_INFO_PLACEHOLDER, payload)
        return self.options.dest / INFO_FILENAME, prettify_script(script)

    def render(self, artifacts: Mapping[str, bytes | str]) -> list[Output]:
        """Return every file of the build, artifacts first, in write order."""
        options = self.options
        outputs: list[Output] = []
        for kind, content in artifacts.items():
            if kind == SYMBOL_KIND:
                outputs.extend(self.render_symbol(content))
            else:
                outputs.append((options.dest / f"{options.font_name}.{kind}", content))

        if options.css:
            outputs.append((options.css_dest, render_css(options)))
        if options.html:
            outputs.append((options.html_dest, render_html(options, infos=self.context.infos)))
        if options.output_info:
            outputs.append(self.render_info())
        return outputs

    def write_symbol(self, content: bytes | str) -> tuple[Path, Path]:
        """Write the SVG sprite and its loader script."""
        svg_path, script_path = (self._write(*output) for output in self.render_symbol(content))
        return svg_path, script_path

    def write_info(self) -> Path:
        """Write the metadata of every icon to ``iconfontInfo.js``."""
        return self._write(*self.render_info())

    def write(self, artifacts: Mapping[str, bytes | str]) -> list[Path]:
        """Persist every artifact, then the enabled presentation outputs."""
        outputs = self.render(artifacts)
        written = [self._write(destination, content) for destination, content in outputs]
        logger.debug("wrote %d artifact(s) to %s", len(written), self.options.dest)
        return written


__all__ = ["INFO_FILENAME", "SYMBOL_KIND", "ArtifactWriter", "write_file"]
