"""Build orchestration for CLI and embedding integrations."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from iconsmith.adapters.base import Artifact, ConversionRequest, FontConverter, ensure_converter
from iconsmith.core.config import BuildOptions, resolve_options
from iconsmith.core.context import BuildContext
from iconsmith.core.diagnostics import DiagnosticEmitter, ensure_emitter
from iconsmith.core.metadata import IconMetadataRecord
from iconsmith.core.templates import render_css, render_html
from iconsmith.core.writer import ArtifactWriter


__all__ = [
    "BuildOutcome",
    "BuildResult",
    "IconFontService",
    "generate",
    "generate_outcome",
    "prepare_build",
    "webfont",
]


Config = BuildOptions | Mapping[str, Any]


class BuildResult(Mapping[str, Artifact]):
    """Artifacts of a finished build plus renderers bound to its plan."""

    def __init__(self, artifacts: Mapping[str, Artifact], context: BuildContext) -> None:
        self._artifacts = dict(artifacts)
        self._context = context

    def __getitem__(self, kind: str) -> Artifact:
        return self._artifacts[kind]

    def __iter__(self) -> Iterator[str]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def __repr__(self) -> str:
        return f"BuildResult(formats={list(self._artifacts)!r})"

    @property
    def options(self) -> BuildOptions:
        return self._context.options

    @property
    def codepoints(self) -> dict[str, int]:
        return dict(self._context.options.codepoints)

    @property
    def infos(self) -> tuple[IconMetadataRecord, ...]:
        return tuple(self._context.infos)

    @property
    def written(self) -> tuple[Path, ...]:
        return tuple(self._context.written)

    def generate_css(self, urls: Mapping[str, str] | None = None) -> str:
        """Render the stylesheet, optionally overriding font URLs per format."""
        return render_css(self._context.options, urls)

    def generate_html(self, urls: Mapping[str, str] | None = None) -> str:
        """Render the preview page, optionally overriding font URLs per format."""
        return render_html(self._context.options, urls, infos=self._context.infos)


@dataclass(frozen=True, slots=True)
class BuildOutcome:
    """Tagged result of a build: either ``result`` or ``error`` is set."""

    result: BuildResult | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BuildResult:
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise ValueError("BuildOutcome carries neither a result nor an error.")
        return self.result


def prepare_build(config: Config, *, emitter: DiagnosticEmitter | None = None) -> BuildContext:
    """Resolve the configuration, allocate code points and describe every icon."""
    emitter = ensure_emitter(emitter)
    options = resolve_options(config, emitter=emitter)
    context = BuildContext(options=options, emitter=emitter)
    context.allocate()
    context.describe()
    return context


class IconFontService:
    """Drive the font converter and persist what it produces."""

    def __init__(
        self,
        converter: FontConverter | Callable[..., Any] | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.converter = ensure_converter(converter)
        self.emitter = ensure_emitter(emitter)

    async def build(self, config: Config) -> BuildResult:
        """Run a whole build; any converter error propagates unchanged."""
        context = prepare_build(config, emitter=self.emitter)
        return await self.execute(context)

    async def execute(self, context: BuildContext) -> BuildResult:
        request = ConversionRequest.from_context(context)
        artifacts = await self.converter.convert(request)
        context.emitter.event("fonts_generated", {"formats": list(artifacts)})
        if context.options.write_files:
            ArtifactWriter(context).write(artifacts)
        return BuildResult(artifacts, context)

    async def build_outcome(self, config: Config) -> BuildOutcome:
        try:
            result = await self.build(config)
        except Exception as exc:
            return BuildOutcome(error=exc)
        return BuildOutcome(result=result)


async def generate(
    config: Config,
    *,
    converter: FontConverter | Callable[..., Any] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> BuildResult:
    """Build an icon font bundle, raising on configuration or conversion errors."""
    return await IconFontService(converter, emitter=emitter).build(config)


async def generate_outcome(
    config: Config,
    *,
    converter: FontConverter | Callable[..., Any] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> BuildOutcome:
    """Build an icon font bundle and report the result as a `BuildOutcome`."""
    return await IconFontService(converter, emitter=emitter).build_outcome(config)


def webfont(
    config: Config,
    done: Callable[..., Any],
    *,
    converter: FontConverter | Callable[..., Any] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> Any:
    """Run a build to completion and report through a ``done`` callback.

    ``done(error)`` is called on failure and ``done(None, result)`` on
    success. Must not be called from a running event loop; use `generate`
    there instead.
    """
    outcome = asyncio.run(generate_outcome(config, converter=converter, emitter=emitter))
    if outcome.error is not None:
        return done(outcome.error)
    return done(None, outcome.result)
