"""Interface between the build driver and font converters."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from iconsmith.core.sources import IconSource


if TYPE_CHECKING:
    from iconsmith.core.context import BuildContext


Artifact = bytes | str


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """Everything a converter needs to produce the requested formats."""

    font_name: str
    names: tuple[str, ...]
    codepoints: Mapping[str, int]
    formats: tuple[str, ...]
    order: tuple[str, ...]
    sources: tuple[IconSource, ...]
    normalize: bool = True
    ligature: bool = True
    symbol_ids: Mapping[str, str] = field(default_factory=dict)
    format_options: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_context(cls, context: BuildContext) -> ConversionRequest:
        options = context.options
        return cls(
            font_name=options.font_name,
            names=tuple(options.names),
            codepoints=dict(options.codepoints),
            formats=tuple(options.types),
            order=tuple(options.order),
            sources=tuple(options.files),
            normalize=options.normalize,
            ligature=options.ligature,
            symbol_ids=context.symbol_ids,
            format_options={key: dict(value) for key, value in options.format_options.items()},
        )

    def icons(self) -> list[tuple[str, IconSource]]:
        """Return ``(name, source)`` pairs, keeping the first source of each name."""
        seen: set[str] = set()
        pairs: list[tuple[str, IconSource]] = []
        for name, source in zip(self.names, self.sources):
            if name in seen:
                continue
            seen.add(name)
            pairs.append((name, source))
        return pairs


@runtime_checkable
class FontConverter(Protocol):
    """Protocol implemented by font conversion services."""

    async def convert(self, request: ConversionRequest) -> Mapping[str, Artifact]: ...


@dataclass(frozen=True, slots=True)
class CallableConverter:
    """Adapter exposing an async ``request -> artifacts`` callable as a converter."""

    func: Callable[[ConversionRequest], Awaitable[Mapping[str, Artifact]]]

    async def convert(self, request: ConversionRequest) -> Mapping[str, Artifact]:
        return await self.func(request)


def ensure_converter(value: Any = None) -> FontConverter:
    """Return a usable converter, defaulting to the fontTools implementation."""
    if value is None:
        from .fonttools import FontToolsConverter

        return FontToolsConverter()
    if isinstance(value, FontConverter):
        return value
    if callable(value):
        return CallableConverter(value)
    raise TypeError(f"Expected a font converter, got {type(value).__name__}")


__all__ = [
    "Artifact",
    "CallableConverter",
    "ConversionRequest",
    "FontConverter",
    "ensure_converter",
]
