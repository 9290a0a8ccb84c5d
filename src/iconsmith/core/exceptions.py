"""Custom exception hierarchy for the icon font build pipeline."""

from __future__ import annotations


class IconsmithError(RuntimeError):
    """Base exception for icon font build failures."""


class ConfigurationError(IconsmithError):
    """Raised when the build configuration is missing or invalid."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CodepointExhaustedError(IconsmithError):
    """Raised when no free code point remains below the allocation bound."""


class FontConversionError(IconsmithError):
    """Raised when the default converter cannot produce a font artifact."""


class UnsupportedFormatError(FontConversionError):
    """Raised when a requested output format has no converter."""


class IconSourceError(FontConversionError):
    """Raised when an icon source cannot be read or parsed."""


class TemplateError(IconsmithError):
    """Raised when an output template cannot be loaded or rendered."""


def _chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def _first_line(exc: BaseException) -> str:
    text = str(exc).strip()
    return text.splitlines()[0].strip() if text else ""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    return [line for line in map(_first_line, _chain(exc)) if line]


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific build message available for an exception chain.

    The innermost `IconsmithError` wins, so wrapped library errors (pydantic,
    fontTools) are summarised by the message written for them.
    """
    for current in reversed(_chain(exc)):
        if isinstance(current, IconsmithError) and _first_line(current):
            return _first_line(current)
    messages = exception_messages(exc)
    return messages[0] if messages else None


__all__ = [
    "CodepointExhaustedError",
    "ConfigurationError",
    "FontConversionError",
    "IconSourceError",
    "IconsmithError",
    "TemplateError",
    "UnsupportedFormatError",
    "exception_hint",
    "exception_messages",
]
