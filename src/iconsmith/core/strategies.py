"""Pluggable strategies used while resolving and rendering a build.

Two hooks of the build plan are modelled as single-method strategy objects:

`RenameStrategy.rename(source)`
: Derive the icon name of an input source. The built-in `BasenameRename`
  uses the file name without its extension, or the explicit source name for
  in-memory entries.

`ContextHook.extend(context, options, environment)`
: Mutate the template context right before a stylesheet or preview page is
  rendered. The Jinja environment is passed so hooks can register filters.
  The built-in `NullContextHook` leaves the context untouched.

Plain callables are accepted in configurations and wrapped by `coerce_rename`
and `coerce_context_hook`.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .sources import IconSource


if TYPE_CHECKING:
    from jinja2 import Environment

    from .config import BuildOptions


@runtime_checkable
class RenameStrategy(Protocol):
    """Protocol implemented by icon naming strategies."""

    def rename(self, source: IconSource) -> str: ...


@runtime_checkable
class ContextHook(Protocol):
    """Protocol implemented by template-context customisation hooks."""

    def extend(
        self,
        context: MutableMapping[str, Any],
        options: BuildOptions,
        environment: Environment,
    ) -> None: ...


class BasenameRename:
    """Name icons after their file stem."""

    def rename(self, source: IconSource) -> str:
        if source.name:
            return source.name
        if source.path is None:
            raise ValueError("Unnamed icon sources must be backed by a file.")
        return source.path.stem

    def __repr__(self) -> str:
        return "BasenameRename()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BasenameRename)

    def __hash__(self) -> int:
        return hash(type(self))


class NullContextHook:
    """Hook that keeps the template context unchanged."""

    def extend(
        self,
        context: MutableMapping[str, Any],
        options: BuildOptions,
        environment: Environment,
    ) -> None:
        return

    def __repr__(self) -> str:
        return "NullContextHook()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullContextHook)

    def __hash__(self) -> int:
        return hash(type(self))


@dataclass(frozen=True, slots=True)
class CallableRename:
    """Adapter exposing a ``source -> name`` callable as a strategy."""

    func: Callable[[IconSource], str]

    def rename(self, source: IconSource) -> str:
        return str(self.func(source))


@dataclass(frozen=True, slots=True)
class CallableContextHook:
    """Adapter exposing a ``(context, options, environment)`` callable as a hook."""

    func: Callable[..., Any]

    def extend(
        self,
        context: MutableMapping[str, Any],
        options: BuildOptions,
        environment: Environment,
    ) -> None:
        self.func(context, options, environment)


def coerce_rename(value: Any) -> RenameStrategy:
    if value is None:
        return BasenameRename()
    if isinstance(value, RenameStrategy):
        return value
    if callable(value):
        return CallableRename(value)
    raise TypeError(f"Expected a rename strategy or callable, got {type(value).__name__}")


def coerce_context_hook(value: Any) -> ContextHook:
    if value is None:
        return NullContextHook()
    if isinstance(value, ContextHook):
        return value
    if callable(value):
        return CallableContextHook(value)
    raise TypeError(f"Expected a context hook or callable, got {type(value).__name__}")


__all__ = [
    "BasenameRename",
    "CallableContextHook",
    "CallableRename",
    "ContextHook",
    "NullContextHook",
    "RenameStrategy",
    "coerce_context_hook",
    "coerce_rename",
]
