"""Configuration models used by the icon font builder.

Raw configurations may use Python names or their camelCase aliases
(``fontName``, ``startCodepoint``...). Deprecated keys are translated by
`iconsmith.core.migrations` before validation.

TemplateOptions

`base_selector` (`str`)
: Selector shared by every icon element. The generated class name drops its
  leading delimiter (``.icon`` becomes ``icon``).

`class_prefix` (`str`)
: Prefix prepended to icon names to form per-icon classes and symbol ids.

Additional keys are kept and forwarded verbatim to the templates.

BuildOptions

`dest` (`Path`)
: Output directory. Required.

`files` (`list[IconSource]`)
: Input icons. Accepts paths, mappings with ``path``/``name``/``contents`` keys,
  or objects exposing ``metadata.name``. Required and non-empty.

`font_name` (`str`)
: Font family name and base name of every output file.

`rename` (`RenameStrategy`)
: Derives the icon name of each source. Callables are wrapped.

`types` (`list[str]`)
: Formats requested from the converter.

`order` (`list[str]`)
: Preference order of the formats listed in the ``@font-face`` rule.

`css`, `html`, `output_info` (`bool`)
: Toggle the stylesheet, the preview page, and the ``iconfontInfo.js`` file.

`css_template`, `html_template` (`Path`)
: Jinja templates used for the stylesheet and preview page.

`css_context`, `html_context` (`ContextHook`)
: Hooks customising the template context. Callables are wrapped.

`css_dest`, `html_dest` (`Path | None`)
: Output paths, derived from `dest` and `font_name` when omitted.

`css_fonts_url` (`str | None`)
: Base URL prepended to font file names in the stylesheet.

`template_options` (`TemplateOptions`)
: Presentation options shared by every renderer.

`start_codepoint` (`int`)
: First code point handed out by the allocator.

`end_codepoint` (`int | None`)
: Inclusive allocation bound. Defaults to the end of the Private Use Area
  block containing `start_codepoint`.

`codepoints` (`dict[str, int]`)
: Explicit code points keyed by icon name. Completed in place by the allocator.
  Every code point setting must lie within ``0..U+10FFFF``.

`write_files` (`bool`)
: Persist artifacts under `dest`; otherwise only return them.

`ligature`, `normalize` (`bool`)
: Converter switches for name ligatures and per-icon height normalisation.

`format_options` (`dict[str, dict]`)
: Per-format converter options.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
import json
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
import yaml

from .codepoints import MAX_CODEPOINT
from .diagnostics import DiagnosticEmitter
from .exceptions import ConfigurationError
from .migrations import migrate_options
from .sources import IconSource
from .strategies import (
    BasenameRename,
    ContextHook,
    NullContextHook,
    RenameStrategy,
    coerce_context_hook,
    coerce_rename,
)
from .templates.base import TEMPLATES


DEFAULT_START_CODEPOINT = 0xF101

Codepoint = Annotated[int, Field(ge=0, le=MAX_CODEPOINT)]
DEFAULT_TYPES: tuple[str, ...] = ("eot", "woff", "woff2", "symbol")
DEFAULT_ORDER: tuple[str, ...] = ("eot", "woff2", "woff", "ttf", "svg")


class TemplateOptions(BaseModel):
    """Presentation options shared by the CSS, HTML and info renderers."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    base_selector: str = ".icon"
    class_prefix: str = "icon-"

    @property
    def base_class(self) -> str:
        """Return the base selector without its leading delimiter."""
        return self.base_selector[1:]

    def context(self) -> dict[str, Any]:
        """Return the options as a flat template context."""
        return self.model_dump()


class BuildOptions(BaseModel):
    """Fully resolved build plan."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    dest: Path
    files: list[InstanceOf[IconSource]] = Field(min_length=1)
    font_name: str = "iconfont"
    rename: RenameStrategy = Field(default_factory=BasenameRename)
    types: list[str] = Field(default_factory=lambda: list(DEFAULT_TYPES))
    order: list[str] = Field(default_factory=lambda: list(DEFAULT_ORDER))

    css: bool = True
    css_template: Path = TEMPLATES["css"]
    css_context: ContextHook = Field(default_factory=NullContextHook)
    css_dest: Path | None = None
    css_fonts_url: str | None = None

    html: bool = False
    html_template: Path = TEMPLATES["html"]
    html_context: ContextHook = Field(default_factory=NullContextHook)
    html_dest: Path | None = None

    template_options: TemplateOptions = Field(default_factory=TemplateOptions)

    start_codepoint: Codepoint = DEFAULT_START_CODEPOINT
    end_codepoint: Codepoint | None = None
    codepoints: dict[str, Codepoint] = Field(default_factory=dict)

    write_files: bool = True
    output_info: bool = True
    ligature: bool = True
    normalize: bool = True
    format_options: dict[str, dict[str, Any]] = Field(default_factory=dict)

    names: list[str] = Field(default_factory=list)

    @field_validator("files", mode="before")
    @classmethod
    def _coerce_files(cls, value: Any) -> Any:
        if isinstance(value, (str, Path, Mapping)) or not isinstance(value, Iterable):
            raise ValueError("expected a list of icon sources")
        try:
            return [IconSource.coerce(entry) for entry in value]
        except (TypeError, ValueError) as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("rename", mode="before")
    @classmethod
    def _coerce_rename(cls, value: Any) -> Any:
        try:
            return coerce_rename(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("css_context", "html_context", mode="before")
    @classmethod
    def _coerce_context(cls, value: Any) -> Any:
        try:
            return coerce_context_hook(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("codepoints", "template_options", "format_options", mode="before")
    @classmethod
    def _empty_when_none(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("types", "order", mode="before")
    @classmethod
    def _split_formats(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @model_validator(mode="after")
    def _derive(self) -> BuildOptions:
        """Compute icon names, output paths, and check the code point plan."""
        self.names = [self.rename.rename(source) for source in self.files]
        if self.css_dest is None:
            self.css_dest = self.dest / f"{self.font_name}.css"
        if self.html_dest is None:
            self.html_dest = self.dest / f"{self.font_name}.html"

        if self.end_codepoint is not None and self.start_codepoint > self.end_codepoint:
            raise ValueError(
                f"start_codepoint U+{self.start_codepoint:04X} is above "
                f"end_codepoint U+{self.end_codepoint:04X}"
            )

        owners: dict[int, str] = {}
        for name, value in self.codepoints.items():
            if value in owners:
                raise ValueError(
                    f"code point U+{value:04X} is assigned to both "
                    f"'{owners[value]}' and '{name}'"
                )
            owners[value] = name
        return self


def _require_fields(raw: dict[str, Any]) -> None:
    if raw.get("dest") is None:
        raise ConfigurationError('"dest" is undefined.', field="dest")
    files = raw.get("files")
    if files is None:
        raise ConfigurationError('"files" is undefined.', field="files")
    if not isinstance(files, Sized):
        files = list(files)
        raw["files"] = files
    if not len(files):
        raise ConfigurationError('"files" is empty.', field="files")


def _format_validation_error(exc: ValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return str(exc), None
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "invalid value"))
    if location:
        return f"Invalid configuration for '{location}': {message}", location
    return f"Invalid configuration: {message}", None


def resolve_options(
    raw: BuildOptions | Mapping[str, Any],
    *,
    emitter: DiagnosticEmitter | None = None,
) -> BuildOptions:
    """Merge ``raw`` with the defaults and return a fully resolved build plan.

    Mappings go through the migration pass, then the required-field checks
    (``dest`` defined, ``files`` defined, ``files`` non-empty) run in that
    order before any other validation. The returned options own a fresh
    ``codepoints`` mapping so completing it never touches the caller's data.
    """
    if isinstance(raw, BuildOptions):
        return raw.model_copy(update={"codepoints": dict(raw.codepoints)})

    migrated = migrate_options(raw, emitter)
    _require_fields(migrated)
    try:
        return BuildOptions.model_validate(migrated)
    except ValidationError as exc:
        message, location = _format_validation_error(exc)
        raise ConfigurationError(message, field=location) from exc


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON configuration mapping from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file '{path}': {exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid configuration file '{path}': {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"Configuration file '{path}' must contain a mapping.")
    return dict(payload)


__all__ = [
    "DEFAULT_ORDER",
    "DEFAULT_START_CODEPOINT",
    "DEFAULT_TYPES",
    "BuildOptions",
    "TemplateOptions",
    "load_config_file",
    "resolve_options",
]
