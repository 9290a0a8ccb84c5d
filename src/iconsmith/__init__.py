"""Primary public API for iconsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from iconsmith.api import (
    BuildContext,
    BuildOptions,
    BuildOutcome,
    BuildResult,
    ConversionRequest,
    FontConverter,
    IconFontService,
    IconMetadataRecord,
    TemplateOptions,
    generate,
    generate_outcome,
    load_config_file,
    prepare_build,
    resolve_options,
    webfont,
)
from iconsmith.core.codepoints import CodepointAllocator, allocate_codepoints
from iconsmith.core.exceptions import (
    CodepointExhaustedError,
    ConfigurationError,
    FontConversionError,
    IconsmithError,
    IconSourceError,
    TemplateError,
    UnsupportedFormatError,
)
from iconsmith.core.sources import IconSource
from iconsmith.core.strategies import ContextHook, RenameStrategy
from iconsmith.core.templates import TEMPLATES


try:
    __version__ = _pkg_version("iconsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "TEMPLATES",
    "BuildContext",
    "BuildOptions",
    "BuildOutcome",
    "BuildResult",
    "CodepointAllocator",
    "CodepointExhaustedError",
    "ConfigurationError",
    "ContextHook",
    "ConversionRequest",
    "FontConversionError",
    "FontConverter",
    "IconFontService",
    "IconMetadataRecord",
    "IconSource",
    "IconSourceError",
    "IconsmithError",
    "RenameStrategy",
    "TemplateError",
    "TemplateOptions",
    "UnsupportedFormatError",
    "__version__",
    "allocate_codepoints",
    "generate",
    "generate_outcome",
    "load_config_file",
    "prepare_build",
    "resolve_options",
    "webfont",
]
