"""Facade aggregating the high-level iconsmith build experience.

Architecture
: `prepare_build` resolves a raw configuration into `BuildOptions`, completes
  the code point map and derives one `IconMetadataRecord` per icon. Nothing is
  read from disk at this stage.
: `IconFontService` hands the resulting plan to a font converter, then lets the
  artifact writer persist fonts, stylesheet, preview page and info file.
: `generate`, `generate_outcome` and `webfont` expose the same build as a
  coroutine, as a tagged `BuildOutcome`, and through a ``done`` callback.

Implementation Rationale
: Every build owns its `BuildContext`, so concurrent builds never share
  metadata or written-file lists.
: Converters are injected, which keeps the default fontTools backend
  replaceable and lets tests run without producing real fonts.

Usage Example
:
    >>> from iconsmith.api import prepare_build
    >>> context = prepare_build({"dest": "build", "files": ["add.svg", "close.svg"]})
    >>> {name: hex(value) for name, value in context.options.codepoints.items()}
    {'add': '0xf101', 'close': '0xf102'}
    >>> context.infos[0].as_dict()["className"]
    'icon icon-add'
"""

from __future__ import annotations

from iconsmith.adapters.base import ConversionRequest, FontConverter
from iconsmith.core.config import BuildOptions, TemplateOptions, load_config_file, resolve_options
from iconsmith.core.context import BuildContext
from iconsmith.core.metadata import IconMetadataRecord

from .service import (
    BuildOutcome,
    BuildResult,
    IconFontService,
    generate,
    generate_outcome,
    prepare_build,
    webfont,
)


__all__ = [
    "BuildContext",
    "BuildOptions",
    "BuildOutcome",
    "BuildResult",
    "ConversionRequest",
    "FontConverter",
    "IconFontService",
    "IconMetadataRecord",
    "TemplateOptions",
    "generate",
    "generate_outcome",
    "load_config_file",
    "prepare_build",
    "resolve_options",
    "webfont",
]
