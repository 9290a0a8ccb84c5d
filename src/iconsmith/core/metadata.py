"""Per-icon metadata shared by every renderer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .config import TemplateOptions


def unicode_reference(codepoint: int) -> str:
    """Return the hexadecimal numeric character reference of ``codepoint``."""
    return f"&#x{codepoint:x};"


def parse_unicode_reference(reference: str) -> int:
    """Return the code point encoded by a ``&#x...;`` reference."""
    if not (reference.startswith("&#x") and reference.endswith(";")):
        raise ValueError(f"Not a hexadecimal character reference: {reference!r}")
    return int(reference[3:-1], 16)


@dataclass(frozen=True, slots=True)
class IconMetadataRecord:
    """Presentation-agnostic description of one icon."""

    name: str
    codepoint: int
    symbol_id: str
    class_name: str

    @property
    def unicode(self) -> str:
        return unicode_reference(self.codepoint)

    def as_dict(self) -> dict[str, Any]:
        """Serialise the record with the keys used by ``iconfontInfo.js``."""
        return {
            "name": self.name,
            "unicode": self.unicode,
            "symbolId": self.symbol_id,
            "className": self.class_name,
        }


def build_record(name: str, codepoint: int, template_options: TemplateOptions) -> IconMetadataRecord:
    prefix = template_options.class_prefix
    return IconMetadataRecord(
        name=name,
        codepoint=codepoint,
        symbol_id=f"{prefix}{name}",
        class_name=f"{template_options.base_class} {prefix}{name}",
    )


def build_icon_metadata(
    names: Iterable[str],
    codepoints: Mapping[str, int],
    template_options: TemplateOptions,
    infos: list[IconMetadataRecord],
) -> list[IconMetadataRecord]:
    """Append one record per name to ``infos`` and return the new records.

    Names already described in ``infos`` are skipped.
    """
    known = {record.name for record in infos}
    created: list[IconMetadataRecord] = []
    for name in names:
        if name in known:
            continue
        record = build_record(name, codepoints[name], template_options)
        infos.append(record)
        created.append(record)
        known.add(name)
    return created


__all__ = [
    "IconMetadataRecord",
    "build_icon_metadata",
    "build_record",
    "parse_unicode_reference",
    "unicode_reference",
]
