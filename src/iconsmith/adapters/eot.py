"""Embedded OpenType (EOT) wrapping of TrueType fonts.

The output follows the EOT 2.1 layout (version ``0x00020001``): a
little-endian header copied from the ``OS/2``, ``head`` and ``name`` tables,
followed by the uncompressed TrueType data.
"""

from __future__ import annotations

import io
import struct

from fontTools.ttLib import TTFont


EOT_VERSION = 0x00020001
EOT_MAGIC = 0x504C
DEFAULT_CHARSET = 1

_PANOSE_FIELDS = (
    "bFamilyType",
    "bSerifStyle",
    "bWeight",
    "bProportion",
    "bContrast",
    "bStrokeVariation",
    "bArmStyle",
    "bLetterForm",
    "bMidline",
    "bXHeight",
)


def _name_record(value: str) -> bytes:
    encoded = value.encode("utf-16-le")
    return struct.pack("<H", len(encoded)) + encoded


def ttf_to_eot(data: bytes) -> bytes:
    """Return the EOT encoding of the TrueType font ``data``."""
    font = TTFont(io.BytesIO(data))
    os2 = font["OS/2"]
    head = font["head"]
    names = font["name"]

    def debug_name(name_id: int) -> str:
        return names.getDebugName(name_id) or ""

    panose = bytes(getattr(os2.panose, field, 0) for field in _PANOSE_FIELDS)
    header = bytearray()
    header += struct.pack("<LLL", len(data), EOT_VERSION, 0)
    header += panose
    header += struct.pack(
        "<BBLHH",
        DEFAULT_CHARSET,
        os2.fsSelection & 0x01,
        os2.usWeightClass,
        os2.fsType,
        EOT_MAGIC,
    )
    header += struct.pack(
        "<LLLL",
        os2.ulUnicodeRange1,
        os2.ulUnicodeRange2,
        os2.ulUnicodeRange3,
        os2.ulUnicodeRange4,
    )
    header += struct.pack(
        "<LL",
        getattr(os2, "ulCodePageRange1", 0),
        getattr(os2, "ulCodePageRange2", 0),
    )
    header += struct.pack("<L", head.checkSumAdjustment)
    header += struct.pack("<LLLL", 0, 0, 0, 0)
    for name_id in (1, 2, 5, 4):
        header += struct.pack("<H", 0)
        header += _name_record(debug_name(name_id))
    # Padding5 and an empty RootString.
    header += struct.pack("<HH", 0, 0)

    total = 4 + len(header) + len(data)
    return struct.pack("<L", total) + bytes(header) + data


__all__ = ["EOT_MAGIC", "EOT_VERSION", "ttf_to_eot"]
