"""Deterministic Private Use Area code point allocation."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping

from .exceptions import CodepointExhaustedError


MAX_CODEPOINT = 0x10FFFF

# Inclusive Private Use Area blocks.
PUA_RANGES: tuple[tuple[int, int], ...] = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFFD),
    (0x100000, 0x10FFFD),
)


def default_end_codepoint(start: int) -> int:
    """Return the end of the Private Use Area block containing ``start``."""
    for first, last in PUA_RANGES:
        if first <= start <= last:
            return last
    return MAX_CODEPOINT


class CodepointAllocator:
    """Hand out code points from a cursor, skipping reserved override values.

    Reserved values are captured once, when the allocator is created. Values
    handed out afterwards are never revisited because the cursor only moves
    forward.
    """

    def __init__(
        self,
        start: int,
        reserved: Iterable[int] = (),
        *,
        end: int | None = None,
    ) -> None:
        self.cursor = start
        self.end = default_end_codepoint(start) if end is None else end
        self.reserved = frozenset(reserved)

    def next_codepoint(self) -> int:
        while self.cursor in self.reserved:
            self.cursor += 1
        if self.cursor > self.end:
            raise CodepointExhaustedError(
                f"No free code point left up to U+{self.end:04X}; "
                "raise end_codepoint or lower start_codepoint."
            )
        value = self.cursor
        self.cursor += 1
        return value

    def assign(self, names: Iterable[str], codepoints: MutableMapping[str, int]) -> None:
        """Complete ``codepoints`` in place so that every name has a value.

        Names already present in the mapping keep their value.
        """
        for name in names:
            if name not in codepoints:
                codepoints[name] = self.next_codepoint()


def allocate_codepoints(
    names: Iterable[str],
    codepoints: MutableMapping[str, int],
    *,
    start: int,
    end: int | None = None,
) -> MutableMapping[str, int]:
    """Assign code points to ``names`` in order, honouring existing entries."""
    allocator = CodepointAllocator(start, codepoints.values(), end=end)
    allocator.assign(names, codepoints)
    return codepoints


__all__ = [
    "MAX_CODEPOINT",
    "PUA_RANGES",
    "CodepointAllocator",
    "allocate_codepoints",
    "default_end_codepoint",
]
