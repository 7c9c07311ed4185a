"""UTF-16 offset conversion.

Entity ranges are reported in UTF-16 code units, the unit UI toolkits use
for text length. Python strings index by code point, so every conversion
between the two happens here.
"""

from __future__ import annotations

from bisect import bisect_left

from activelabel.core.exceptions import InvalidRangeError


def utf16_length(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


class Utf16Index:
    """Bidirectional offset table for a single string.

    Strings without astral characters take the identity fast path and
    never allocate a table.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._offsets: list[int] | None = None

        if any(ord(ch) > 0xFFFF for ch in text):
            offsets = [0]
            for ch in text:
                offsets.append(offsets[-1] + (2 if ord(ch) > 0xFFFF else 1))
            self._offsets = offsets

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        """Total UTF-16 length of the indexed text."""
        if self._offsets is None:
            return len(self._text)
        return self._offsets[-1]

    def to_utf16(self, index: int) -> int:
        """Convert a code-point index to a UTF-16 offset."""
        if self._offsets is None:
            return index
        return self._offsets[index]

    def to_codepoint(self, offset: int) -> int:
        """Convert a UTF-16 offset to a code-point index.

        Raises:
            InvalidRangeError: if *offset* is out of bounds or falls inside
                a surrogate pair.
        """
        if offset < 0 or offset > self.length:
            raise InvalidRangeError(
                f"Offset {offset} is outside text of UTF-16 length {self.length}",
                details={"offset": offset, "length": self.length},
            )
        if self._offsets is None:
            return offset

        index = bisect_left(self._offsets, offset)
        if self._offsets[index] != offset:
            raise InvalidRangeError(
                f"Offset {offset} splits a surrogate pair",
                details={"offset": offset},
            )
        return index

    def codepoint_span(self, location: int, length: int) -> tuple[int, int]:
        """Convert a UTF-16 ``(location, length)`` range to code-point bounds.

        The range must lie entirely inside the text; it is never clamped.
        """
        end = location + length
        if end > self.length:
            raise InvalidRangeError(
                f"Range [{location}, {end}) extends past text of UTF-16 length {self.length}",
                details={"location": location, "length": length, "text_length": self.length},
            )
        return self.to_codepoint(location), self.to_codepoint(end)
