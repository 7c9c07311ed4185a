"""Entity models produced by the extraction engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from activelabel.utils.utf16 import utf16_length


class EntityCategory(str, Enum):
    """Kinds of active entity the engine can detect.

    ``NONE`` exists for consumers that need a "nothing selected" value;
    the engine never emits it.
    """

    MENTION = "mention"
    HASHTAG = "hashtag"
    URL = "url"
    NONE = "none"


# Categories the engine actually scans for, in extraction order.
DETECTABLE_CATEGORIES: tuple[EntityCategory, ...] = (
    EntityCategory.URL,
    EntityCategory.HASHTAG,
    EntityCategory.MENTION,
)


class TextRange(BaseModel):
    """Half-open ``[location, location + length)`` span in UTF-16 code units."""

    location: int = Field(ge=0)
    length: int = Field(ge=0)

    class Config:
        frozen = True

    @property
    def end(self) -> int:
        return self.location + self.length

    def contains(self, offset: int) -> bool:
        return self.location <= offset < self.end

    def overlaps(self, other: TextRange) -> bool:
        return self.location < other.end and other.location < self.end

    @classmethod
    def full(cls, text: str) -> TextRange:
        """Range covering all of *text*."""
        return cls(location=0, length=utf16_length(text))


class ActiveEntity(BaseModel):
    """A mention, hashtag or URL found in scanned text.

    ``value`` has the ``@``/``#`` sigil stripped for mentions and hashtags;
    for URLs it is the matched substring verbatim. ``range`` always spans
    the full match, sigil included.
    """

    category: EntityCategory
    value: str
    range: TextRange

    class Config:
        frozen = True
