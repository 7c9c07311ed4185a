"""Regex patterns for mentions, hashtags and URLs.

Patterns are compiled once at import into a read-only registry and shared
by every caller. A pattern that fails to compile is logged and its
category then always yields no matches.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import regex
import structlog

from activelabel.core.models import EntityCategory, TextRange
from activelabel.utils.utf16 import Utf16Index

logger = structlog.get_logger(__name__)

URL_PATTERN = (
    # Not glued to preceding punctuation or an opening bracket
    r"(?<![.:;?\-\]<(\[])"
    r"(?:https?://|www\.|pic\.)"
    r"[-\w;/?:@&=+$|_.!~*'()\[\]%#,☺]+"
    r"[\w/#]"
    r"(?:\(\))?"
)

# The sigil must open the scanned text or follow whitespace, "|", "$" or "."
_SIGIL_BOUNDARY = r"(?<![^|\s$.])"

HASHTAG_PATTERN = _SIGIL_BOUNDARY + r"#[\p{L}0-9_]*"
MENTION_PATTERN = _SIGIL_BOUNDARY + r"@[\p{L}0-9_]*"

PATTERN_SOURCES: Mapping[EntityCategory, str] = MappingProxyType({
    EntityCategory.URL: URL_PATTERN,
    EntityCategory.HASHTAG: HASHTAG_PATTERN,
    EntityCategory.MENTION: MENTION_PATTERN,
})


@dataclass(frozen=True)
class PatternMatch:
    """A raw match: its UTF-16 range and the text found there."""

    range: TextRange
    text: str


def compile_patterns(
    sources: Mapping[EntityCategory, str],
) -> Mapping[EntityCategory, regex.Pattern | None]:
    """Compile *sources* case-insensitively, mapping failures to ``None``."""
    compiled: dict[EntityCategory, regex.Pattern | None] = {}
    for category, source in sources.items():
        try:
            compiled[category] = regex.compile(source, regex.IGNORECASE)
        except regex.error as e:
            logger.error(
                "patterns.compile_failed",
                category=category.value,
                error=str(e),
            )
            compiled[category] = None
    return MappingProxyType(compiled)


PATTERNS = compile_patterns(PATTERN_SOURCES)


def get_pattern(category: EntityCategory) -> regex.Pattern | None:
    """Return the compiled pattern for *category*, if there is one."""
    return PATTERNS.get(category)


def find_matches(
    category: EntityCategory,
    text: str,
    text_range: TextRange | None = None,
    *,
    index: Utf16Index | None = None,
) -> list[PatternMatch]:
    """Find all non-overlapping matches for *category* inside *text_range*.

    Args:
        category: Which pattern to run.
        text: The text to scan.
        text_range: UTF-16 range to scan; defaults to the whole text.
            Characters outside it are invisible to the pattern, so a
            boundary check at ``text_range.location`` behaves like the
            start of the text.
        index: Precomputed offset table for *text*, shared across calls.

    Returns:
        Matches in left-to-right order.

    Raises:
        InvalidRangeError: if *text_range* does not fit inside *text*.
    """
    if index is None:
        index = Utf16Index(text)
    if text_range is None:
        start, end = 0, len(text)
    else:
        start, end = index.codepoint_span(text_range.location, text_range.length)

    pattern = get_pattern(category)
    if pattern is None:
        return []

    matches: list[PatternMatch] = []
    for match in pattern.finditer(text[start:end]):
        location = index.to_utf16(start + match.start())
        length = index.to_utf16(start + match.end()) - location
        matches.append(
            PatternMatch(
                range=TextRange(location=location, length=length),
                text=match.group(0),
            )
        )
    return matches
