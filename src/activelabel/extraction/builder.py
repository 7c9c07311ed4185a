"""Builds typed entities from raw pattern matches."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from activelabel.core.models import (
    DETECTABLE_CATEGORIES,
    ActiveEntity,
    EntityCategory,
    TextRange,
)
from activelabel.extraction.patterns import find_matches
from activelabel.utils.utf16 import Utf16Index

FilterPredicate = Callable[[str], bool]

# Matches must be strictly longer than this (in UTF-16 units) to count.
MIN_MATCH_LENGTH = 2

SIGILS: dict[EntityCategory, str] = {
    EntityCategory.MENTION: "@",
    EntityCategory.HASHTAG: "#",
}


def _build_sigil_entities(
    category: EntityCategory,
    text: str,
    text_range: TextRange | None,
    filter_predicate: FilterPredicate | None,
    index: Utf16Index | None,
) -> list[ActiveEntity]:
    sigil = SIGILS[category]
    entities: list[ActiveEntity] = []

    for match in find_matches(category, text, text_range, index=index):
        if match.range.length <= MIN_MATCH_LENGTH:
            continue

        word = match.text
        if word.startswith(sigil):
            word = word[1:]

        # Predicate errors propagate to the caller
        if filter_predicate is None or filter_predicate(word):
            entities.append(ActiveEntity(category=category, value=word, range=match.range))

    return entities


def build_mentions(
    text: str,
    text_range: TextRange | None = None,
    filter_predicate: FilterPredicate | None = None,
    *,
    index: Utf16Index | None = None,
) -> list[ActiveEntity]:
    """Extract ``@mention`` entities, values without the ``@``."""
    return _build_sigil_entities(
        EntityCategory.MENTION, text, text_range, filter_predicate, index
    )


def build_hashtags(
    text: str,
    text_range: TextRange | None = None,
    filter_predicate: FilterPredicate | None = None,
    *,
    index: Utf16Index | None = None,
) -> list[ActiveEntity]:
    """Extract ``#hashtag`` entities, values without the ``#``."""
    return _build_sigil_entities(
        EntityCategory.HASHTAG, text, text_range, filter_predicate, index
    )


def build_urls(
    text: str,
    text_range: TextRange | None = None,
    *,
    index: Utf16Index | None = None,
) -> list[ActiveEntity]:
    """Extract URL entities with the matched text kept verbatim.

    URLs take no filter predicate.
    """
    entities: list[ActiveEntity] = []
    for match in find_matches(EntityCategory.URL, text, text_range, index=index):
        if match.range.length <= MIN_MATCH_LENGTH:
            continue
        entities.append(
            ActiveEntity(category=EntityCategory.URL, value=match.text, range=match.range)
        )
    return entities


def extract_all(
    text: str,
    text_range: TextRange | None = None,
    categories: Iterable[EntityCategory] | None = None,
    mention_filter: FilterPredicate | None = None,
    hashtag_filter: FilterPredicate | None = None,
) -> dict[EntityCategory, list[ActiveEntity]]:
    """Extract every enabled category from *text_range* of *text*.

    Args:
        text: The text to scan.
        text_range: UTF-16 range to scan; defaults to the whole text.
        categories: Categories to run. ``None`` runs all of them.
        mention_filter: Optional predicate on the stripped mention word.
        hashtag_filter: Optional predicate on the stripped hashtag word.

    Returns:
        A mapping with a key for each of mention, hashtag and URL. Disabled
        categories map to an empty list.

    Raises:
        InvalidRangeError: if *text_range* does not fit inside *text*.
    """
    enabled = set(DETECTABLE_CATEGORIES) if categories is None else set(categories)
    index = Utf16Index(text)
    if text_range is not None:
        # Validate even when every category is disabled
        index.codepoint_span(text_range.location, text_range.length)

    results: dict[EntityCategory, list[ActiveEntity]] = {
        category: [] for category in DETECTABLE_CATEGORIES
    }

    if EntityCategory.URL in enabled:
        results[EntityCategory.URL] = build_urls(text, text_range, index=index)
    if EntityCategory.HASHTAG in enabled:
        results[EntityCategory.HASHTAG] = build_hashtags(
            text, text_range, hashtag_filter, index=index
        )
    if EntityCategory.MENTION in enabled:
        results[EntityCategory.MENTION] = build_mentions(
            text, text_range, mention_filter, index=index
        )

    return results


def extract(
    text: str,
    categories: Iterable[EntityCategory] | None = None,
    mention_filter: FilterPredicate | None = None,
    hashtag_filter: FilterPredicate | None = None,
) -> dict[EntityCategory, list[ActiveEntity]]:
    """Extract entities from the whole of *text*."""
    return extract_all(
        text,
        TextRange.full(text),
        categories=categories,
        mention_filter=mention_filter,
        hashtag_filter=hashtag_filter,
    )
