"""Active entity extraction: patterns, entity building and lookup."""

from activelabel.extraction.builder import (
    MIN_MATCH_LENGTH,
    FilterPredicate,
    build_hashtags,
    build_mentions,
    build_urls,
    extract,
    extract_all,
)
from activelabel.extraction.lookup import entity_at, merge_entities, resolve_overlaps
from activelabel.extraction.patterns import PatternMatch, find_matches, get_pattern

__all__ = [
    "FilterPredicate",
    "MIN_MATCH_LENGTH",
    "PatternMatch",
    "build_hashtags",
    "build_mentions",
    "build_urls",
    "entity_at",
    "extract",
    "extract_all",
    "find_matches",
    "get_pattern",
    "merge_entities",
    "resolve_overlaps",
]
