"""Helpers for consumers of extraction results: merging and hit-testing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from activelabel.core.models import ActiveEntity, EntityCategory

EntityResults = Mapping[EntityCategory, Iterable[ActiveEntity]]


def merge_entities(
    entities: EntityResults | Iterable[ActiveEntity],
) -> list[ActiveEntity]:
    """Flatten per-category results into one list ordered by location.

    The sort is stable, so entities sharing a location keep the order of
    the input mapping.
    """
    if isinstance(entities, Mapping):
        flat = [entity for group in entities.values() for entity in group]
    else:
        flat = list(entities)
    return sorted(flat, key=lambda entity: entity.range.location)


def entity_at(
    entities: EntityResults | Iterable[ActiveEntity],
    offset: int,
) -> ActiveEntity | None:
    """Return the first entity whose range contains the UTF-16 *offset*."""
    for entity in merge_entities(entities):
        if entity.range.location > offset:
            break
        if entity.range.contains(offset):
            return entity
    return None


def resolve_overlaps(
    entities: EntityResults | Iterable[ActiveEntity],
) -> list[ActiveEntity]:
    """Drop entities that overlap an earlier one, in location order."""
    kept: list[ActiveEntity] = []
    for entity in merge_entities(entities):
        if kept and kept[-1].range.overlaps(entity.range):
            continue
        kept.append(entity)
    return kept
