"""Headless active-label state: text, detectors, filters and selection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from activelabel.core.models import DETECTABLE_CATEGORIES, ActiveEntity, EntityCategory
from activelabel.extraction.builder import FilterPredicate, extract
from activelabel.extraction.lookup import entity_at

SelectHandler = Callable[[str, EntityCategory], None]


class ActiveText:
    """Keeps extracted entities in sync with a piece of text.

    Any change to the text, the detector types or a filter re-runs the
    extraction, unless it happens inside :meth:`customize`. A presentation
    layer renders ``entities`` and forwards taps to :meth:`select`, which
    reports the hit through ``on_select(value, category)``.
    """

    def __init__(
        self,
        text: str = "",
        detector_types: Iterable[EntityCategory] | None = None,
        mention_filter: FilterPredicate | None = None,
        hashtag_filter: FilterPredicate | None = None,
        on_select: SelectHandler | None = None,
    ) -> None:
        self._text = text
        self._detector_types = (
            frozenset(detector_types) if detector_types is not None else None
        )
        self._mention_filter = mention_filter
        self._hashtag_filter = hashtag_filter
        self._customizing = False
        self._entities: dict[EntityCategory, list[ActiveEntity]] = {}
        self.on_select = on_select
        self._update()

    # -- properties ---------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = value or ""
        self._update()

    @property
    def detector_types(self) -> frozenset[EntityCategory] | None:
        """Enabled categories; ``None`` means all of them."""
        return self._detector_types

    @detector_types.setter
    def detector_types(self, value: Iterable[EntityCategory] | None) -> None:
        self._detector_types = frozenset(value) if value is not None else None
        self._update()

    @property
    def entities(self) -> dict[EntityCategory, list[ActiveEntity]]:
        """Current entities per category (copies)."""
        return {category: list(group) for category, group in self._entities.items()}

    def filter_mention(self, predicate: FilterPredicate | None) -> None:
        self._mention_filter = predicate
        self._update()

    def filter_hashtag(self, predicate: FilterPredicate | None) -> None:
        self._hashtag_filter = predicate
        self._update()

    def should_handle(self, category: EntityCategory) -> bool:
        if self._detector_types is None:
            return category in DETECTABLE_CATEGORIES
        return category in self._detector_types

    # -- batching -----------------------------------------------------------

    @contextmanager
    def customize(self) -> Iterator[ActiveText]:
        """Apply several changes with a single re-extraction at the end.

        The re-extraction also runs when the block raises, so ``entities``
        always reflect the current text and filters.
        """
        if self._customizing:
            yield self
            return

        self._customizing = True
        try:
            yield self
        finally:
            self._customizing = False
            self._update()

    # -- selection ----------------------------------------------------------

    def element_at(self, offset: int) -> ActiveEntity | None:
        """Entity covering the UTF-16 *offset*, if any."""
        return entity_at(self._entities, offset)

    def select(self, offset: int) -> ActiveEntity | None:
        """Hit-test *offset* and notify ``on_select`` on a hit."""
        entity = self.element_at(offset)
        if entity is None:
            return None

        if self.on_select is not None:
            self.on_select(entity.value, entity.category)
        return entity

    # -- internals ----------------------------------------------------------

    def _update(self) -> None:
        if self._customizing:
            return
        if not self._text:
            self._entities = {category: [] for category in DETECTABLE_CATEGORIES}
            return

        self._entities = extract(
            self._text,
            categories=self._detector_types,
            mention_filter=self._mention_filter,
            hashtag_filter=self._hashtag_filter,
        )
