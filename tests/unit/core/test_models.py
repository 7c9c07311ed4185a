"""Tests for core entity models."""

import pytest
from pydantic import ValidationError

from activelabel.core.models import (
    DETECTABLE_CATEGORIES,
    ActiveEntity,
    EntityCategory,
    TextRange,
)


@pytest.mark.unit
class TestEntityCategory:
    """EntityCategory is a closed str enum."""

    def test_has_4_members(self) -> None:
        assert len(EntityCategory) == 4

    def test_string_values(self) -> None:
        assert EntityCategory.MENTION == "mention"
        assert EntityCategory.HASHTAG == "hashtag"
        assert EntityCategory.URL == "url"
        assert EntityCategory.NONE == "none"

    def test_from_string(self) -> None:
        assert EntityCategory("url") is EntityCategory.URL

    def test_none_is_not_detectable(self) -> None:
        assert EntityCategory.NONE not in DETECTABLE_CATEGORIES
        assert set(DETECTABLE_CATEGORIES) == {
            EntityCategory.MENTION,
            EntityCategory.HASHTAG,
            EntityCategory.URL,
        }


@pytest.mark.unit
class TestTextRange:
    """Tests for TextRange."""

    def test_end(self) -> None:
        assert TextRange(location=3, length=4).end == 7

    def test_contains_is_half_open(self) -> None:
        text_range = TextRange(location=2, length=3)
        assert not text_range.contains(1)
        assert text_range.contains(2)
        assert text_range.contains(4)
        assert not text_range.contains(5)

    def test_empty_range_contains_nothing(self) -> None:
        assert not TextRange(location=0, length=0).contains(0)

    def test_overlaps(self) -> None:
        a = TextRange(location=0, length=5)
        assert a.overlaps(TextRange(location=4, length=2))
        assert not a.overlaps(TextRange(location=5, length=2))

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TextRange(location=-1, length=2)
        with pytest.raises(ValidationError):
            TextRange(location=0, length=-2)

    def test_full_counts_utf16_units(self) -> None:
        assert TextRange.full("abc") == TextRange(location=0, length=3)
        # U+1F600 needs a surrogate pair
        assert TextRange.full("a\U0001F600") == TextRange(location=0, length=3)

    def test_full_accepts_lone_surrogate(self) -> None:
        assert TextRange.full("#tag \ud800") == TextRange(location=0, length=6)

    def test_frozen(self) -> None:
        text_range = TextRange(location=0, length=1)
        with pytest.raises(ValidationError):
            text_range.location = 5


@pytest.mark.unit
class TestActiveEntity:
    """Tests for ActiveEntity."""

    def test_structural_equality(self) -> None:
        a = ActiveEntity(
            category=EntityCategory.HASHTAG,
            value="tag",
            range=TextRange(location=0, length=4),
        )
        b = ActiveEntity(
            category=EntityCategory.HASHTAG,
            value="tag",
            range=TextRange(location=0, length=4),
        )
        assert a == b
        assert hash(a) == hash(b)

    def test_json_dump(self) -> None:
        entity = ActiveEntity(
            category=EntityCategory.URL,
            value="www.example.com",
            range=TextRange(location=6, length=15),
        )
        assert entity.model_dump(mode="json") == {
            "category": "url",
            "value": "www.example.com",
            "range": {"location": 6, "length": 15},
        }
