"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from activelabel.core.exceptions import ConfigurationError
from activelabel.core.models import DETECTABLE_CATEGORIES, EntityCategory


class Settings(BaseSettings):
    """Application settings loaded from ``ACTIVELABEL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIVELABEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    # Detection
    detector_types: Annotated[list[EntityCategory], NoDecode] = list(DETECTABLE_CATEGORIES)

    # Highlighting (click colour names)
    mention_color: str = "red"
    hashtag_color: str = "blue"
    url_color: str = "green"

    @field_validator("detector_types", mode="before")
    @classmethod
    def _parse_detector_types(cls, value):
        # Environment values arrive comma separated: "url,mention"
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        if not isinstance(value, (list, tuple, set)):
            return value

        categories: list[EntityCategory] = []
        for item in value:
            try:
                category = EntityCategory(str(getattr(item, "value", item)).lower())
            except ValueError:
                raise ConfigurationError(
                    f"Unknown detector type: {item!r}",
                    details={"allowed": [c.value for c in DETECTABLE_CATEGORIES]},
                ) from None
            if category is EntityCategory.NONE:
                continue
            if category not in categories:
                categories.append(category)
        return categories

    @property
    def detector_set(self) -> frozenset[EntityCategory]:
        return frozenset(self.detector_types)

    def color_for(self, category: EntityCategory) -> str:
        return {
            EntityCategory.MENTION: self.mention_color,
            EntityCategory.HASHTAG: self.hashtag_color,
            EntityCategory.URL: self.url_color,
        }.get(category, "reset")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
