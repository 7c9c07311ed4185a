"""activelabel: detect mentions, hashtags and URLs in text."""

__version__ = "1.0.0"

from activelabel.core import (  # noqa: E402
    ActiveEntity,
    ActiveLabelError,
    ConfigurationError,
    EntityCategory,
    InvalidRangeError,
    TextRange,
)
from activelabel.extraction import (  # noqa: E402
    build_hashtags,
    build_mentions,
    build_urls,
    entity_at,
    extract,
    extract_all,
    merge_entities,
)
from activelabel.services import ActiveText  # noqa: E402

__all__ = [
    "__version__",
    "ActiveEntity",
    "ActiveLabelError",
    "ActiveText",
    "ConfigurationError",
    "EntityCategory",
    "InvalidRangeError",
    "TextRange",
    "build_hashtags",
    "build_mentions",
    "build_urls",
    "entity_at",
    "extract",
    "extract_all",
    "merge_entities",
]
