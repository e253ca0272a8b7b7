"""Channel and episode entity model."""

from castscore.catalog.loader import load_snapshot
from castscore.catalog.models import (
    CatalogSnapshot,
    Channel,
    Episode,
    MediaType,
    parse_duration,
    strip_html,
)

__all__ = [
    "CatalogSnapshot",
    "Channel",
    "Episode",
    "MediaType",
    "load_snapshot",
    "parse_duration",
    "strip_html",
]
