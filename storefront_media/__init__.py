"""Media reference resolution and aggregation for the marketplace storefront."""
from storefront_media.core.config import MediaConfig
from storefront_media.media import (
    MediaResolver,
    collect_gallery_urls,
    pick_thumbnail,
    resolve_reference,
)
from storefront_media.schemas import EntityMedia, ResolvedMedia

__version__ = "0.1.0"

__all__ = [
    "EntityMedia",
    "MediaConfig",
    "MediaResolver",
    "ResolvedMedia",
    "collect_gallery_urls",
    "pick_thumbnail",
    "resolve_reference",
]
