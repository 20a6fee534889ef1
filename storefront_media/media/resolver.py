"""Resolver facade bound to one explicit MediaConfig."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from storefront_media.core.config import MediaConfig, Settings
from storefront_media.logging import log_context, logger
from storefront_media.media.aggregator import (
    ExtractionRule,
    collect_gallery_media,
    collect_gallery_urls,
    get_media_array,
)
from storefront_media.media.cdn import build_cdn_url
from storefront_media.media.classifier import classify_media
from storefront_media.media.normalizer import resolve_media, resolve_reference
from storefront_media.media.selector import (
    pick_company_cover,
    pick_company_logo,
    pick_primary_media,
    pick_thumbnail,
)
from storefront_media.schemas.media import EntityMedia, MediaKind, ResolvedMedia
from storefront_media.utils.url_utils import to_https


class MediaResolver:
    def __init__(self, config: MediaConfig):
        self.config = config

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "MediaResolver":
        return cls(MediaConfig.from_settings(source))

    def resolve(self, reference: Any, *, prefer_thumb: bool = False) -> Optional[str]:
        return resolve_reference(reference, config=self.config, prefer_thumb=prefer_thumb)

    def resolve_media(self, reference: Any, *, prefer_thumb: bool = False) -> Optional[ResolvedMedia]:
        return resolve_media(reference, config=self.config, prefer_thumb=prefer_thumb)

    def cdn_url(self, descriptor: Any, *, thumb: bool = False) -> Optional[str]:
        return build_cdn_url(descriptor, config=self.config, thumb=thumb)

    def classify(self, url: Optional[str] = None, reference: Any = None) -> MediaKind:
        return classify_media(url, reference)

    def gallery(self, entity: Any, rules: Optional[Sequence[ExtractionRule]] = None) -> List[str]:
        return collect_gallery_urls(entity, config=self.config, rules=rules)

    def gallery_media(
        self, entity: Any, rules: Optional[Sequence[ExtractionRule]] = None
    ) -> List[ResolvedMedia]:
        return collect_gallery_media(entity, config=self.config, rules=rules)

    def thumbnail(self, entity: Any) -> Optional[str]:
        return pick_thumbnail(entity, config=self.config)

    def primary_media(self, entity: Any) -> Optional[ResolvedMedia]:
        """主媒体条目，找不到图片时退回 is_primary 条目或第一个元素"""
        item = pick_primary_media(get_media_array(entity), config=self.config, fallback=True)
        return self.resolve_media(item, prefer_thumb=True)

    def company_logo(self, profile: Any) -> Optional[str]:
        return pick_company_logo(profile, config=self.config)

    def company_cover(self, profile: Any) -> Optional[str]:
        return pick_company_cover(profile, config=self.config)

    def secure(self, url: Optional[str]) -> Optional[str]:
        return to_https(url, self.config.cdn_host)

    def summarize(self, entity: Any) -> EntityMedia:
        entity_id = entity.get("id") if isinstance(entity, Mapping) else None
        with log_context(entity_id=entity_id):
            media = self.gallery_media(entity)
            summary = EntityMedia(
                thumbnail=self.thumbnail(entity),
                gallery=[item.url for item in media],
                media=media,
            )
            logger.debug(
                "Resolved media: thumbnail={} gallery_size={}",
                summary.thumbnail is not None,
                len(summary.gallery),
            )
        return summary
