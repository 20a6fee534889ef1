"""
缩略图 / 代表图选择

pick_thumbnail 优先级：
1. 主图字段（primary_image / primary_image_url）
2. 备选单值字段（thumbnail_url、image_url、cover_image_url ...）
3. 媒体数组中 is_primary 的图片，其次第一张图片
4. 各分区文件数组中第一个可解析条目
5. 媒体数组第一个元素（不区分类型）

主图字段与 is_primary 同时存在时，主图字段优先。
"""
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from storefront_media.constants import (
    COMPANY_COVER_KEYS,
    COMPANY_LOGO_KEYS,
    PRIMARY_IMAGE_KEYS,
    SECTION_FILE_KEYS,
    THUMBNAIL_FALLBACK_KEYS,
)
from storefront_media.core.config import MediaConfig
from storefront_media.media.aggregator import get_media_array
from storefront_media.media.classifier import classify_media
from storefront_media.media.normalizer import dig, resolve_reference

_TRUTHY_FLAGS = {"true", "1", "yes"}


def _is_flagged_primary(item: Any) -> bool:
    if not isinstance(item, Mapping):
        return False
    flag = item.get("is_primary")
    if isinstance(flag, str):
        return flag.strip().lower() in _TRUTHY_FLAGS
    return flag is True or flag == 1


def _is_image_item(item: Any, *, config: MediaConfig) -> bool:
    url = resolve_reference(item, config=config, prefer_thumb=True)
    if url is None:
        return False
    return classify_media(url, item) == "image"


def pick_first_resolvable(
    record: Any,
    keys: Iterable[str],
    *,
    config: MediaConfig,
    prefer_thumb: bool = False,
) -> Optional[str]:
    """按 keys 顺序返回第一个能解析出 URL 的字段"""
    if not isinstance(record, Mapping):
        return None
    for key in keys:
        url = resolve_reference(dig(record, key), config=config, prefer_thumb=prefer_thumb)
        if url:
            return url
    return None


def pick_primary_media(
    items: Any,
    *,
    config: MediaConfig,
    fallback: bool = False,
) -> Optional[Any]:
    """
    从媒体数组中选出主媒体（返回原始引用）

    is_primary 的图片 > 第一张图片；fallback=True 时继续
    is_primary 的任意类型 > 第一个元素
    """
    if not isinstance(items, list) or not items:
        return None

    images: List[Any] = [item for item in items if _is_image_item(item, config=config)]
    for item in images:
        if _is_flagged_primary(item):
            return item
    if images:
        return images[0]

    if not fallback:
        return None
    for item in items:
        if _is_flagged_primary(item):
            return item
    return items[0]


def pick_thumbnail(entity: Any, *, config: MediaConfig) -> Optional[str]:
    """返回实体的代表图 URL，全部失败时返回 None"""
    if isinstance(entity, Mapping):
        url = pick_first_resolvable(entity, PRIMARY_IMAGE_KEYS, config=config, prefer_thumb=True)
        if url:
            return url

        url = pick_first_resolvable(entity, THUMBNAIL_FALLBACK_KEYS, config=config, prefer_thumb=True)
        if url:
            return url

    media = get_media_array(entity)
    primary = pick_primary_media(media, config=config)
    url = resolve_reference(primary, config=config, prefer_thumb=True)
    if url:
        return url

    if isinstance(entity, Mapping):
        for key in SECTION_FILE_KEYS:
            files = entity.get(key)
            if not isinstance(files, list):
                continue
            for item in files:
                url = resolve_reference(item, config=config, prefer_thumb=True)
                if url:
                    return url

    if media:
        return resolve_reference(media[0], config=config, prefer_thumb=True)
    return None


def pick_company_logo(profile: Any, *, config: MediaConfig) -> Optional[str]:
    return pick_first_resolvable(profile, COMPANY_LOGO_KEYS, config=config)


def pick_company_cover(profile: Any, *, config: MediaConfig) -> Optional[str]:
    return pick_first_resolvable(profile, COMPANY_COVER_KEYS, config=config)
