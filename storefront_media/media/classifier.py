"""
媒体类型判定

判定顺序：
1. 引用对象上的显式类型字段（media_type / type / resource_type），按前缀匹配 image / video
2. data URI 的 MIME 前缀，或 URL 扩展名
3. CDN 路径约定（/video/ 段 => 视频，/image/upload/ 段 => 图片）
4. 其它一律 other
"""
from collections.abc import Mapping
from typing import Any, Optional

from storefront_media.constants import (
    DEFAULT_CDN_HOST,
    IMAGE_EXTENSIONS,
    MEDIA_TYPE_KEYS,
    VIDEO_EXTENSIONS,
)
from storefront_media.schemas.media import MediaKind
from storefront_media.utils.url_utils import url_extension, url_host, url_path


def _explicit_kind(reference: Any) -> Optional[MediaKind]:
    if not isinstance(reference, Mapping):
        return None
    for key in MEDIA_TYPE_KEYS:
        value = reference.get(key)
        if not isinstance(value, str):
            continue
        value = value.strip().lower()
        if value.startswith("image"):
            return "image"
        if value.startswith("video"):
            return "video"
    return None


def classify_media(url: Optional[str] = None, reference: Any = None) -> MediaKind:
    """返回 'image' / 'video' / 'other'，不会抛异常"""
    explicit = _explicit_kind(reference)
    if explicit:
        return explicit

    target = url if isinstance(url, str) and url.strip() else reference
    if not isinstance(target, str) or not target.strip():
        return "other"

    lowered = target.strip().lower()
    if lowered.startswith("data:"):
        if lowered.startswith("data:image/"):
            return "image"
        if lowered.startswith("data:video/"):
            return "video"
        return "other"

    ext = url_extension(lowered)
    if ext in IMAGE_EXTENSIONS:
        return "image"
    if ext in VIDEO_EXTENSIONS:
        return "video"

    path = url_path(lowered)
    if "/video/" in path:
        return "video"
    if "/image/upload/" in path:
        return "image"
    return "other"


def has_image_signal(url: Any, *, cdn_host: str = DEFAULT_CDN_HOST) -> bool:
    """
    保守判断：只有明确的图片信号才算图片

    - 已知图片扩展名
    - data:image/ URI
    - CDN 的 /image/upload/ 路径（无扩展名也可）
    """
    if not isinstance(url, str) or not url.strip():
        return False
    lowered = url.strip().lower()
    if lowered.startswith("data:image/"):
        return True
    if url_extension(lowered) in IMAGE_EXTENSIONS:
        return True
    return url_host(lowered) == cdn_host.lower() and "/image/upload/" in url_path(lowered)
