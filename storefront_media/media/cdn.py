"""CDN URL construction from asset descriptors.

Some endpoints only return `{public_id, resource_type, format}` instead of a
literal URL. When a cloud identifier is configured we can build the delivery
URL ourselves; without one the descriptor is unresolvable and callers fall
back to whatever literal URL fields they have.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from storefront_media.constants import CDN_DELIVERY_TRANSFORM
from storefront_media.core.config import MediaConfig
from storefront_media.logging import logger


def select_transform(resource_type: str, *, config: MediaConfig, thumb: bool = False) -> str:
    if not thumb:
        return CDN_DELIVERY_TRANSFORM
    crop = f"c_fill,w_{config.thumb_width},h_{config.thumb_height},{CDN_DELIVERY_TRANSFORM}"
    if resource_type == "video":
        # 视频缩略图取固定偏移处的帧
        return f"so_{config.video_frame_offset},{crop}"
    return crop


def build_cdn_url(
    descriptor: Any,
    *,
    config: MediaConfig,
    thumb: bool = False,
) -> Optional[str]:
    """Build `https://{host}/{cloud}/{type}/upload/{transform}/{public_id}[.fmt]`."""
    if not isinstance(descriptor, Mapping):
        return None

    public_id = descriptor.get("public_id")
    if not isinstance(public_id, str):
        return None
    asset = public_id.strip().lstrip("/")
    if not asset:
        return None

    if not config.cdn_enabled:
        logger.debug("CDN cloud not configured, cannot build URL for public_id={}", public_id)
        return None

    resource_type = "video" if descriptor.get("resource_type") == "video" else "image"
    transform = select_transform(resource_type, config=config, thumb=thumb)

    fmt = descriptor.get("format")
    suffix = ""
    if isinstance(fmt, str) and fmt.strip().lstrip("."):
        suffix = "." + fmt.strip().lstrip(".")

    return f"https://{config.cdn_host}/{config.cloud}/{resource_type}/upload/{transform}/{asset}{suffix}"
