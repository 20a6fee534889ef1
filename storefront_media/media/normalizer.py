"""Media reference normalization.

A media reference is whatever an endpoint returned for an image or video: a
plain path, an absolute URL, a protocol-relative URL, a nested asset object or
a CDN descriptor. `resolve_reference` turns any of those into a canonical URL
or None. It never raises on malformed input.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from storefront_media.constants import REFERENCE_KEYS, THUMBNAIL_REFERENCE_KEYS
from storefront_media.core.config import MediaConfig
from storefront_media.media.cdn import build_cdn_url
from storefront_media.media.classifier import classify_media
from storefront_media.schemas.media import ResolvedMedia

_ABSOLUTE_PREFIXES = ("http://", "https://", "data:")


def dig(record: Any, path: str) -> Any:
    """Follow a dotted path through nested mappings; None when any hop is missing."""
    current = record
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


def pick_first_string(record: Any, keys: Iterable[str]) -> Optional[str]:
    """Return the first non-empty string found at any of `keys`, stripped."""
    for key in keys:
        value = dig(record, key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def normalize_url_string(value: Any, *, config: MediaConfig) -> Optional[str]:
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    if s.lower().startswith(_ABSOLUTE_PREFIXES):
        return s
    if s.startswith("//"):
        return f"{config.protocol}{s}"
    return f"{config.origin}/{s.lstrip('/')}"


def resolve_reference(
    reference: Any,
    *,
    config: MediaConfig,
    prefer_thumb: bool = False,
) -> Optional[str]:
    """
    Resolve one media reference to a canonical URL.

    Mappings are scanned for literal URL fields first (thumbnail fields
    first when `prefer_thumb`); a CDN descriptor is only used when no
    literal field is present.
    """
    if not reference:
        return None

    if isinstance(reference, str):
        return normalize_url_string(reference, config=config)

    if not isinstance(reference, Mapping):
        return None

    keys = REFERENCE_KEYS
    if prefer_thumb:
        keys = THUMBNAIL_REFERENCE_KEYS + REFERENCE_KEYS

    candidate = pick_first_string(reference, keys)
    if candidate is None and "public_id" in reference:
        candidate = build_cdn_url(reference, config=config, thumb=prefer_thumb)

    return normalize_url_string(candidate, config=config)


def resolve_media(
    reference: Any,
    *,
    config: MediaConfig,
    prefer_thumb: bool = False,
) -> Optional[ResolvedMedia]:
    url = resolve_reference(reference, config=config, prefer_thumb=prefer_thumb)
    if url is None:
        return None
    return ResolvedMedia(url=url, kind=classify_media(url, reference))
