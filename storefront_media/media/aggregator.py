"""
媒体图库聚合模块

从实体（商品、公司、子公司）分散的媒体字段中提取图片 URL，
去重、过滤后得到图库列表
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from storefront_media.constants import (
    MEDIA_ARRAY_KEYS,
    PRIMARY_IMAGE_KEYS,
    SECTION_FILE_KEYS,
)
from storefront_media.core.config import MediaConfig
from storefront_media.logging import logger
from storefront_media.media.classifier import classify_media, has_image_signal
from storefront_media.media.normalizer import dig, resolve_reference
from storefront_media.schemas.media import ResolvedMedia


@dataclass(frozen=True)
class ExtractionRule:
    """
    一条字段提取规则

    - many=False: keys 为单值字段，按顺序逐个取
    - many=True: keys 为数组字段，取出数组元素
    - first_match=True: 仅使用第一个非空数组（同一数据的不同命名）
    """
    name: str
    keys: Tuple[str, ...]
    many: bool = False
    first_match: bool = False


DEFAULT_GALLERY_RULES: Tuple[ExtractionRule, ...] = (
    ExtractionRule("primary", PRIMARY_IMAGE_KEYS),
    ExtractionRule("media", MEDIA_ARRAY_KEYS, many=True, first_match=True),
) + tuple(ExtractionRule(key, (key,), many=True) for key in SECTION_FILE_KEYS)


def get_media_array(entity: Any) -> List[Any]:
    """
    返回实体的通用媒体数组

    兼容 media / images / media_items / media_set 以及分页包装的 *.results；
    实体本身是列表时直接视为媒体数组
    """
    if isinstance(entity, list):
        return entity
    for key in MEDIA_ARRAY_KEYS:
        value = dig(entity, key)
        if isinstance(value, list) and value:
            return value
    return []


def iter_rule_references(entity: Any, rule: ExtractionRule) -> Iterator[Any]:
    """按规则产出原始媒体引用（未解析）"""
    if not isinstance(entity, Mapping):
        return

    if not rule.many:
        for key in rule.keys:
            value = dig(entity, key)
            if value:
                yield value
        return

    for key in rule.keys:
        value = dig(entity, key)
        if not isinstance(value, list) or not value:
            continue
        for item in value:
            if item:
                yield item
        if rule.first_match:
            return


def _collect_candidates(
    entity: Any,
    *,
    config: MediaConfig,
    rules: Sequence[ExtractionRule],
) -> Dict[str, Any]:
    # dict 保持插入顺序：URL -> 首次出现时的原始引用
    candidates: Dict[str, Any] = {}

    if isinstance(entity, list):
        references: List[Any] = list(entity)
    else:
        references = [ref for rule in rules for ref in iter_rule_references(entity, rule)]

    for ref in references:
        url = resolve_reference(ref, config=config, prefer_thumb=False)
        if url and url not in candidates:
            candidates[url] = ref
    return candidates


def _select_gallery(candidates: Dict[str, Any], *, config: MediaConfig) -> List[str]:
    unique = list(candidates)
    images = [url for url in unique if has_image_signal(url, cdn_host=config.cdn_host)]
    if images:
        return images
    if unique:
        logger.debug("No affirmative image candidates, falling back to {} raw media URLs", len(unique))
    return unique


def collect_gallery_urls(
    entity: Any,
    *,
    config: MediaConfig,
    rules: Optional[Sequence[ExtractionRule]] = None,
) -> List[str]:
    """
    聚合实体的图库 URL

    优先级：主图字段 -> 通用媒体数组 -> 各分区文件数组。
    结果按首次出现顺序去重，仅保留明确为图片的 URL；
    若全部被过滤掉，则返回去重后的原始列表（有候选时绝不返回空列表）

    Examples:
        >>> collect_gallery_urls(
        ...     {"description_files": ["http://cdn/x.pdf", "http://cdn/y.png"]},
        ...     config=MediaConfig(),
        ... )
        ['http://cdn/y.png']
    """
    if rules is None:
        rules = DEFAULT_GALLERY_RULES
    candidates = _collect_candidates(entity, config=config, rules=rules)
    return _select_gallery(candidates, config=config)


def collect_gallery_media(
    entity: Any,
    *,
    config: MediaConfig,
    rules: Optional[Sequence[ExtractionRule]] = None,
) -> List[ResolvedMedia]:
    """与 collect_gallery_urls 相同的选择结果，附带每个 URL 的媒体类型"""
    if rules is None:
        rules = DEFAULT_GALLERY_RULES
    candidates = _collect_candidates(entity, config=config, rules=rules)
    return [
        ResolvedMedia(url=url, kind=classify_media(url, candidates[url]))
        for url in _select_gallery(candidates, config=config)
    ]
