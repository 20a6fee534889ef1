"""
媒体引用解析模块

该模块包含:
- normalizer: 单个媒体引用 -> 规范 URL
- cdn: 由 CDN 资源描述符构造 URL
- classifier: 媒体类型判定
- aggregator: 图库聚合
- selector: 缩略图 / 主媒体 / 公司品牌图选择
- resolver: 绑定配置的门面类
"""
from .aggregator import (
    DEFAULT_GALLERY_RULES,
    ExtractionRule,
    collect_gallery_media,
    collect_gallery_urls,
    get_media_array,
    iter_rule_references,
)
from .cdn import build_cdn_url
from .classifier import classify_media, has_image_signal
from .normalizer import normalize_url_string, resolve_media, resolve_reference
from .resolver import MediaResolver
from .selector import (
    pick_company_cover,
    pick_company_logo,
    pick_first_resolvable,
    pick_primary_media,
    pick_thumbnail,
)

__all__ = [
    'DEFAULT_GALLERY_RULES',
    'ExtractionRule',
    'MediaResolver',
    'build_cdn_url',
    'classify_media',
    'collect_gallery_media',
    'collect_gallery_urls',
    'get_media_array',
    'has_image_signal',
    'iter_rule_references',
    'normalize_url_string',
    'pick_company_cover',
    'pick_company_logo',
    'pick_first_resolvable',
    'pick_primary_media',
    'pick_thumbnail',
    'resolve_media',
    'resolve_reference',
]
