"""
工具模块 - 提供通用 URL 处理函数

该模块包含:
- url_utils: URL 路径、扩展名、origin/协议规范化
"""
from .url_utils import (
    normalize_origin,
    normalize_protocol,
    to_https,
    url_extension,
    url_host,
    url_path,
)

__all__ = [
    'normalize_origin',
    'normalize_protocol',
    'to_https',
    'url_extension',
    'url_host',
    'url_path',
]
