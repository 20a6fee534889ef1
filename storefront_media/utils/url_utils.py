"""
URL处理工具模块

提供路径/扩展名提取、origin 与协议规范化、CDN HTTPS 升级等功能
"""
from typing import Optional
from urllib.parse import urlsplit

from storefront_media.constants import DEFAULT_CDN_HOST, DEFAULT_PROTOCOL


def url_path(url: str) -> str:
    """
    返回 URL 的 path 部分（不含 query / fragment）

    urlsplit 对畸形输入（如未闭合的 IPv6 host）会抛 ValueError，
    这里统一降级为空字符串

    Examples:
        >>> url_path("https://cdn.example.com/a/b.png?w=100#top")
        '/a/b.png'
    """
    if not isinstance(url, str):
        return ""
    try:
        return urlsplit(url.strip()).path
    except ValueError:
        return ""


def url_host(url: str) -> str:
    """返回小写 hostname，无法解析时返回空字符串"""
    if not isinstance(url, str):
        return ""
    try:
        return (urlsplit(url.strip()).hostname or "").lower()
    except ValueError:
        return ""


def url_extension(url: str) -> str:
    """
    返回 URL 路径最后一段的扩展名（小写，不带点）

    Examples:
        >>> url_extension("http://cdn/x/photo.JPG?v=2")
        'jpg'
        >>> url_extension("/files/readme")
        ''
    """
    last_segment = url_path(url).rsplit("/", 1)[-1]
    if "." not in last_segment:
        return ""
    return last_segment.rsplit(".", 1)[-1].lower()


def normalize_origin(origin: Optional[str]) -> str:
    """去首尾空白与末尾斜杠：'https://shop.example.com/' -> 'https://shop.example.com'"""
    return (origin or "").strip().rstrip("/")


def normalize_protocol(protocol: Optional[str]) -> str:
    """
    规范化页面协议，保证以冒号结尾

    Examples:
        >>> normalize_protocol("http")
        'http:'
        >>> normalize_protocol("https://")
        'https:'
    """
    val = (protocol or "").strip().lower()
    val = val.rstrip("/").rstrip(":")
    if not val:
        return DEFAULT_PROTOCOL
    return f"{val}:"


def to_https(url: Optional[str], cdn_host: str = DEFAULT_CDN_HOST) -> Optional[str]:
    """
    将 CDN 的 http:// 链接升级为 https://，避免生产环境混合内容

    只处理已知 CDN host，其它 URL 原样返回；非字符串输入原样返回
    """
    if not url or not isinstance(url, str):
        return url
    prefix = f"http://{cdn_host.lower()}/"
    if url.lower().startswith(prefix):
        return "https://" + url[len("http://"):]
    return url
