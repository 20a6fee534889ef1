"""
解析 API 返回的实体 JSON，输出缩略图与图库

Usage:
    storefront-media product.json
    curl -s https://api.example.com/products/42/ | storefront-media - --origin https://shop.example.com
"""
import argparse
import json
import sys
from typing import Any, List, Optional

from storefront_media.core.config import Settings, settings, validate_settings
from storefront_media.logging import logger, setup_logging
from storefront_media.media.resolver import MediaResolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront-media",
        description="Resolve thumbnails and galleries for storefront entities",
    )
    parser.add_argument("payload", help="JSON 文件路径，'-' 表示从 stdin 读取")
    parser.add_argument("--origin", default=None, help="相对路径补全用的站点 origin")
    parser.add_argument("--protocol", default=None, help="协议相对 URL 使用的协议，如 https:")
    parser.add_argument("--cloud", default=None, help="CDN cloud 标识")
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--log-format", choices=["json", "text"], default=settings.log_format)
    parser.add_argument("--indent", type=int, default=2)
    return parser


def _load_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def _effective_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "cdn_cloud": args.cloud,
        "site_origin": args.origin,
        "site_protocol": args.protocol,
    }
    return settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, fmt=args.log_format)

    source = _effective_settings(args)
    try:
        validate_settings(source)
    except RuntimeError as e:
        logger.error("Invalid configuration: {}", e)
        return 1

    try:
        payload = _load_payload(args.payload)
    except (OSError, ValueError) as e:
        # ValueError 覆盖 JSONDecodeError 与 UnicodeDecodeError
        logger.error("Cannot read payload {}: {}", args.payload, e)
        return 1

    resolver = MediaResolver.from_settings(source)
    if isinstance(payload, list):
        result: Any = [resolver.summarize(entity).model_dump() for entity in payload]
    else:
        result = resolver.summarize(payload).model_dump()

    json.dump(result, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
