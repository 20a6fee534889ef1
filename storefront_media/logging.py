"""storefront-media 日志模块

提供带有 `request_id`、`entity_id` 的结构化日志。

- 使用 loguru。
- 通过 contextvars 注入上下文，使现有的 `logger.debug(...)` 调用自动带上这些 ID。
- 库代码只输出 DEBUG 级别日志，sink 由调用方通过 `setup_logging` 配置。
"""

from __future__ import annotations

import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from loguru import logger as _base_logger


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_entity_id: ContextVar[Optional[Any]] = ContextVar("entity_id", default=None)


def _patch_record(record: dict) -> dict:
    record_extra = record.get("extra")
    if record_extra is None:
        record_extra = {}
        record["extra"] = record_extra

    record_extra.setdefault("request_id", _request_id.get())
    record_extra.setdefault("entity_id", _entity_id.get())
    return record


logger = _base_logger.patch(_patch_record)


def new_request_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def log_context(
    *,
    request_id: Optional[str] = None,
    entity_id: Optional[Any] = None,
) -> Iterator[None]:
    tokens = []
    if request_id is not None:
        tokens.append((_request_id, _request_id.set(request_id)))
    if entity_id is not None:
        tokens.append((_entity_id, _entity_id.set(entity_id)))

    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def setup_logging(
    *,
    level: str = "INFO",
    fmt: str = "text",
    debug: bool = False,
    sink: Any = None,
) -> None:
    """设置日志配置

    参数:
        level: 日志级别。
        fmt: 'json' 或 'text'。
        debug: 是否启用 loguru 的 backtrace/diagnose。
        sink: 输出目标，默认 stderr（stdout 留给 CLI 的 JSON 结果）。
    """
    logger.remove()
    target = sink if sink is not None else sys.stderr

    if fmt.lower() == "json":
        logger.add(
            target,
            level=level.upper(),
            serialize=True,
            backtrace=debug,
            diagnose=debug,
        )
        return

    # text format - 仅在有ID时显示
    def format_message(record):
        parts = ["{time:YYYY-MM-DD HH:mm:ss}", "|", "{level:<8}", "|"]

        ids = []
        if record["extra"].get("request_id"):
            ids.append(f"req={record['extra']['request_id'][:8]}")
        if record["extra"].get("entity_id") is not None:
            entity = str(record["extra"]["entity_id"]).replace("{", "{{").replace("}", "}}")
            ids.append(f"ent={entity}")

        if ids:
            parts.append(" " + " | ".join(ids) + " -")

        parts.append(" {name}:{function} -")
        parts.append(" {message}")
        return "".join(parts) + "\n"

    logger.add(
        target,
        level=level.upper(),
        format=format_message,
        backtrace=debug,
        diagnose=debug,
    )
