"""
Configuration management.
"""
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_media.constants import (
    DEFAULT_CDN_HOST,
    DEFAULT_PROTOCOL,
    DEFAULT_THUMB_HEIGHT,
    DEFAULT_THUMB_WIDTH,
    DEFAULT_VIDEO_FRAME_OFFSET,
)
from storefront_media.utils.url_utils import normalize_origin, normalize_protocol


class Settings(BaseSettings):
    """Application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # 运行环境
    app_env: Literal["dev", "prod"] = "dev"

    # CDN 配置，未设置 cloud 时 public_id 描述符无法解析，显式 URL 不受影响
    cdn_cloud: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("cdn_cloud", "cloudinary_cloud", "cloudinary_cloud_name"),
    )
    cdn_host: str = DEFAULT_CDN_HOST
    cdn_thumb_width: int = DEFAULT_THUMB_WIDTH
    cdn_thumb_height: int = DEFAULT_THUMB_HEIGHT
    cdn_video_frame_offset: int = DEFAULT_VIDEO_FRAME_OFFSET

    # 相对路径补全用的站点 origin 与协议，例如 https://shop.example.com / https:
    site_origin: str = ""
    site_protocol: str = DEFAULT_PROTOCOL

    # 日志配置
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


settings = Settings()


def validate_settings(source: Optional[Settings] = None) -> None:
    """基础环境校验"""
    source = source or settings

    host = (source.cdn_host or "").strip()
    if not host:
        raise RuntimeError("CDN_HOST must not be empty")
    if "://" in host or "/" in host:
        raise RuntimeError(f"CDN_HOST must be a bare host name, got {host!r}")

    if source.app_env == "prod" and not normalize_origin(source.site_origin):
        raise RuntimeError("SITE_ORIGIN must be set in production (APP_ENV=prod)")

    if source.cdn_thumb_width <= 0 or source.cdn_thumb_height <= 0:
        raise RuntimeError("CDN thumbnail dimensions must be positive")

    return None


@dataclass(frozen=True)
class MediaConfig:
    """
    Resolver configuration, passed explicitly to every resolution entry point.

    With the default empty origin, relative paths resolve to root-relative
    URLs such as /img/a.png rather than absolute ones.
    """

    cloud: Optional[str] = None
    cdn_host: str = DEFAULT_CDN_HOST
    origin: str = ""
    protocol: str = DEFAULT_PROTOCOL
    thumb_width: int = DEFAULT_THUMB_WIDTH
    thumb_height: int = DEFAULT_THUMB_HEIGHT
    video_frame_offset: int = DEFAULT_VIDEO_FRAME_OFFSET

    def __post_init__(self) -> None:
        cloud = (self.cloud or "").strip() or None
        object.__setattr__(self, "cloud", cloud)
        object.__setattr__(self, "cdn_host", (self.cdn_host or DEFAULT_CDN_HOST).strip().lower())
        object.__setattr__(self, "origin", normalize_origin(self.origin))
        object.__setattr__(self, "protocol", normalize_protocol(self.protocol))

    @property
    def cdn_enabled(self) -> bool:
        return self.cloud is not None

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "MediaConfig":
        source = source or settings
        return cls(
            cloud=source.cdn_cloud,
            cdn_host=source.cdn_host,
            origin=source.site_origin,
            protocol=source.site_protocol,
            thumb_width=source.cdn_thumb_width,
            thumb_height=source.cdn_thumb_height,
            video_frame_offset=source.cdn_video_frame_offset,
        )
