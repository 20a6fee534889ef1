"""
媒体相关 schemas
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

MediaKind = Literal["image", "video", "other"]


class ResolvedMedia(BaseModel):
    """解析后的单个媒体"""
    url: str = Field(..., description="绝对 URL 或 data URI")
    kind: MediaKind = Field("other", description="媒体类型")


class EntityMedia(BaseModel):
    """实体（商品/公司/子公司）的媒体汇总"""
    thumbnail: Optional[str] = Field(None, description="列表/卡片用的代表图")
    gallery: List[str] = Field(default_factory=list, description="去重后的图库 URL")
    media: List[ResolvedMedia] = Field(default_factory=list, description="图库条目及其类型")
