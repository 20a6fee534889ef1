"""
媒体字段常量

各接口返回的媒体字段命名不一致（snake_case / camelCase / 旧字段），
这里把所有候选字段集中成有序表，解析器按顺序查找。
"""

# 引用对象中的缩略图字段（preferThumb 时优先）
THUMBNAIL_REFERENCE_KEYS = (
    "thumbnail_url",
    "thumbnail.secure_url",
    "thumbnail.url",
)

# 引用对象中的通用 URL 字段
REFERENCE_KEYS = (
    "secure_url",
    "url",
    "file",
    "image",
    "src",
    "path",
    "file_url",
    # 嵌套
    "asset.secure_url",
    "asset.url",
    "file.secure_url",
    "file.url",
)

# 实体上的主图字段
PRIMARY_IMAGE_KEYS = ("primary_image", "primary_image_url")

# 通用媒体数组，取第一个非空的
MEDIA_ARRAY_KEYS = (
    "media",
    "images",
    "media_items",
    "media_set",
    "media.results",
    "images.results",
)

# 分区文件数组（商品详情页各栏目），按顺序处理
SECTION_FILE_KEYS = (
    "description_files",
    "specification_files",
    "production_capacity_files",
    "packaging_delivery_files",
    "benefits_files",
    "others_files",
    "customer_feedback_files",
    "questions_answers_files",
)

# 缩略图备选字段（主图之后、媒体数组之前）
THUMBNAIL_FALLBACK_KEYS = (
    "thumbnail_url",
    "thumbnail",
    "image_url",
    "product_image_url",
    "cover_image_url",
    "thumb",
    "img",
    "image",
    "asset.url",
    "asset.secure_url",
)

# 公司主页 / 子公司主页
COMPANY_LOGO_KEYS = (
    "company.company_logo_url",
    "company.company_logo",
    "company.company_image_url",
    "company.company_image",
    "profile_image_url",
    "profile_image",
    "logo_url",
)

COMPANY_COVER_KEYS = (
    "company.company_cover_photo_url",
    "company.company_cover_photo",
    "company.company_cover_url",
    "company.cover_image_url",
    "cover_image_url",
    "coverImage",
)

# 显式类型字段
MEDIA_TYPE_KEYS = ("media_type", "type", "resource_type")

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "webp", "gif", "bmp", "svg"})
VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "ogg", "mov"})

# CDN 默认配置
DEFAULT_CDN_HOST = "res.cloudinary.com"
DEFAULT_PROTOCOL = "https:"
DEFAULT_THUMB_WIDTH = 400
DEFAULT_THUMB_HEIGHT = 300
DEFAULT_VIDEO_FRAME_OFFSET = 0
CDN_DELIVERY_TRANSFORM = "q_auto,f_auto"
