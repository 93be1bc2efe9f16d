"""图像转换相关常量定义。"""

from typing import Final


class ImageFormats:
    """输入输出格式定义"""

    # 可接受的输入扩展名（比较时不区分大小写）
    ACCEPTED_EXTENSIONS: Final[frozenset[str]] = frozenset(
        {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".svg"}
    )

    # 需要先栅格化的矢量格式
    VECTOR_EXTENSIONS: Final[frozenset[str]] = frozenset({".svg"})

    # 输出格式
    TARGET_FORMAT: Final[str] = "WEBP"
    TARGET_EXTENSION: Final[str] = ".webp"

    @classmethod
    def is_vector(cls, suffix: str) -> bool:
        """判断扩展名是否为矢量格式"""
        return suffix.lower() in cls.VECTOR_EXTENSIONS


class ConversionDefaults:
    """转换相关默认值"""

    INPUT_DIR: Final[str] = "images"
    OUTPUT_DIR: Final[str] = "optimized"

    QUALITY: Final[int] = 80
    MIN_QUALITY: Final[int] = 1
    MAX_QUALITY: Final[int] = 100

    # 透明通道质量：矢量来源保持无损边缘
    RASTER_ALPHA_QUALITY: Final[int] = 90
    VECTOR_ALPHA_QUALITY: Final[int] = 100

    # 0=最快, 6=最慢但压缩最好
    WEBP_METHOD: Final[int] = 6

    # SVG 栅格化密度（DPI），72 DPI 对应 1 倍缩放
    VECTOR_DENSITY: Final[int] = 300
    VECTOR_BASE_DPI: Final[int] = 72


def clamp_quality(quality: int) -> int:
    """把质量值限制到编码器接受的范围"""
    return max(ConversionDefaults.MIN_QUALITY, min(ConversionDefaults.MAX_QUALITY, quality))
