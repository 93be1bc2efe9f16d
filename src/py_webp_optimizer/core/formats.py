"""格式处理模块。

为 WebP 编码准备图像模式并生成保存参数。
"""

from typing import Any

from PIL import Image

from ..models.constants import ConversionDefaults, ImageFormats, clamp_quality
from ..utils.logging_helpers import get_logger


logger = get_logger()

# 按 16 位取值范围存储的灰度模式
HIGH_BIT_DEPTH_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")


class FormatProcessor:
    """WebP 格式处理器"""

    def prepare_for_webp(self, img: Image.Image) -> Image.Image:
        """为WebP格式准备图片

        WebP 只支持 RGB 和 RGBA，其余模式在编码前转换。
        """
        if img.mode == "P":
            # 调色板模式，检查是否有透明度
            if "transparency" in img.info:
                return img.convert("RGBA")
            return img.convert("RGB")
        if img.mode in ("LA", "PA") or (img.mode == "L" and "transparency" in img.info):
            return img.convert("RGBA")
        if img.mode in ("RGBa", "La"):
            # 预乘透明度模式
            return img.convert("RGBA")
        if img.mode in HIGH_BIT_DEPTH_MODES:
            return self._reduce_bit_depth(img).convert("RGB")
        if img.mode not in ("RGB", "RGBA"):
            # L、1、CMYK、F 等
            return img.convert("RGB")

        return img

    @staticmethod
    def _reduce_bit_depth(img: Image.Image) -> Image.Image:
        """16 位灰度按比例缩到 8 位，直接转换会把 255 以上的值截断成白色"""
        return img.convert("I").point(lambda v: v / 256).convert("L")


def get_webp_params(quality: int, alpha_quality: int) -> dict[str, Any]:
    """获取有损 WebP 压缩参数

    - quality: 图像质量，超出 1-100 的值会被限制到范围内
    - method: 0=快速，6=最慢但最佳压缩
    - alpha_quality: 透明通道质量，100 为无损

    Args:
        quality: 配置中的质量值
        alpha_quality: 透明通道质量

    Returns:
        dict: 传给 ``Image.save`` 的参数
    """
    webp_quality = clamp_quality(quality)
    if webp_quality != quality:
        logger.warning(f"质量值 {quality} 超出范围，按 {webp_quality} 编码")

    return {
        "format": ImageFormats.TARGET_FORMAT,
        "quality": webp_quality,
        "lossless": False,
        "method": ConversionDefaults.WEBP_METHOD,
        "alpha_quality": alpha_quality,
    }
