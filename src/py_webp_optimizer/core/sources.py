"""图像来源模块。

把输入文件分为栅格来源和矢量来源两类，在转换开始时一次性分派。
"""

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

import cairosvg
from PIL import Image, ImageOps

from ..exceptions import UnsupportedFormatError
from ..models.constants import ConversionDefaults, ImageFormats
from ..models.optimize_config import OptimizeConfig
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter


logger = get_logger()


@dataclass(frozen=True)
class RasterSource:
    """栅格图像来源，由 Pillow 直接解码"""

    path: Path

    kind = "raster"
    alpha_quality = ConversionDefaults.RASTER_ALPHA_QUALITY

    def load(self) -> Image.Image:
        """解码图像并按 EXIF 方向旋转，多帧文件只取第一帧"""
        with Image.open(self.path) as img:
            img.load()
            transposed = ImageOps.exif_transpose(img)
            # exif_transpose 无需旋转时可能返回原对象，复制一份以脱离文件句柄
            return transposed.copy() if transposed is img else transposed


@dataclass(frozen=True)
class VectorSource:
    """矢量图像来源，按指定密度栅格化后合成到透明背景"""

    path: Path
    density: int = ConversionDefaults.VECTOR_DENSITY

    kind = "vector"
    alpha_quality = ConversionDefaults.VECTOR_ALPHA_QUALITY

    @property
    def scale(self) -> float:
        """栅格化缩放倍数，72 DPI 为 1 倍"""
        return self.density / ConversionDefaults.VECTOR_BASE_DPI

    def load(self) -> Image.Image:
        logger.info(MessageFormatter.rasterizing(self.path, self.density))
        # 以文件对象传入，文件名中的 # 和 % 不会被当作 URL 解析
        with self.path.open("rb") as svg_file:
            png_bytes = cairosvg.svg2png(file_obj=svg_file, scale=self.scale)

        with Image.open(BytesIO(png_bytes)) as rendered:
            rendered = rendered.convert("RGBA")
            background = Image.new("RGBA", rendered.size, (0, 0, 0, 0))
            return Image.alpha_composite(background, rendered)


ImageSource = RasterSource | VectorSource


def classify_source(path: Path, config: OptimizeConfig) -> ImageSource:
    """根据扩展名判断来源类型

    Args:
        path: 输入文件路径
        config: 运行配置

    Returns:
        ImageSource: 栅格或矢量来源

    Raises:
        UnsupportedFormatError: 扩展名不在可接受列表中
    """
    if not config.accepts(path):
        raise UnsupportedFormatError(
            MessageFormatter.unsupported_format(path), input_path=path
        )

    if ImageFormats.is_vector(path.suffix):
        return VectorSource(path=path, density=config.vector_density)
    return RasterSource(path=path)
