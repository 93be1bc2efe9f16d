"""核心模块包。

单个图像的来源分派、格式处理和转换。
"""

from .converter import process_image
from .formats import FormatProcessor, get_webp_params
from .sources import ImageSource, RasterSource, VectorSource, classify_source


__all__ = [
    "FormatProcessor",
    "ImageSource",
    "RasterSource",
    "VectorSource",
    "classify_source",
    "get_webp_params",
    "process_image",
]
