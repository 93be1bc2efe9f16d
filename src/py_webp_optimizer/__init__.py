"""批量 WebP 图像优化库。

把目录中的 JPEG、PNG、GIF、BMP、TIFF 和 SVG 图像转换为 WebP。
"""

__version__ = "0.1.0"
__description__ = "批量 WebP 图像优化工具，基于 Pillow 和 CairoSVG"

from .config import get_default_config, update_config
from .core.converter import process_image
from .engine.batch import process_all_images, summarize
from .exceptions import (
    ArgumentError,
    ConversionError,
    FilesystemError,
    OptimizeError,
    UnsupportedFormatError,
)
from .models import BatchSummary, FileOutcome, OptimizeConfig, ResizeConfig
from .optimizer import ImageOptimizer, optimize_directory
from .utils.file_helpers import ensure_directories, find_files


__all__ = [
    "ArgumentError",
    "BatchSummary",
    "ConversionError",
    "FileOutcome",
    "FilesystemError",
    "ImageOptimizer",
    "OptimizeConfig",
    "OptimizeError",
    "ResizeConfig",
    "UnsupportedFormatError",
    "ensure_directories",
    "find_files",
    "get_default_config",
    "get_version",
    "optimize_directory",
    "process_all_images",
    "process_image",
    "summarize",
    "update_config",
]


def get_version() -> str:
    """获取版本号。"""
    return __version__
