"""数据模型包。

定义配置、转换结果和常量。
"""

from .constants import ConversionDefaults, ImageFormats, clamp_quality
from .optimize_config import OptimizeConfig, ResizeConfig
from .outcome import BaseResult, BatchSummary, FileOutcome


__all__ = [
    "BaseResult",
    "BatchSummary",
    "ConversionDefaults",
    "FileOutcome",
    "ImageFormats",
    "OptimizeConfig",
    "ResizeConfig",
    "clamp_quality",
]
