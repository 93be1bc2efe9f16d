"""图像优化器接口。

面向嵌入使用的简洁接口：持有一份配置，提供配置更新、目录准备、
单文件转换和整批转换。
"""

from pathlib import Path
from typing import Any

from .config import get_default_config, update_config
from .core.converter import process_image
from .engine.batch import process_all_images, summarize
from .models import BatchSummary, FileOutcome, OptimizeConfig
from .utils.file_helpers import ensure_directories
from .utils.logging_helpers import get_logger


logger = get_logger()


class ImageOptimizer:
    """批量 WebP 优化器。

    每个实例持有独立的配置，同一进程中可以用不同配置多次运行。
    """

    def __init__(self, config: OptimizeConfig | None = None, **overrides: Any):
        """初始化优化器。

        Args:
            config: 基础配置，默认使用默认配置
            **overrides: 覆盖项，例如 quality=90, resize={"width": 800}

        Raises:
            ArgumentError: 覆盖项无效
        """
        self.config = update_config(config or get_default_config(), overrides)
        logger.debug("初始化图像优化器")

    def update_config(self, **overrides: Any) -> OptimizeConfig:
        """合并覆盖项并返回新配置"""
        self.config = update_config(self.config, overrides)
        return self.config

    def ensure_directories(self) -> None:
        ensure_directories(self.config)

    def process_image(self, file_path: str | Path) -> FileOutcome | None:
        """转换单个文件，扩展名不受支持时返回 None"""
        return process_image(file_path, self.config)

    def process_all_images(self) -> list[FileOutcome]:
        return process_all_images(self.config)

    def run(self) -> BatchSummary:
        """准备目录并处理整批文件

        Returns:
            BatchSummary: 批量汇总

        Raises:
            FilesystemError: 目录无法创建
        """
        self.ensure_directories()
        outcomes = self.process_all_images()
        return summarize(outcomes, self.config.output_dir)


def optimize_directory(
    input_dir: str | Path, output_dir: str | Path | None = None, **overrides: Any
) -> BatchSummary:
    """便捷函数：转换目录中的所有图像

    Examples:
        >>> summary = optimize_directory("images", "optimized", quality=90)
        >>> print(summary.get_summary())
    """
    overrides["input_dir"] = Path(input_dir)
    if output_dir is not None:
        overrides["output_dir"] = Path(output_dir)
    return ImageOptimizer(**overrides).run()
