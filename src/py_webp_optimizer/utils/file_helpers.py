"""文件工具模块。

提供目录准备和文件查找功能。
"""

from pathlib import Path

from ..models.optimize_config import OptimizeConfig
from .logging_helpers import get_logger
from .message_formatter import MessageFormatter


logger = get_logger()


def ensure_directories(config: OptimizeConfig) -> None:
    """确保输入和输出目录存在，缺失的中间目录一并创建。

    重复调用不会产生副作用。

    Args:
        config: 运行配置

    Raises:
        FilesystemError: 系统拒绝创建目录（权限不足、同名文件已存在等）
    """
    # 避免循环导入
    from ..exceptions import FilesystemError

    for directory in (config.input_dir, config.output_dir):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(
                MessageFormatter.operation_failed("创建目录", directory, e), directory
            ) from e

    logger.info(MessageFormatter.directories_ready(config.input_dir, config.output_dir))


def find_files(
    directory: str | Path,
    exclude_dirs: list[Path] | None = None,
) -> list[Path]:
    """递归查找目录中的所有文件，不按扩展名过滤。

    结果为绝对路径，按相对路径的字典序排列。

    Args:
        directory: 搜索目录
        exclude_dirs: 要排除的目录（绝对或相对路径）

    Returns:
        list[Path]: 文件路径列表，目录不存在或为空时返回空列表
    """
    directory = Path(directory).resolve()
    excluded = [Path(d).resolve() for d in exclude_dirs or []]

    if not directory.exists():
        logger.warning(MessageFormatter.directory_not_found(directory))
        return []

    if not directory.is_dir():
        logger.warning(MessageFormatter.path_not_directory(directory))
        return []

    files = [
        file_path
        for file_path in directory.rglob("*")
        if file_path.is_file()
        and not any(file_path.is_relative_to(d) for d in excluded)
    ]

    return sorted(files, key=lambda p: p.relative_to(directory).as_posix())
