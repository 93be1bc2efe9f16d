"""日志工具模块。

提供统一的日志记录功能，标准化日志格式和配置。
"""

import inspect
import logging


def get_logger(name: str | None = None) -> logging.Logger:
    """获取标准化配置的日志记录器。

    Args:
        name: 日志记录器名称，默认使用调用模块的 __name__

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    if name is None:
        # 获取调用者的模块名
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "unknown")
        else:
            name = "unknown"

    return logging.getLogger(name)


def setup_logging(level: str | None = None, verbose: bool = False) -> None:
    """配置根日志记录器，命令行和 MCP 服务器入口调用。

    Args:
        level: 日志级别，默认取 LoggingDefaults.LOG_LEVEL
        verbose: 是否使用带时间和模块名的详细格式
    """
    from ..config import LOGGING_DEFAULTS

    log_level = (level or LOGGING_DEFAULTS.LOG_LEVEL).upper()
    log_format = (
        LOGGING_DEFAULTS.DEBUG_LOG_FORMAT if verbose else LOGGING_DEFAULTS.LOG_FORMAT
    )
    logging.basicConfig(level=log_level, format=log_format, force=True)
