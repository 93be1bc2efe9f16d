"""工具模块包。

提供纯工具函数，不包含业务逻辑。
"""

from .file_helpers import ensure_directories, find_files
from .logging_helpers import get_logger, setup_logging
from .message_formatter import MessageFormatter


__all__ = [
    "MessageFormatter",
    "ensure_directories",
    "find_files",
    "get_logger",
    "setup_logging",
]
