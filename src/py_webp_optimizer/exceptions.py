"""图像转换异常处理模块。

定义统一的异常类和错误处理机制，单个文件的失败被转换为 FileOutcome。
"""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import TypeVar
from xml.etree.ElementTree import ParseError

from PIL.Image import DecompressionBombError, UnidentifiedImageError

from .models.outcome import FileOutcome
from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter


logger = get_logger()
T = TypeVar("T")


class OptimizeError(Exception):
    """转换相关错误基类"""

    def __init__(self, message: str, input_path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.input_path = input_path


class FilesystemError(OptimizeError):
    """目录创建或文件读写失败"""

    pass


class UnsupportedFormatError(OptimizeError):
    """不支持的扩展名，按跳过处理"""

    pass


class ConversionError(OptimizeError):
    """解码、缩放或编码失败"""

    pass


class ArgumentError(OptimizeError):
    """参数或配置错误"""

    pass


def handle_image_errors(operation_name: str = "图像转换"):
    """统一的图像处理异常转换装饰器

    把 Pillow、CairoSVG 和系统异常转换为本模块的异常类型。

    Args:
        operation_name: 操作名称，用于异常消息
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except OptimizeError:
                raise
            except UnidentifiedImageError as e:
                raise ConversionError(f"{operation_name} - 无法识别图像: {e}") from e
            except DecompressionBombError as e:
                raise ConversionError(f"{operation_name} - 图像过大: {e}") from e
            except ParseError as e:
                raise ConversionError(f"{operation_name} - SVG 解析失败: {e}") from e
            except PermissionError as e:
                message = MessageFormatter.permission_error(e.filename or "", "读写")
                raise FilesystemError(f"{operation_name} - {message}") from e
            except OSError as e:
                raise FilesystemError(f"{operation_name} - 文件操作失败: {e}") from e
            except (ValueError, TypeError, MemoryError) as e:
                raise ConversionError(f"{operation_name} - 处理失败: {e}") from e

        return wrapper

    return decorator


class ErrorHandler:
    """统一错误处理器

    把单个文件的异常记录为日志并转换为失败的 FileOutcome。
    """

    @staticmethod
    def _log_error(
        operation: str, path: Path, error: Exception, level: str = "error"
    ) -> None:
        """标准化的错误日志记录"""
        log_msg = MessageFormatter.format_error(operation, path, error)
        getattr(logger, level, logger.error)(log_msg)

    @staticmethod
    def _create_failure(input_path: Path, error_msg: str) -> FileOutcome:
        return FileOutcome(
            input_path=input_path,
            output_path=None,
            success=False,
            error=error_msg,
        )

    @staticmethod
    def handle_conversion_error(
        error: Exception, input_path: Path, operation: str = "图像转换"
    ) -> FileOutcome:
        """单文件错误处理，按异常类型选择日志级别

        Args:
            error: 异常对象
            input_path: 输入文件路径
            operation: 操作名称

        Returns:
            FileOutcome: 失败结果，error 为异常消息
        """
        match error:
            case FilesystemError() as fe:
                # 文件在发现后消失或不可读
                ErrorHandler._log_error(operation, input_path, fe, "warning")
                return ErrorHandler._create_failure(input_path, fe.message)
            case OptimizeError() as oe:
                ErrorHandler._log_error(operation, input_path, oe, "error")
                return ErrorHandler._create_failure(input_path, oe.message)
            case _:
                ErrorHandler._log_error(operation, input_path, error)
                return ErrorHandler._create_failure(input_path, str(error))
