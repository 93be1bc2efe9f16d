"""批量 WebP 优化 MCP 服务器。

把目录批量转换暴露为一个 MCP 工具。
"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from .exceptions import ArgumentError, FilesystemError, OptimizeError
from .optimizer import ImageOptimizer
from .utils.logging_helpers import get_logger, setup_logging
from .utils.message_formatter import MessageFormatter


MCPOptimizeResponse = dict[str, Any]


class MCPResponseBuilder:
    """MCP 响应构建器"""

    @staticmethod
    def error(
        message: str,
        error_type: str = "general",
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """构建错误结果。

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 额外的错误详情

        Returns:
            dict: 标准化的错误响应
        """
        result: dict[str, Any] = {
            "success": False,
            "error": message,
            "error_type": error_type,
        }

        if details:
            result["details"] = details

        return result

    @staticmethod
    def validation_error(message: str, field: str | None = None) -> dict[str, Any]:
        details = {"field": field} if field else None
        return MCPResponseBuilder.error(message, "validation", details)

    @staticmethod
    def file_error(message: str, file_path: str | None = None) -> dict[str, Any]:
        details = {"file_path": file_path} if file_path else None
        return MCPResponseBuilder.error(message, "file", details)


logger = get_logger(__name__)

mcp: FastMCP[Any] = FastMCP("批量 WebP 图像优化服务")


def optimize_images_response(
    input_dir: str,
    output_dir: str | None = None,
    quality: int | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
) -> MCPOptimizeResponse:
    """optimize_images 工具的实现，返回 MCP 响应字典

    递归查找输入目录中的 JPEG、PNG、GIF、BMP、TIFF 和 SVG 文件，
    转换后平铺写入输出目录。

    Args:
        input_dir: 输入目录
        output_dir: 输出目录（可选，默认 optimized）
        quality: WebP 质量 1-100（默认 80）
        max_width: 最大宽度（像素）
        max_height: 最大高度（像素）

    Returns:
        dict: 汇总信息和每个文件的结果
    """
    input_path = Path(input_dir)
    if not input_path.is_dir():
        return MCPResponseBuilder.file_error(
            MessageFormatter.directory_not_found(input_dir), input_dir
        )

    overrides: dict[str, Any] = {"input_dir": input_path.resolve()}
    if output_dir is not None:
        overrides["output_dir"] = Path(output_dir).resolve()
    if quality is not None:
        overrides["quality"] = quality
    if max_width is not None or max_height is not None:
        overrides["resize"] = {"width": max_width, "height": max_height}

    try:
        summary = ImageOptimizer(**overrides).run()
    except ArgumentError as e:
        logger.error(MessageFormatter.operation_failed("参数验证", input_dir, e))
        return MCPResponseBuilder.validation_error(e.message)
    except FilesystemError as e:
        logger.error(MessageFormatter.operation_failed("目录准备", input_dir, e))
        return MCPResponseBuilder.file_error(e.message, str(e.input_path or input_dir))
    except OptimizeError as e:
        logger.error(MessageFormatter.operation_failed("批量转换", input_dir, e))
        return MCPResponseBuilder.error(e.message, "processing")

    return {"success": True, "result": summary.to_dict(), "error": None}


@mcp.tool()
def optimize_images(
    input_dir: str,
    output_dir: str | None = None,
    quality: int | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
) -> MCPOptimizeResponse:
    """把目录中的图像批量转换为 WebP

    Args:
        input_dir: 输入目录
        output_dir: 输出目录（可选，默认 optimized）
        quality: WebP 质量 1-100（默认 80）
        max_width: 最大宽度（像素）
        max_height: 最大高度（像素）

    Returns:
        dict: 汇总信息和每个文件的结果
    """
    return optimize_images_response(
        input_dir, output_dir, quality, max_width, max_height
    )


def main() -> None:
    """启动 MCP 服务器"""
    setup_logging()
    logger.info("启动批量 WebP 优化 MCP 服务器")
    mcp.run()


if __name__ == "__main__":
    main()
