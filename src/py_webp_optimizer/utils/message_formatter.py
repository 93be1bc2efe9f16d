"""消息格式化工具模块。

提供统一的进度、错误和汇总消息格式化功能。
"""

from pathlib import Path
from typing import Any


class MessageFormatter:
    """统一的消息格式化器"""

    @staticmethod
    def directory_not_found(directory: str | Path) -> str:
        """目录不存在错误消息"""
        return f"目录不存在: {directory}"

    @staticmethod
    def path_not_directory(path: str | Path) -> str:
        """路径不是目录错误消息"""
        return f"路径不是目录: {path}"

    @staticmethod
    def permission_error(path: str | Path, operation: str = "访问") -> str:
        """权限错误消息"""
        return f"权限错误，无法{operation}: {path}"

    @staticmethod
    def operation_failed(
        operation: str, target: str | Path, error: Exception | None = None
    ) -> str:
        """操作失败消息"""
        msg = f"{operation}失败: {target}"
        if error:
            msg += f" - {error}"
        return msg

    @staticmethod
    def validation_error(field: str, value: Any, reason: str | None = None) -> str:
        """参数验证错误消息"""
        msg = f"参数验证失败 - {field}: {value}"
        if reason:
            msg += f" ({reason})"
        return msg

    @staticmethod
    def format_error(operation: str, path: str | Path, error: Exception) -> str:
        """格式化通用错误消息"""
        return f"{operation}失败 [{path}]: {error}"

    # 进度消息

    @staticmethod
    def directories_ready(input_dir: Path, output_dir: Path) -> str:
        return f"✅ 目录已就绪: {input_dir} 和 {output_dir}"

    @staticmethod
    def processing(path: Path) -> str:
        return f"🔄 正在处理: {path.name}"

    @staticmethod
    def rasterizing(path: Path, density: int) -> str:
        return f"🔄 以 {density} DPI 栅格化 SVG: {path.name}"

    @staticmethod
    def unsupported_format(path: Path) -> str:
        return f"⚠️ 不支持的格式，已跳过: {path.name}"

    @staticmethod
    def optimized(output_path: Path) -> str:
        return f"✅ 已优化: {output_path.name}"

    @staticmethod
    def no_images_found(directory: Path) -> str:
        return f"⚠️ 在 {directory} 中未找到图像"

    @staticmethod
    def images_found(count: int) -> str:
        return f"🔎 找到 {count} 个文件待处理"

    @staticmethod
    def output_collision(output_path: Path, previous: Path, current: Path) -> str:
        return f"⚠️ 输出文件名冲突，{current} 将覆盖 {previous} 的结果: {output_path}"

    @staticmethod
    def batch_summary(succeeded: int, failed: int, output_dir: Path) -> str:
        return (
            "🎉 处理完成:\n"
            f"  ✅ {succeeded} 个图像优化成功\n"
            f"  ❌ {failed} 个图像处理失败\n"
            f"  📁 优化后的图像位于: {output_dir}"
        )
