"""转换结果模型。

定义单个文件的转换结果和批量汇总。
"""

from pathlib import Path
from typing import Any

from humanize import naturalsize
from pydantic import BaseModel, ConfigDict, Field


class BaseResult(BaseModel):
    """结果基类，包含通用字段和方法"""

    success: bool = Field(description="是否成功")
    error: str | None = Field(None, description="错误信息")

    def is_successful(self) -> bool:
        """检查是否成功"""
        return self.success and self.error is None

    @staticmethod
    def format_size(size_bytes: int) -> str:
        """格式化文件大小为人类可读格式"""
        return naturalsize(size_bytes, binary=True)


class FileOutcome(BaseResult):
    """单个文件的转换结果

    成功时 output_path 有值，失败时 error 有值。跳过的文件不产生结果。
    """

    model_config = ConfigDict(frozen=True)

    input_path: Path = Field(description="输入文件路径")
    output_path: Path | None = Field(None, description="输出文件路径，仅成功时存在")

    # 处理信息
    source_kind: str | None = Field(None, description="来源类型 raster/vector")
    original_size: int = Field(0, description="原始文件大小（字节）")
    output_size: int = Field(0, description="输出文件大小（字节）")
    quality_used: int | None = Field(None, description="使用的质量值")
    alpha_quality_used: int | None = Field(None, description="透明通道质量")
    original_dimensions: tuple[int, int] | None = Field(None, description="原始尺寸")
    final_dimensions: tuple[int, int] | None = Field(None, description="最终尺寸")

    @property
    def was_resized(self) -> bool:
        return (
            self.original_dimensions is not None
            and self.final_dimensions is not None
            and self.original_dimensions != self.final_dimensions
        )

    def get_size_saved(self) -> int:
        """节省的字节数"""
        return max(0, self.original_size - self.output_size)

    def get_compression_ratio(self) -> float:
        """压缩比例（百分比）"""
        if self.original_size == 0:
            return 0.0
        return (self.get_size_saved() / self.original_size) * 100

    def get_summary(self) -> str:
        """转换结果摘要"""
        if not self.success:
            return f"失败: {self.error}"

        return (
            f"{self.format_size(self.original_size)} → "
            f"{self.format_size(self.output_size)} "
            f"({self.get_compression_ratio():.1f}% 压缩)"
        )


class BatchSummary(BaseModel):
    """批量处理汇总，由结果序列推导，不单独保存"""

    output_dir: Path = Field(description="输出目录")
    outcomes: list[FileOutcome] = Field(default_factory=list, description="各文件结果")

    def get_successful_items(self) -> list[FileOutcome]:
        return [r for r in self.outcomes if r.success]

    def get_failed_items(self) -> list[FileOutcome]:
        return [r for r in self.outcomes if not r.success]

    def get_total_count(self) -> int:
        return len(self.outcomes)

    def get_success_count(self) -> int:
        return len(self.get_successful_items())

    def get_failure_count(self) -> int:
        return len(self.get_failed_items())

    def get_success_rate(self) -> float:
        """获取成功率（百分比）"""
        total = self.get_total_count()
        if total == 0:
            return 0.0
        return (self.get_success_count() / total) * 100

    def get_total_size_saved(self) -> int:
        """总节省大小"""
        return sum(r.get_size_saved() for r in self.outcomes if r.success)

    def get_summary(self) -> str:
        """批量处理摘要"""
        return (
            f"成功 {self.get_success_count()} 个, "
            f"失败 {self.get_failure_count()} 个, "
            f"总节省 {BaseResult.format_size(self.get_total_size_saved())}, "
            f"输出目录: {self.output_dir}"
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为可序列化的字典"""
        return {
            "output_dir": str(self.output_dir),
            "total_files": self.get_total_count(),
            "successful_files": self.get_success_count(),
            "failed_files": self.get_failure_count(),
            "success_rate": self.get_success_rate(),
            "total_size_saved": self.get_total_size_saved(),
            "summary": self.get_summary(),
            "results": [
                {
                    "input_path": str(r.input_path),
                    "output_path": str(r.output_path) if r.output_path else None,
                    "success": r.success,
                    "error": r.error,
                }
                for r in self.outcomes
            ],
        }
