"""转换配置模型。

定义一次批量转换的运行参数。配置对象不可变，
在批量处理开始前组装完成，之后作为值传给各个操作。
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ConversionDefaults, ImageFormats


class ResizeConfig(BaseModel):
    """尺寸限制配置

    只缩小不放大，省略的方向不受限制。
    """

    model_config = ConfigDict(frozen=True)

    width: int | None = Field(None, gt=0, description="最大宽度")
    height: int | None = Field(None, gt=0, description="最大高度")

    @property
    def is_bounded(self) -> bool:
        """是否至少限制了一个方向"""
        return self.width is not None or self.height is not None

    def describe(self) -> str:
        """形如 800xauto 的描述"""
        width = self.width if self.width is not None else "auto"
        height = self.height if self.height is not None else "auto"
        return f"{width}x{height}"


class OptimizeConfig(BaseModel):
    """批量转换配置"""

    model_config = ConfigDict(frozen=True)

    # 输入输出
    input_dir: Path = Field(
        Path(ConversionDefaults.INPUT_DIR), description="输入目录"
    )
    output_dir: Path = Field(
        Path(ConversionDefaults.OUTPUT_DIR), description="输出目录"
    )

    # 质量设置，不做范围校验，编码时再限制到 1-100
    quality: int = Field(ConversionDefaults.QUALITY, description="WebP 质量")

    # 尺寸设置
    resize: ResizeConfig | None = Field(None, description="尺寸限制")

    # 格式设置
    accepted_extensions: frozenset[str] = Field(
        ImageFormats.ACCEPTED_EXTENSIONS, description="可接受的输入扩展名"
    )
    vector_density: int = Field(
        ConversionDefaults.VECTOR_DENSITY, description="SVG 栅格化密度（DPI）"
    )

    @field_validator("accepted_extensions")
    @classmethod
    def normalize_extensions(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v
        )

    @property
    def should_resize(self) -> bool:
        """是否需要调整尺寸"""
        return self.resize is not None and self.resize.is_bounded

    def accepts(self, path: Path) -> bool:
        """扩展名是否在可接受列表中"""
        return path.suffix.lower() in self.accepted_extensions

    def get_output_path(self, input_path: Path) -> Path:
        """生成输出路径：输出目录 + 同名 .webp 文件，不保留子目录结构"""
        return self.output_dir / f"{input_path.stem}{ImageFormats.TARGET_EXTENSION}"

    def describe(self) -> list[str]:
        """配置摘要，用于命令行输出"""
        return [
            f"输入目录: {self.input_dir}",
            f"输出目录: {self.output_dir}",
            f"WebP 质量: {self.quality}%",
            f"尺寸限制: {self.resize.describe() if self.should_resize else '无'}",
        ]
