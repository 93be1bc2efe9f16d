"""测试配置文件。

提供测试所需的fixtures和配置。
"""

import tempfile
from pathlib import Path

import pytest
from PIL import Image, ImageDraw


SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}">'
    '<rect x="{inset}" y="{inset}" width="{inner}" height="{inner}" fill="#ff0000"/>'
    "</svg>"
)


def make_image(
    path: Path,
    size: tuple[int, int] = (100, 100),
    mode: str = "RGB",
    color: str | tuple[int, ...] = "white",
) -> Path:
    """生成带少量图案的测试图片，格式由扩展名决定"""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new(mode, size, color=color)
    if mode in ("RGB", "RGBA"):
        draw = ImageDraw.Draw(img)
        width, height = size
        draw.rectangle([0, 0, width // 2, height // 2], fill=(30, 120, 200))
    img.save(path)
    return path


def make_svg(path: Path, size: int = 10) -> Path:
    """生成中间有红色方块、四周透明的 SVG"""
    path.parent.mkdir(parents=True, exist_ok=True)
    inset = size // 5
    path.write_text(SVG_TEMPLATE.format(size=size, inset=inset, inner=size - 2 * inset))
    return path


@pytest.fixture
def temp_dir():
    """临时目录fixture"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def input_dir(temp_dir: Path) -> Path:
    directory = temp_dir / "images"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    """输出目录fixture，未创建"""
    return temp_dir / "optimized"


def create_config(**kwargs):
    """在默认配置基础上创建 OptimizeConfig"""
    from py_webp_optimizer.config import update_config

    return update_config(None, kwargs)
