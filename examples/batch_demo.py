#!/usr/bin/env python3
"""批量 WebP 优化演示脚本。

展示 py_webp_optimizer 库的核心功能，包括：
- 单文件转换
- 带尺寸限制的整批转换
- SVG 栅格化
"""

import shutil
from pathlib import Path

from PIL import Image, ImageDraw

from py_webp_optimizer import FileOutcome, ImageOptimizer
from py_webp_optimizer.utils.logging_helpers import setup_logging


def get_demo_dir(subdir: str = "") -> Path:
    """获取演示目录 - 使用项目的 tmp 目录"""
    project_root = Path(__file__).parent.parent
    demo_dir = project_root / "tmp" / "examples"
    if subdir:
        demo_dir = demo_dir / subdir
    demo_dir.mkdir(parents=True, exist_ok=True)
    return demo_dir


def create_sample_images(directory: Path) -> None:
    """生成演示用的素材"""
    photo = Image.new("RGB", (2000, 1000), color="white")
    draw = ImageDraw.Draw(photo)
    for i in range(40):
        x, y = (i * 50) % 2000, (i * 25) % 1000
        draw.rectangle([x, y, x + 120, y + 80], fill=(i * 6 % 256, 90, 200))
    photo.save(directory / "photo.jpg", quality=95)

    Image.new("RGBA", (50, 50), color=(255, 0, 0, 128)).save(directory / "icon.png")

    (directory / "logo.svg").write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64">'
        '<circle cx="32" cy="32" r="24" fill="#0a7"/></svg>'
    )
    (directory / "README.txt").write_text("不会被处理")


def print_outcome(outcome: FileOutcome | None) -> None:
    if outcome is None:
        print("  ⏭️ 已跳过")
        return
    print(f"  {outcome.input_path.name}: {outcome.get_summary()}")


def main() -> None:
    setup_logging()

    input_dir = get_demo_dir("input")
    output_dir = get_demo_dir("output")
    shutil.rmtree(output_dir)
    create_sample_images(input_dir)

    print("\n=== 单文件转换 ===")
    optimizer = ImageOptimizer(input_dir=input_dir, output_dir=output_dir)
    print_outcome(optimizer.process_image(input_dir / "photo.jpg"))
    print_outcome(optimizer.process_image(input_dir / "README.txt"))

    print("\n=== 整批转换（最大宽度 500，质量 90）===")
    optimizer.update_config(quality=90, resize={"width": 500})
    summary = optimizer.run()
    for outcome in summary.outcomes:
        print_outcome(outcome)
        if outcome.final_dimensions:
            print(f"    尺寸: {outcome.original_dimensions} → {outcome.final_dimensions}")

    print(f"\n📊 {summary.get_summary()}")


if __name__ == "__main__":
    main()
