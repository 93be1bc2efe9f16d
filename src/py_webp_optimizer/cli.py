"""命令行入口模块。

从左到右解析参数，组装配置后依次执行目录准备和批量转换。
"""

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import __version__
from .config import get_default_config, update_config
from .engine.batch import process_all_images
from .exceptions import OptimizeError
from .models.constants import ConversionDefaults
from .utils.file_helpers import ensure_directories
from .utils.logging_helpers import get_logger, setup_logging
from .utils.message_formatter import MessageFormatter


logger = get_logger()

USAGE = f"""
🖼️  py-webp-optimizer - 网页图像批量优化工具 🖼️

用法:
  webp-optimizer [输入目录] [输出目录] [选项]

选项:
  --help, -h       显示帮助
  --version, -v    显示版本号
  --quality, -q    WebP 质量 (1-100, 默认: {ConversionDefaults.QUALITY})
  --width, -w      最大宽度（像素）
  --height         最大高度（像素）

示例:
  webp-optimizer                          # 处理 '{ConversionDefaults.INPUT_DIR}/' 到 '{ConversionDefaults.OUTPUT_DIR}/'
  webp-optimizer src/img dist/img         # 自定义目录
  webp-optimizer assets/img web/img -q 90 # 指定质量
  webp-optimizer img output -w 800        # 限制最大宽度
"""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class CliOptions:
    """命令行解析结果"""

    show_help: bool = False
    show_version: bool = False
    input_dir: str | None = None
    output_dir: str | None = None
    quality: int = ConversionDefaults.QUALITY
    resize: dict[str, int] = field(default_factory=dict)

    def to_overrides(self, cwd: Path | None = None) -> dict[str, Any]:
        """转换为配置覆盖项，相对路径按当前目录解析为绝对路径"""
        base = cwd or Path.cwd()
        input_dir = Path(self.input_dir or ConversionDefaults.INPUT_DIR)
        output_dir = Path(self.output_dir or ConversionDefaults.OUTPUT_DIR)
        return {
            "input_dir": (base / input_dir).resolve(),
            "output_dir": (base / output_dir).resolve(),
            "quality": self.quality,
            "resize": dict(self.resize) if self.resize else None,
        }


def _parse_int(token: str | None) -> int | None:
    """解析开头的整数部分，例如 '90px' -> 90，无法解析时返回 None"""
    if token is None:
        return None
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else None


def parse_args(argv: list[str]) -> CliOptions:
    """从左到右解析命令行参数。

    - ``-h`` 总是表示帮助，高度只能用 ``--height`` 指定
    - 质量无法解析或为 0 时回退到默认值
    - 宽高无法解析或不是正数时忽略
    - 第一个非选项参数为输入目录，第二个为输出目录

    Args:
        argv: 不含程序名的参数列表

    Returns:
        CliOptions: 解析结果，遇到帮助或版本选项时立即返回
    """
    options = CliOptions()
    i = 0

    while i < len(argv):
        arg = argv[i]

        match arg:
            case "--help" | "-h":
                options.show_help = True
                return options
            case "--version" | "-v":
                options.show_version = True
                return options
            case "--quality" | "-q":
                i += 1
                value = _parse_int(argv[i] if i < len(argv) else None)
                options.quality = value or ConversionDefaults.QUALITY
            case "--width" | "-w" | "--height":
                i += 1
                raw = argv[i] if i < len(argv) else None
                value = _parse_int(raw)
                axis = "height" if arg == "--height" else "width"
                if value is None or value <= 0:
                    logger.warning(MessageFormatter.validation_error(arg, raw, "忽略"))
                else:
                    options.resize[axis] = value
            case _ if arg.startswith("-"):
                logger.warning(MessageFormatter.validation_error("未知选项", arg, "忽略"))
            case _ if options.input_dir is None:
                options.input_dir = arg
            case _ if options.output_dir is None:
                options.output_dir = arg
            case _:
                logger.warning(MessageFormatter.validation_error("多余参数", arg, "忽略"))

        i += 1

    return options


def main(argv: list[str] | None = None) -> int:
    """命令行主函数

    Returns:
        int: 退出码，正常结束（包括未找到图像或全部失败）为 0，准备阶段出错为 1
    """
    setup_logging()
    options = parse_args(sys.argv[1:] if argv is None else argv)

    if options.show_help:
        print(USAGE)
        return 0

    if options.show_version:
        print(f"py-webp-optimizer {__version__}")
        return 0

    try:
        config = update_config(get_default_config(), options.to_overrides())
        logger.info("📋 配置:\n  " + "\n  ".join(config.describe()))

        ensure_directories(config)
        process_all_images(config)

    except (OptimizeError, OSError) as e:
        print(f"❌ 错误: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """控制台脚本入口"""
    sys.exit(main())
