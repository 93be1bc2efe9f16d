"""Entry point for python -m py_webp_optimizer.

默认运行命令行批量转换。
"""

from .cli import run


if __name__ == "__main__":
    run()
