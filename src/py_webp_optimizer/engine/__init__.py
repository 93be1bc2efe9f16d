"""批量处理引擎模块。"""

from .batch import process_all_images, summarize


__all__ = [
    "process_all_images",
    "summarize",
]
