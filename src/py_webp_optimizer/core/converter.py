"""图像转换引擎模块。

单个文件的转换入口：分类来源、解码、缩放、编码为 WebP 并写入输出目录。
"""

from io import BytesIO
from pathlib import Path

from PIL import Image

from ..exceptions import ErrorHandler, UnsupportedFormatError, handle_image_errors
from ..models.optimize_config import OptimizeConfig, ResizeConfig
from ..models.outcome import FileOutcome
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from .formats import FormatProcessor, get_webp_params
from .sources import ImageSource, classify_source


logger = get_logger()


def process_image(file_path: str | Path, config: OptimizeConfig) -> FileOutcome | None:
    """转换单个图像文件。

    扩展名不受支持时跳过并返回 None；其余情况总是返回 FileOutcome，
    转换过程中的任何错误都记录在结果中，不向外抛出。

    Args:
        file_path: 输入文件路径
        config: 运行配置

    Returns:
        FileOutcome | None: 转换结果，跳过时为 None
    """
    input_path = Path(file_path)

    try:
        source = classify_source(input_path, config)
    except UnsupportedFormatError as e:
        logger.warning(e.message)
        return None

    output_path = config.get_output_path(input_path)
    logger.info(MessageFormatter.processing(input_path))

    try:
        outcome = _convert(source, output_path, config)
    except Exception as e:
        return ErrorHandler.handle_conversion_error(e, input_path, "图像转换")

    logger.info(MessageFormatter.optimized(output_path))
    return outcome


@handle_image_errors("图像转换")
def _convert(
    source: ImageSource, output_path: Path, config: OptimizeConfig
) -> FileOutcome:
    """执行解码、缩放、编码和写入"""
    original_size = source.path.stat().st_size

    img = source.load()
    original_dimensions = img.size

    img = FormatProcessor().prepare_for_webp(img)
    if config.should_resize:
        img = _resize_image(img, config.resize)

    save_params = get_webp_params(config.quality, source.alpha_quality)

    buffer = BytesIO()
    img.save(buffer, **save_params)
    data = buffer.getvalue()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)

    return FileOutcome(
        input_path=source.path,
        output_path=output_path,
        success=True,
        error=None,
        source_kind=source.kind,
        original_size=original_size,
        output_size=len(data),
        quality_used=save_params["quality"],
        alpha_quality_used=save_params["alpha_quality"],
        original_dimensions=original_dimensions,
        final_dimensions=img.size,
    )


def _resize_image(img: Image.Image, resize_config: ResizeConfig) -> Image.Image:
    """按边界框缩小图片，保持宽高比，不放大"""
    current_width, current_height = img.size
    max_width = resize_config.width or current_width
    max_height = resize_config.height or current_height

    # 检查是否需要调整
    if current_width <= max_width and current_height <= max_height:
        return img

    ratio = min(max_width / current_width, max_height / current_height)
    new_width = min(current_width, max(1, round(current_width * ratio)))
    new_height = min(current_height, max(1, round(current_height * ratio)))

    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)
