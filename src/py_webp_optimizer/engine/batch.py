"""批量处理器模块。

按发现顺序逐个转换输入目录中的文件，并汇总结果。
"""

from pathlib import Path

from ..core.converter import process_image
from ..models.optimize_config import OptimizeConfig
from ..models.outcome import BatchSummary, FileOutcome
from ..utils.file_helpers import find_files
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter


logger = get_logger()


def process_all_images(config: OptimizeConfig) -> list[FileOutcome]:
    """处理输入目录中的所有文件

    严格串行，按发现顺序处理；单个文件失败不影响后续文件。
    未找到文件时直接返回空列表，不触碰输出目录。

    Args:
        config: 运行配置

    Returns:
        list[FileOutcome]: 未被跳过的文件的结果，顺序与发现顺序一致
    """
    files = find_files(config.input_dir, exclude_dirs=_nested_output_dirs(config))

    if not files:
        logger.info(MessageFormatter.no_images_found(config.input_dir))
        return []

    logger.info(MessageFormatter.images_found(len(files)))

    outcomes: list[FileOutcome] = []
    written: dict[Path, Path] = {}

    for file_path in files:
        outcome = process_image(file_path, config)
        if outcome is None:
            continue

        if outcome.success and outcome.output_path is not None:
            _check_collision(written, outcome)
        outcomes.append(outcome)

    summary = summarize(outcomes, config.output_dir)
    logger.info(
        MessageFormatter.batch_summary(
            summary.get_success_count(),
            summary.get_failure_count(),
            summary.output_dir,
        )
    )

    return outcomes


def summarize(outcomes: list[FileOutcome], output_dir: Path) -> BatchSummary:
    """根据结果序列计算汇总"""
    return BatchSummary(output_dir=output_dir, outcomes=list(outcomes))


def _nested_output_dirs(config: OptimizeConfig) -> list[Path]:
    """输出目录位于输入目录内部时将其排除，避免重复处理已生成的文件"""
    input_dir = config.input_dir.resolve()
    output_dir = config.output_dir.resolve()

    if output_dir != input_dir and output_dir.is_relative_to(input_dir):
        return [output_dir]
    return []


def _check_collision(written: dict[Path, Path], outcome: FileOutcome) -> None:
    """记录输出路径，发现同名覆盖时给出警告（后写入者生效）"""
    output_path = outcome.output_path.resolve()
    previous = written.get(output_path)
    if previous is not None and previous != outcome.input_path:
        logger.warning(
            MessageFormatter.output_collision(
                outcome.output_path, previous, outcome.input_path
            )
        )
    written[output_path] = outcome.input_path
