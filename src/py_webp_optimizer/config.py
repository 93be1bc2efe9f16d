"""统一配置管理模块。

提供运行配置的创建与合并，以及日志默认值。
配置只来自命令行参数或调用方，不读取环境变量和配置文件。
"""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ArgumentError
from .models.optimize_config import OptimizeConfig, ResizeConfig


@dataclass(frozen=True)
class LoggingDefaults:
    """日志相关的默认配置"""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(message)s"
    DEBUG_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


LOGGING_DEFAULTS = LoggingDefaults()


def get_default_config() -> OptimizeConfig:
    """获取默认运行配置"""
    return OptimizeConfig()


def update_config(
    config: OptimizeConfig | None = None,
    overrides: dict[str, Any] | None = None,
    **kwargs: Any,
) -> OptimizeConfig:
    """合并覆盖项，返回新的配置对象。

    逐字段覆盖；``resize`` 整体替换，不做按键合并。
    不做取值范围校验（例如 quality > 100 也会被接受），
    只有类型无法转换时才报错。

    Args:
        config: 基础配置，默认使用 ``get_default_config()``
        overrides: 覆盖项字典
        **kwargs: 以关键字形式给出的覆盖项

    Returns:
        OptimizeConfig: 合并后的新配置

    Raises:
        ArgumentError: 存在未知字段或类型转换失败
    """
    base = config or get_default_config()
    changes = {**(overrides or {}), **kwargs}

    unknown = set(changes) - set(OptimizeConfig.model_fields)
    if unknown:
        raise ArgumentError(f"未知配置项: {', '.join(sorted(unknown))}")

    if "resize" in changes:
        changes["resize"] = _coerce_resize(changes["resize"])

    merged = {
        name: getattr(base, name) for name in OptimizeConfig.model_fields
    } | changes

    try:
        return OptimizeConfig.model_validate(merged)
    except PydanticValidationError as e:
        raise ArgumentError(f"配置无效: {e}") from e


def _coerce_resize(value: Any) -> ResizeConfig | None:
    """把 resize 覆盖项转换为 ResizeConfig"""
    match value:
        case None:
            return None
        case ResizeConfig():
            return value
        case dict():
            try:
                return ResizeConfig(**value)
            except PydanticValidationError as e:
                raise ArgumentError(f"尺寸配置无效: {e}") from e
        case _:
            raise ArgumentError(f"尺寸配置类型无效: {type(value).__name__}")
