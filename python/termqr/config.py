from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dacite.config import Config
from dacite.core import from_dict
from dacite.exceptions import DaciteError
from loguru import logger as log

from .exceptions import ConfigError

ERROR_CORRECTION_LEVELS = ("L", "M", "Q", "H")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
ENV_PREFIX = "TERMQR_"


def bool_hook(source: Union[bool, str, int]) -> bool:
    if isinstance(source, str):
        value = source.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off", ""):
            return False
        raise ValueError(f"无法解析布尔值: {source!r}")
    return bool(source)


def int_hook(source: Union[int, str]) -> int:
    if isinstance(source, bool):
        raise ValueError(f"预期为整数: {source!r}")
    return int(source)


@dataclass
class RenderConfig:
    """二维码生成与渲染配置"""

    error_correction: str = "M"
    """纠错等级，可选 L / M / Q / H"""
    border: int = 4
    """静区宽度（模块数）"""
    version: Optional[int] = None
    """二维码版本 (1-40)，`None` 表示根据数据自动选择"""
    invert: bool = False
    """反色，适用于深色背景的终端"""
    log_level: str = "WARNING"
    """日志等级"""

    def __post_init__(self) -> None:
        self.error_correction = self.error_correction.upper()
        self.log_level = self.log_level.upper()
        if self.error_correction not in ERROR_CORRECTION_LEVELS:
            raise ConfigError(f"不支持的纠错等级: {self.error_correction}")
        if self.border < 0:
            raise ConfigError(f"静区宽度不能为负: {self.border}")
        if self.version is not None and not 1 <= self.version <= 40:
            raise ConfigError(f"二维码版本需在 1 到 40 之间: {self.version}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"未知的日志等级: {self.log_level}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RenderConfig:
        try:
            return from_dict(cls, dict(data), Config(type_hooks={bool: bool_hook, int: int_hook}, strict=True))
        except (DaciteError, ValueError, TypeError) as err:
            if isinstance(err, ConfigError):
                raise
            raise ConfigError(f"配置不合法: {err}") from err

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike[str]]) -> RenderConfig:
        return cls.from_dict(read_config_file(path))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> RenderConfig:
        return cls.from_dict(env_overrides(os.environ if environ is None else environ))

    def merge(self, overrides: Mapping[str, Any]) -> RenderConfig:
        """返回以 `overrides` 覆盖后的新配置，值为 `None` 的项会被忽略"""
        data = asdict(self)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).from_dict(data)


def read_config_file(path: Union[str, os.PathLike[str]]) -> dict[str, Any]:
    config_path = Path(path)
    log.debug("读取配置文件 {}", config_path)
    try:
        content = json.loads(config_path.read_text("utf-8"))
    except OSError as err:
        raise ConfigError(f"无法读取配置文件 {config_path}: {err}") from err
    except json.JSONDecodeError as err:
        raise ConfigError(f"配置文件 {config_path} 不是合法的 JSON: {err}") from err
    if not isinstance(content, dict):
        raise ConfigError(f"配置文件 {config_path} 的顶层必须是对象")
    return content


def env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    """从 `TERMQR_*` 环境变量中提取配置项"""
    result: dict[str, Any] = {}
    for name in RenderConfig.__dataclass_fields__:
        key = ENV_PREFIX + name.upper()
        if key not in environ:
            continue
        value: Optional[str] = environ[key]
        if name == "version" and not value:
            value = None
        result[name] = value
    return result


def load_config(
    path: Union[str, os.PathLike[str], None] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> RenderConfig:
    """按 默认值 -> 配置文件 -> 环境变量 -> `overrides` 的顺序合并配置"""
    config = RenderConfig()
    if path is not None:
        config = config.merge(read_config_file(path))
    config = config.merge(env_overrides(os.environ if environ is None else environ))
    if overrides:
        config = config.merge(overrides)
    return config
