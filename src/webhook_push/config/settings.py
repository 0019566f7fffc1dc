"""
CLI Settings - 命令行默认设置

只影响命令行工具的默认值，不参与凭证解析。
加载顺序：内置默认值 < YAML 文件 < 环境变量。
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from src.webhook_push.errors import SettingsError
from src.webhook_push.platforms import DEFAULT_PLATFORM, to_platform

DEFAULT_CONFIG_PATH = (
    Path(__file__).parent.parent.parent.parent / "config" / "webhook_push.yaml"
)


@dataclass
class CliSettings:
    """命令行默认设置

    Attributes:
        default_platform: 未指定 -p 时使用的平台
        default_title: 未指定 --title 时使用的标题
        log_level: 日志级别
    """

    default_platform: str = DEFAULT_PLATFORM.value
    default_title: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CliSettings":
        """从字典创建设置

        Raises:
            SettingsError: 顶层不是映射
            UnknownPlatformError: default_platform 不是支持的平台
        """
        if not isinstance(data, dict):
            raise SettingsError(
                f"Settings must be a mapping, got {type(data).__name__}"
            )

        settings = cls()
        if "default_platform" in data:
            settings.default_platform = to_platform(data["default_platform"]).value
        settings.default_title = data.get("default_title", settings.default_title)
        settings.log_level = str(data.get("log_level", settings.log_level)).upper()
        return settings

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CliSettings":
        """从 YAML 文件加载设置"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        try:
            return cls.from_dict(data)
        except SettingsError as e:
            raise SettingsError(f"{path}: {e}") from None

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "CliSettings":
        """加载设置

        未指定路径时读取 config/webhook_push.yaml（存在时），
        WEBHOOK_DEFAULT_PLATFORM 环境变量优先于 YAML。
        """
        if path is not None:
            settings = cls.from_yaml(path)
        elif DEFAULT_CONFIG_PATH.exists():
            settings = cls.from_yaml(DEFAULT_CONFIG_PATH)
        else:
            settings = cls()

        env_platform = os.getenv("WEBHOOK_DEFAULT_PLATFORM")
        if env_platform:
            settings.default_platform = to_platform(env_platform).value

        return settings
