"""
Configuration - 配置管理

- resolver: 平台凭证解析 (resolve / is_configured / list_configured_platforms)
- settings: 命令行默认设置
"""

from src.webhook_push.config.resolver import (
    ConfigSource,
    DictConfigSource,
    EnvConfigSource,
    PlatformConfig,
    get_config,
    get_configured_platforms,
    is_configured,
    list_configured_platforms,
    resolve,
)
from src.webhook_push.config.settings import CliSettings

__all__ = [
    "CliSettings",
    "ConfigSource",
    "DictConfigSource",
    "EnvConfigSource",
    "PlatformConfig",
    "get_config",
    "get_configured_platforms",
    "is_configured",
    "list_configured_platforms",
    "resolve",
]
