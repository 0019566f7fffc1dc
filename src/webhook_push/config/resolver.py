"""
Configuration Resolver - 平台凭证解析

按平台读取所需环境变量并校验。每次调用都重新读取配置源，不做缓存：
CI 场景下凭证可能在每次调用前才注入。
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Union

from src.webhook_push.errors import MissingCredentialError, UnknownPlatformError
from src.webhook_push.platforms import Platform, get_platform_spec

logger = logging.getLogger(__name__)


class ConfigSource(Protocol):
    """配置源：按名称返回变量值，不存在时返回 None"""

    def get(self, name: str) -> Optional[str]:
        ...


class EnvConfigSource:
    """进程环境变量配置源"""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class DictConfigSource:
    """基于字典的配置源（测试或程序化调用时使用）"""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)


@dataclass(frozen=True)
class PlatformConfig:
    """平台配置

    Attributes:
        key: 主凭证（key / token / 完整 URL）
        extra: 额外凭证（Telegram chat id）
    """

    key: str
    extra: Optional[str] = None


def resolve(
    platform: Union[str, Platform],
    source: Optional[ConfigSource] = None,
) -> PlatformConfig:
    """解析平台配置

    Args:
        platform: 平台标识
        source: 配置源，默认读取进程环境变量

    Returns:
        PlatformConfig

    Raises:
        UnknownPlatformError: 不支持的平台
        MissingCredentialError: 必需的环境变量缺失或为空
    """
    spec = get_platform_spec(platform)
    source = source or EnvConfigSource()

    key = source.get(spec.env_key)
    if not key:
        raise MissingCredentialError(spec.env_key, spec.platform.value)

    extra = None
    if spec.extra_env_key:
        extra = source.get(spec.extra_env_key)
        if not extra:
            raise MissingCredentialError(
                spec.extra_env_key, spec.platform.value, primary=False
            )

    return PlatformConfig(key=key, extra=extra)


def is_configured(
    platform: Union[str, Platform],
    source: Optional[ConfigSource] = None,
) -> bool:
    """平台是否已配置（不会抛出异常）"""
    try:
        resolve(platform, source)
        return True
    except (UnknownPlatformError, MissingCredentialError) as e:
        logger.debug(f"Platform {getattr(platform, 'value', platform)} not configured: {e}")
        return False


def list_configured_platforms(source: Optional[ConfigSource] = None) -> list[str]:
    """获取所有已配置的平台，按注册表顺序返回"""
    return [p.value for p in Platform if is_configured(p, source)]


# 兼容旧名称
get_config = resolve
get_configured_platforms = list_configured_platforms
