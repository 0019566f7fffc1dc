"""
Platform Registry - 平台注册表

平台标识 → (环境变量, URL 构建, 消息格式, 进度模板)。

新增平台只需：在 Platform 枚举中加一项，新建平台模块导出 SPEC，
并登记到 _SPECS。导入时会校验枚举与注册表一一对应。
"""

from types import MappingProxyType
from typing import Mapping, Union

from src.webhook_push.errors import UnknownPlatformError
from src.webhook_push.platforms import dingtalk, feishu, slack, telegram, wecom
from src.webhook_push.platforms.base import (
    DEFAULT_PLATFORM,
    STATUS_STYLES,
    Platform,
    PlatformSpec,
    PushOptions,
    StatusKind,
    StatusStyle,
    status_text,
    style_for,
)

_SPECS: tuple[PlatformSpec, ...] = (
    wecom.SPEC,
    dingtalk.SPEC,
    feishu.SPEC,
    slack.SPEC,
    telegram.SPEC,
)

PLATFORM_REGISTRY: Mapping[Platform, PlatformSpec] = MappingProxyType(
    {spec.platform: spec for spec in _SPECS}
)

if set(PLATFORM_REGISTRY) != set(Platform) or len(_SPECS) != len(Platform):
    raise RuntimeError(
        "Platform registry out of sync with Platform enum: "
        f"{sorted(p.value for p in PLATFORM_REGISTRY)} vs {sorted(p.value for p in Platform)}"
    )

# 只读常量，供 --check 等检查命令使用
PLATFORMS: tuple[str, ...] = tuple(p.value for p in Platform)
ENV_KEYS: Mapping[str, str] = MappingProxyType(
    {p.value: PLATFORM_REGISTRY[p].env_key for p in Platform}
)
ENV_EXTRAS: Mapping[str, str] = MappingProxyType(
    {
        p.value: PLATFORM_REGISTRY[p].extra_env_key
        for p in Platform
        if PLATFORM_REGISTRY[p].extra_env_key
    }
)


def to_platform(platform: Union[str, Platform]) -> Platform:
    """将字符串解析为 Platform

    Raises:
        UnknownPlatformError: 不支持的平台
    """
    try:
        return Platform(platform)
    except ValueError:
        raise UnknownPlatformError(str(platform), PLATFORMS) from None


def get_platform_spec(platform: Union[str, Platform]) -> PlatformSpec:
    """获取平台注册项

    Raises:
        UnknownPlatformError: 不支持的平台
    """
    return PLATFORM_REGISTRY[to_platform(platform)]


__all__ = [
    "DEFAULT_PLATFORM",
    "ENV_EXTRAS",
    "ENV_KEYS",
    "PLATFORMS",
    "PLATFORM_REGISTRY",
    "STATUS_STYLES",
    "Platform",
    "PlatformSpec",
    "PushOptions",
    "StatusKind",
    "StatusStyle",
    "get_platform_spec",
    "status_text",
    "style_for",
    "to_platform",
]
