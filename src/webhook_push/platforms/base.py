"""
Platform Base - 平台定义基础类型

定义平台标识、状态样式以及平台注册项的数据结构。
每个平台模块（wecom、dingtalk 等）提供一个 PlatformSpec，
由 src.webhook_push.platforms 汇总为注册表。
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union


class Platform(str, Enum):
    """支持的 Webhook 平台

    注册表顺序即枚举顺序，list_configured_platforms 等按此顺序返回。
    """

    WECOM = "wecom"
    DINGTALK = "dingtalk"
    FEISHU = "feishu"
    SLACK = "slack"
    TELEGRAM = "telegram"


DEFAULT_PLATFORM = Platform.WECOM


class StatusKind(str, Enum):
    """任务进度状态"""

    STARTED = "started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class StatusStyle:
    """状态样式

    Attributes:
        color: 颜色名称（飞书卡片 header template 使用）
        emoji: 状态图标
        accent: 企业微信 <font color> 取值 (info/warning/comment)
    """

    color: str
    emoji: str
    accent: str


_STATUS_STYLES: dict[StatusKind, StatusStyle] = {
    StatusKind.STARTED: StatusStyle(color="blue", emoji="🚀", accent="info"),
    StatusKind.IN_PROGRESS: StatusStyle(color="yellow", emoji="⏳", accent="warning"),
    StatusKind.COMPLETED: StatusStyle(color="green", emoji="✅", accent="info"),
    StatusKind.FAILED: StatusStyle(color="red", emoji="❌", accent="warning"),
    StatusKind.CANCELLED: StatusStyle(color="grey", emoji="⏹️", accent="comment"),
}

STATUS_STYLES: Mapping[StatusKind, StatusStyle] = MappingProxyType(_STATUS_STYLES)


def status_text(status: Union[str, StatusKind]) -> str:
    """状态的纯文本值，StatusKind 取其 value"""
    if isinstance(status, StatusKind):
        return status.value
    return status


def style_for(status: Union[str, StatusKind]) -> StatusStyle:
    """获取状态样式，未知状态回退到 in_progress"""
    try:
        return STATUS_STYLES[StatusKind(status)]
    except ValueError:
        return STATUS_STYLES[StatusKind.IN_PROGRESS]


@dataclass(frozen=True)
class PushOptions:
    """推送选项

    Attributes:
        platform: 目标平台，None 时使用默认平台
        title: 消息标题（钉钉、飞书使用）
        color: 主题颜色（飞书卡片使用）
    """

    platform: Optional[str] = None
    title: Optional[str] = None
    color: Optional[str] = None


UrlBuilder = Callable[[str, Optional[str]], str]
MessageFormatter = Callable[[str, PushOptions], dict[str, Any]]
ProgressTemplate = Callable[[str, str, str, StatusStyle, str], str]


@dataclass(frozen=True)
class PlatformSpec:
    """平台注册项

    环境变量、URL 构建、消息格式、进度模板四者必须同时存在。

    Attributes:
        platform: 平台标识
        env_key: 主凭证环境变量名
        build_url: (key, extra) -> webhook URL
        format_message: (content, options) -> 请求体
        format_progress: (task_name, status, details, style, timestamp) -> 消息内容
        extra_env_key: 额外必需的环境变量名（仅 Telegram）
    """

    platform: Platform
    env_key: str
    build_url: UrlBuilder
    format_message: MessageFormatter
    format_progress: ProgressTemplate
    extra_env_key: Optional[str] = None


def has_details(details: Optional[str]) -> bool:
    """details 为空或仅含空白时不渲染详情块"""
    return bool(details and details.strip())
