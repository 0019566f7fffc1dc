"""
Webhook Push - 跨平台 Webhook 通知

支持的平台：
- WeCom (企业微信) - 默认
- DingTalk (钉钉)
- Feishu (飞书)
- Slack
- Telegram

模块：
- platforms: 平台注册表（URL 构建、消息格式、进度模板）
- config: 凭证解析与命令行设置
- formatters: 进度消息格式化
- transport: HTTP 请求发送
- pusher: push / push_progress 入口
- cli: 命令行工具
"""

from src.webhook_push.config.resolver import (
    get_config,
    get_configured_platforms,
    is_configured,
    list_configured_platforms,
    resolve,
)
from src.webhook_push.errors import (
    HttpError,
    MissingCredentialError,
    SettingsError,
    UnknownPlatformError,
    WebhookPushError,
)
from src.webhook_push.platforms import (
    DEFAULT_PLATFORM,
    ENV_EXTRAS,
    ENV_KEYS,
    PLATFORMS,
    STATUS_STYLES,
    Platform,
    PushOptions,
    StatusKind,
)
from src.webhook_push.pusher import push, push_progress

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_PLATFORM",
    "ENV_EXTRAS",
    "ENV_KEYS",
    "PLATFORMS",
    "STATUS_STYLES",
    "HttpError",
    "MissingCredentialError",
    "Platform",
    "PushOptions",
    "SettingsError",
    "StatusKind",
    "UnknownPlatformError",
    "WebhookPushError",
    "get_config",
    "get_configured_platforms",
    "is_configured",
    "list_configured_platforms",
    "push",
    "push_progress",
    "resolve",
]
