"""
Webhook Push Errors - 推送错误类型

所有错误都继承自 WebhookPushError，调用方可以按类型区分处理：
- UnknownPlatformError: 平台标识不在注册表中
- MissingCredentialError: 必需的环境变量缺失或为空
- HttpError: Webhook 返回非 2xx 状态码
- SettingsError: 命令行设置文件格式错误

网络层错误（DNS、连接拒绝、超时等）不做包装，直接由 httpx 抛出。
"""

from typing import Iterable


class WebhookPushError(Exception):
    """Base exception for webhook push errors."""

    pass


class UnknownPlatformError(WebhookPushError):
    """未知平台"""

    def __init__(self, platform: str, supported: Iterable[str]) -> None:
        self.platform = platform
        self.supported = list(supported)
        super().__init__(
            f"Unknown platform: {platform}. "
            f"Supported platforms: {', '.join(self.supported)}"
        )


class MissingCredentialError(WebhookPushError):
    """缺少凭证环境变量

    primary=True 表示平台主凭证（key/token/url），
    primary=False 表示平台额外需要的变量（如 Telegram chat id）。
    """

    def __init__(self, env_key: str, platform: str, primary: bool = True) -> None:
        self.env_key = env_key
        self.platform = platform
        self.primary = primary

        if primary:
            message = (
                f"Missing environment variable: {env_key}\n"
                f"Please set it in your .env file or environment.\n"
                f"Example: {env_key}=your-webhook-key-or-token"
            )
        else:
            message = (
                f"Missing environment variable: {env_key}\n"
                f"This is required for {platform} webhooks."
            )
        super().__init__(message)


class SettingsError(WebhookPushError):
    """命令行设置文件格式错误"""

    pass


class HttpError(WebhookPushError):
    """Webhook 返回非 2xx 状态码

    消息中始终使用原始响应文本，即使响应体是合法 JSON。
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


# 与错误分类名称保持一致的别名
UnknownPlatform = UnknownPlatformError
MissingCredential = MissingCredentialError
