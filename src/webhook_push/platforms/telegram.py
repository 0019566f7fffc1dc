"""
Telegram Platform - Telegram Bot sendMessage

Webhook: https://api.telegram.org/bot<TOKEN>/sendMessage?chat_id=<CHAT_ID>
@see https://core.telegram.org/bots/api#sendmessage

唯一需要额外环境变量 (chat id) 的平台。
"""

from typing import Any, Optional

from src.webhook_push.platforms.base import (
    Platform,
    PlatformSpec,
    PushOptions,
    StatusStyle,
    has_details,
)

API_BASE = "https://api.telegram.org"


def build_url(token: str, chat_id: Optional[str] = None) -> str:
    return f"{API_BASE}/bot{token}/sendMessage?chat_id={chat_id}"


def format_message(content: str, options: PushOptions) -> dict[str, Any]:
    return {
        "text": content,
        "parse_mode": "Markdown",
    }


def format_progress(
    task_name: str,
    status: str,
    details: str,
    style: StatusStyle,
    timestamp: str,
) -> str:
    content = f"{style.emoji} *{task_name}* - `{status.upper()}`"
    if has_details(details):
        content += f"\n\n{details}"
    content += f"\n\n_{timestamp}_"
    return content


SPEC = PlatformSpec(
    platform=Platform.TELEGRAM,
    env_key="WEBHOOK_TELEGRAM_TOKEN",
    extra_env_key="WEBHOOK_TELEGRAM_CHAT_ID",
    build_url=build_url,
    format_message=format_message,
    format_progress=format_progress,
)
