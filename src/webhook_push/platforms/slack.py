"""
Slack Platform - Slack Incoming Webhook

凭证本身就是完整的 Webhook URL，不做拼接。
@see https://api.slack.com/messaging/webhooks
"""

from typing import Any, Optional

from src.webhook_push.platforms.base import (
    Platform,
    PlatformSpec,
    PushOptions,
    StatusStyle,
    has_details,
)


def build_url(url: str, extra: Optional[str] = None) -> str:
    return url


def format_message(content: str, options: PushOptions) -> dict[str, Any]:
    """Slack Block Kit 消息"""
    return {
        "blocks": [
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": content,
                },
            },
        ],
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
        content += f"\n> {details}"
    content += f"\n_{timestamp}_"
    return content


SPEC = PlatformSpec(
    platform=Platform.SLACK,
    env_key="WEBHOOK_SLACK_URL",
    build_url=build_url,
    format_message=format_message,
    format_progress=format_progress,
)
