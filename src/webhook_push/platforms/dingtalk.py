"""
DingTalk Platform - 钉钉自定义机器人

Webhook: https://oapi.dingtalk.com/robot/send?access_token=<TOKEN>
@see https://open.dingtalk.com/document/robots/custom-robot-access
"""

from typing import Any, Optional

from src.webhook_push.platforms.base import (
    Platform,
    PlatformSpec,
    PushOptions,
    StatusStyle,
    has_details,
)

WEBHOOK_BASE = "https://oapi.dingtalk.com/robot/send"
DEFAULT_TITLE = "Notification"


def build_url(token: str, extra: Optional[str] = None) -> str:
    return f"{WEBHOOK_BASE}?access_token={token}"


def format_message(content: str, options: PushOptions) -> dict[str, Any]:
    """钉钉 markdown 消息

    title 用于会话列表预览，必填。
    """
    return {
        "msgtype": "markdown",
        "markdown": {
            "title": options.title or DEFAULT_TITLE,
            "text": content,
        },
    }


def format_progress(
    task_name: str,
    status: str,
    details: str,
    style: StatusStyle,
    timestamp: str,
) -> str:
    content = f"### {style.emoji} {task_name}\n\n"
    content += f"**Status:** {status.upper()}\n\n"
    if has_details(details):
        content += f"> {details}\n\n"
    content += f"---\n*{timestamp}*"
    return content


SPEC = PlatformSpec(
    platform=Platform.DINGTALK,
    env_key="WEBHOOK_DINGTALK_TOKEN",
    build_url=build_url,
    format_message=format_message,
    format_progress=format_progress,
)
