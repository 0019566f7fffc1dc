"""
WeCom Platform - 企业微信群机器人

Webhook: https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=<KEY>
@see https://developer.work.weixin.qq.com/document/path/91770
"""

from typing import Any, Optional

from src.webhook_push.platforms.base import (
    Platform,
    PlatformSpec,
    PushOptions,
    StatusStyle,
    has_details,
)

WEBHOOK_BASE = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send"


def build_url(key: str, extra: Optional[str] = None) -> str:
    return f"{WEBHOOK_BASE}?key={key}"


def format_message(content: str, options: PushOptions) -> dict[str, Any]:
    """企业微信 markdown 消息"""
    return {
        "msgtype": "markdown",
        "markdown": {
            "content": content,
        },
    }


def format_progress(
    task_name: str,
    status: str,
    details: str,
    style: StatusStyle,
    timestamp: str,
) -> str:
    # 状态文字用 <font color> 着色
    content = f'**{task_name}** - <font color="{style.accent}">{status.upper()}</font>'
    if has_details(details):
        content += f"\n> {details}"
    content += f"\n> Time: {timestamp}"
    return content


SPEC = PlatformSpec(
    platform=Platform.WECOM,
    env_key="WEBHOOK_WECOM_KEY",
    build_url=build_url,
    format_message=format_message,
    format_progress=format_progress,
)
