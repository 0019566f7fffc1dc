"""
Feishu Platform - 飞书群机器人

Webhook: https://open.feishu.cn/open-apis/bot/v2/hook/<TOKEN>
@see https://open.feishu.cn/document/client-docs/bot-v3/add-custom-bot

消息使用 Interactive Card：header 显示标题和颜色，正文为一个 markdown 元素。
"""

from typing import Any, Optional

from src.webhook_push.platforms.base import (
    Platform,
    PlatformSpec,
    PushOptions,
    StatusStyle,
    has_details,
)

WEBHOOK_BASE = "https://open.feishu.cn/open-apis/bot/v2/hook"
DEFAULT_TITLE = "Notification"
DEFAULT_COLOR = "blue"


class FeishuCardBuilder:
    """飞书卡片消息构建器

    帮助构建飞书 Interactive Card 格式的消息。
    """

    @staticmethod
    def create_header(
        title: str,
        color: str = DEFAULT_COLOR,
    ) -> dict[str, Any]:
        """创建卡片头部

        Args:
            title: 标题
            color: 颜色 (blue, green, yellow, red, grey, etc.)

        Returns:
            头部配置
        """
        return {
            "title": {
                "tag": "plain_text",
                "content": title,
            },
            "template": color,
        }

    @staticmethod
    def create_markdown_element(content: str) -> dict[str, Any]:
        """创建 markdown 元素"""
        return {
            "tag": "markdown",
            "content": content,
        }

    @classmethod
    def create_card(
        cls,
        title: str,
        content: str,
        color: str = DEFAULT_COLOR,
    ) -> dict[str, Any]:
        """创建单段 markdown 卡片"""
        return {
            "header": cls.create_header(title, color),
            "elements": [cls.create_markdown_element(content)],
        }


def build_url(token: str, extra: Optional[str] = None) -> str:
    return f"{WEBHOOK_BASE}/{token}"


def format_message(content: str, options: PushOptions) -> dict[str, Any]:
    return {
        "msg_type": "interactive",
        "card": FeishuCardBuilder.create_card(
            title=options.title or DEFAULT_TITLE,
            content=content,
            color=options.color or DEFAULT_COLOR,
        ),
    }


def format_progress(
    task_name: str,
    status: str,
    details: str,
    style: StatusStyle,
    timestamp: str,
) -> str:
    # 状态颜色由卡片 header 体现，正文不带 emoji
    content = f"**{task_name}**\n"
    content += f"Status: {status.upper()}\n"
    if has_details(details):
        content += f"\n{details}\n"
    content += f"\n---\n{timestamp}"
    return content


SPEC = PlatformSpec(
    platform=Platform.FEISHU,
    env_key="WEBHOOK_FEISHU_TOKEN",
    build_url=build_url,
    format_message=format_message,
    format_progress=format_progress,
)
