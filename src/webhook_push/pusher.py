"""
Webhook Pusher - 推送入口

push: 发送任意 markdown 内容
push_progress: 发送统一格式的任务进度通知

两者均为协程函数：调用立即返回 awaitable，await 时才发起网络请求。
每次 await 恰好一次出站请求，不重试。

Example:
    await push("Build completed successfully!")
    await push("Deployment started", PushOptions(platform="slack"))
    await push_progress("Build", "completed", "All 42 tests passed")
"""

import dataclasses
import logging
from typing import Any, Optional, Union

import httpx

from src.webhook_push.config.resolver import ConfigSource, resolve
from src.webhook_push.formatters.progress import format_progress
from src.webhook_push.platforms import (
    DEFAULT_PLATFORM,
    Platform,
    PushOptions,
    StatusKind,
    get_platform_spec,
    status_text,
    style_for,
)
from src.webhook_push.transport import send

logger = logging.getLogger(__name__)


async def push(
    content: str,
    options: Optional[PushOptions] = None,
    source: Optional[ConfigSource] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """推送消息到 Webhook 平台

    Args:
        content: 消息内容（支持 markdown）
        options: 推送选项（platform / title / color）
        source: 凭证配置源，默认读取环境变量
        client: 复用的 httpx.AsyncClient

    Returns:
        平台 API 响应

    Raises:
        UnknownPlatformError: 不支持的平台
        MissingCredentialError: 凭证未配置
        HttpError: 非 2xx 响应
    """
    options = options or PushOptions()
    platform = options.platform or DEFAULT_PLATFORM
    config = resolve(platform, source)

    spec = get_platform_spec(platform)
    url = spec.build_url(config.key, config.extra)
    payload = spec.format_message(content, options)

    response = await send(url, payload, client=client)
    logger.info(f"Message sent to {spec.platform.value}")
    return response


async def push_progress(
    task_name: str,
    status: Union[str, StatusKind],
    details: str = "",
    options: Optional[PushOptions] = None,
    source: Optional[ConfigSource] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """推送任务进度通知

    标题固定为 "<task_name> - <status>"，覆盖 options.title。
    飞书卡片颜色取状态颜色。

    Args:
        task_name: 任务名称
        status: started / in_progress / completed / failed / cancelled，
            其他值按 in_progress 样式渲染
        details: 附加说明
        options: 推送选项（同 push）

    Returns:
        平台 API 响应
    """
    options = options or PushOptions()
    platform = options.platform or DEFAULT_PLATFORM
    status = status_text(status)
    style = style_for(status)

    content = format_progress(task_name, status, details, style, platform)

    changes: dict[str, Any] = {"title": f"{task_name} - {status}"}
    if get_platform_spec(platform).platform is Platform.FEISHU:
        changes["color"] = style.color

    return await push(
        content,
        dataclasses.replace(options, **changes),
        source=source,
        client=client,
    )
