"""
Progress Formatter - 进度消息格式化

各平台模板只在 markdown 语法上不同（粗体/斜体、引用、标题级别），
信息内容一致：任务名、大写状态、可选详情、时间戳。
"""

from datetime import datetime, timezone
from typing import Optional, Union

from src.webhook_push.platforms import (
    Platform,
    StatusKind,
    StatusStyle,
    get_platform_spec,
    status_text,
    style_for,
)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC 时间戳，毫秒精度，如 2024-01-15T08:30:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_progress(
    task_name: str,
    status: Union[str, StatusKind],
    details: str,
    style: Optional[StatusStyle],
    platform: Union[str, Platform],
) -> str:
    """格式化进度消息

    Args:
        task_name: 任务名称
        status: 状态文本，原样大写输出（未知状态也照常渲染）
        details: 详情，为空或空白时不渲染
        style: 状态样式，None 时按 status 查表
        platform: 目标平台

    Returns:
        消息内容

    Raises:
        UnknownPlatformError: 不支持的平台
    """
    spec = get_platform_spec(platform)
    status = status_text(status)
    style = style or style_for(status)
    return spec.format_progress(task_name, status, details or "", style, iso_timestamp())
