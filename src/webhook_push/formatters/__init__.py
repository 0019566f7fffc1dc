"""
Message Formatters - 消息格式化器

- format_progress: 任务进度消息
"""

from src.webhook_push.formatters.progress import format_progress, iso_timestamp

__all__ = ["format_progress", "iso_timestamp"]
