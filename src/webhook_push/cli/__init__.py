"""
Webhook Push CLI - 命令行工具

webhook-push "message" / --task --status / --check
"""

from src.webhook_push.cli.main import cli

__all__ = ["cli"]
