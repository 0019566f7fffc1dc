"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。

示例：
  webhook-push "Build completed successfully!"
  webhook-push -p slack "Deployment started"
  webhook-push -t Build -s completed -d "All 42 tests passed"
  webhook-push --check
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click
import httpx
import yaml
from dotenv import load_dotenv

from src.webhook_push import __version__
from src.webhook_push.config import (
    CliSettings,
    EnvConfigSource,
    is_configured,
    list_configured_platforms,
)
from src.webhook_push.errors import WebhookPushError
from src.webhook_push.platforms import ENV_EXTRAS, ENV_KEYS, PLATFORMS, PushOptions, StatusKind
from src.webhook_push.pusher import push, push_progress

logger = logging.getLogger(__name__)

STATUS_CHOICES = [s.value for s in StatusKind]

SETUP_LINKS = {
    "wecom": "https://developer.work.weixin.qq.com/document/path/91770",
    "dingtalk": "https://open.dingtalk.com/document/robots/custom-robot-access",
    "feishu": "https://open.feishu.cn/document/client-docs/bot-v3/add-custom-bot",
    "slack": "https://api.slack.com/messaging/webhooks",
    "telegram": "https://core.telegram.org/bots/api",
}


def _print_check() -> None:
    """打印各平台配置状态"""
    source = EnvConfigSource()

    click.echo()
    click.echo("Webhook Configuration Status:")
    click.echo("─" * 40)

    for platform, env_key in ENV_KEYS.items():
        symbol = "✓" if is_configured(platform, source) else "✗"
        env_names = env_key
        if platform in ENV_EXTRAS:
            env_names += f", {ENV_EXTRAS[platform]}"
        click.echo(f"  {symbol} {platform:<12} {env_names}")

    click.echo("─" * 40)
    configured = list_configured_platforms(source)
    if configured:
        click.echo(f"\nReady to use: {', '.join(configured)}")
    else:
        click.echo(
            "\n⚠ No platforms configured. Set environment variables or create a .env file."
        )
        click.echo("  Setup guides:")
        for platform, link in SETUP_LINKS.items():
            click.echo(f"    {platform:<10} {link}")
    click.echo()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("message", nargs=-1)
@click.option(
    "--platform",
    "-p",
    type=click.Choice(PLATFORMS),
    default=None,
    help="目标平台（默认 wecom，可通过配置文件或 WEBHOOK_DEFAULT_PLATFORM 修改）",
)
@click.option("--task", "-t", default=None, help="任务名称（进度通知）")
@click.option(
    "--status",
    "-s",
    type=click.Choice(STATUS_CHOICES),
    default=None,
    help="任务状态：started, in_progress, completed, failed, cancelled",
)
@click.option("--details", "-d", default="", help="附加说明")
@click.option("--title", default=None, help="消息标题（钉钉、飞书使用）")
@click.option("--check", is_flag=True, help="检查各平台配置状态")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML 设置文件路径",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=".env 文件路径（默认当前目录下的 .env）",
)
@click.option("--verbose", "-v", is_flag=True, help="显示详细日志")
@click.version_option(version=__version__, prog_name="webhook-push")
def cli(
    message: tuple[str, ...],
    platform: Optional[str],
    task: Optional[str],
    status: Optional[str],
    details: str,
    title: Optional[str],
    check: bool,
    config_path: Optional[Path],
    env_file: Optional[Path],
    verbose: bool,
) -> None:
    """跨平台 Webhook 通知工具

    支持 WeCom、DingTalk、Feishu、Slack、Telegram。

    \b
    环境变量：
      WEBHOOK_WECOM_KEY           WeCom webhook key
      WEBHOOK_DINGTALK_TOKEN      DingTalk robot access token
      WEBHOOK_FEISHU_TOKEN        Feishu bot webhook token
      WEBHOOK_SLACK_URL           Slack incoming webhook URL (full URL)
      WEBHOOK_TELEGRAM_TOKEN      Telegram bot token
      WEBHOOK_TELEGRAM_CHAT_ID    Telegram chat ID (required for Telegram)

    \b
    示例：
      webhook-push "Build completed successfully!"
      webhook-push -p slack "Deployment started"
      webhook-push -t "Build" -s started
      webhook-push -t "Build" -s completed -d "All 42 tests passed"
    """
    # .env 中的变量不覆盖已有环境变量
    load_dotenv(env_file or Path.cwd() / ".env")

    try:
        settings = CliSettings.load(config_path)
    except (WebhookPushError, yaml.YAMLError) as e:
        click.echo(f"Error: invalid settings: {e}", err=True)
        raise SystemExit(1)

    # 配置日志
    log_level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if check:
        _print_check()
        return

    options = PushOptions(
        platform=platform or settings.default_platform,
        title=title or settings.default_title,
    )

    try:
        if task:
            if not status:
                click.echo("Error: --status (-s) is required for progress notifications", err=True)
                click.echo(f"Valid statuses: {', '.join(STATUS_CHOICES)}", err=True)
                raise SystemExit(1)

            click.echo(f"Sending progress notification to {options.platform}...")
            asyncio.run(push_progress(task, status, details, options))
            click.echo("✓ Notification sent successfully")
            return

        text = " ".join(message)
        if not text:
            click.echo("Error: No message provided", err=True)
            click.echo('Usage: webhook-push "Your message here"', err=True)
            click.echo("       webhook-push --help for more options", err=True)
            raise SystemExit(1)

        click.echo(f"Sending message to {options.platform}...")
        asyncio.run(push(text, options))
        click.echo("✓ Message sent successfully")

    except (WebhookPushError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Push failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
