#!/usr/bin/env python3
"""Webhook Push Demo.

Sends a plain message followed by a start/complete progress pair to one platform.

Usage:
    python examples/push_demo.py -p slack
"""

import argparse
import asyncio
import logging

from dotenv import load_dotenv

from src.webhook_push import (
    PLATFORMS,
    PushOptions,
    list_configured_platforms,
    push,
    push_progress,
)

logger = logging.getLogger(__name__)


async def run_demo(platform: str) -> None:
    options = PushOptions(platform=platform, title="Webhook Push Demo")

    # 逐条 await，保证消息顺序
    await push("Hello from **webhook-push**", options)
    await push_progress("Demo", "started", "", options)
    await push_progress("Demo", "completed", "2 messages delivered", options)


def main() -> None:
    parser = argparse.ArgumentParser(description="Webhook push demo")
    parser.add_argument("-p", "--platform", choices=PLATFORMS, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    load_dotenv()

    configured = list_configured_platforms()
    platform = args.platform or (configured[0] if configured else None)
    if platform is None:
        logger.error("No platforms configured, run `webhook-push --check` for details")
        raise SystemExit(1)

    logger.info(f"Sending demo messages to {platform}")
    asyncio.run(run_demo(platform))


if __name__ == "__main__":
    main()
