"""
HTTP Dispatcher - Webhook 请求发送

发送单个 JSON POST 请求，并按状态码分类响应：
- 2xx: 尝试解析 JSON，解析失败时返回 {"raw": <原始文本>}
- 其他: 抛出 HttpError，消息包含状态码和原始响应文本
- 网络层错误: httpx 异常原样抛出

不做重试，不额外跟随重定向，不限制响应大小。
未显式设置超时，使用 httpx 默认值。
"""

import json
import logging
from typing import Any, Optional

import httpx

from src.webhook_push.errors import HttpError

logger = logging.getLogger(__name__)


def parse_response(status_code: int, text: str) -> Any:
    """按状态码分类响应

    Raises:
        HttpError: 非 2xx 状态码
    """
    if not 200 <= status_code < 300:
        raise HttpError(status_code, text)

    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


async def send(
    url: str,
    payload: dict[str, Any],
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """发送 Webhook 请求

    Args:
        url: Webhook URL（http/https 由 URL 决定）
        payload: 请求体
        client: 复用的 AsyncClient，默认每次调用新建

    Returns:
        解析后的响应体

    Raises:
        HttpError: 非 2xx 状态码
        httpx.TransportError: 网络层错误
    """
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    headers = {
        "Content-Type": "application/json",
        "Content-Length": str(len(body)),
    }

    # URL 中含凭证，日志只记录 host
    host = httpx.URL(url).host
    logger.debug(f"POST {host} ({len(body)} bytes)")

    if client is not None:
        response = await client.post(url, content=body, headers=headers)
    else:
        async with httpx.AsyncClient() as owned_client:
            response = await owned_client.post(url, content=body, headers=headers)

    if not response.is_success:
        logger.warning(f"Webhook {host} returned HTTP {response.status_code}")

    return parse_response(response.status_code, response.text)
