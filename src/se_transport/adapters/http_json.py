"""Shared GET-and-decode helper for the provider HTTP clients."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from se_transport.adapters.api_request_logger import log_api_request
from se_transport.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


async def fetch_text(
    session: "ClientSession",
    url: str,
    provider: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 10,
) -> str:
    """GET a URL and return the body, raising UpstreamError on any failure."""
    log_api_request("GET", url, params=params, headers=headers)
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    try:
        async with session.get(url, params=params, headers=headers, timeout=timeout) as response:
            body = await response.text()
            if response.status != 200:
                logger.warning(f"{provider} API returned status {response.status}: {body[:200]}")
                raise UpstreamError(f"{provider} API error", status_code=response.status, body=body)
            return body
    except asyncio.TimeoutError as e:
        raise UpstreamError(f"{provider} API timed out after {timeout_seconds}s") from e
    except aiohttp.ClientError as e:
        raise UpstreamError(f"{provider} API request failed: {e}") from e


async def fetch_json(
    session: "ClientSession",
    url: str,
    provider: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 10,
) -> Any:
    """GET a URL and decode its JSON body, raising UpstreamError on any failure."""
    log_api_request("GET", url, params=params, headers=headers)
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    try:
        async with session.get(url, params=params, headers=headers, timeout=timeout) as response:
            if response.status != 200:
                body = await response.text()
                logger.warning(f"{provider} API returned status {response.status}: {body[:200]}")
                raise UpstreamError(f"{provider} API error", status_code=response.status, body=body)
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise UpstreamError(f"failed to decode {provider} response: {e}") from e
    except asyncio.TimeoutError as e:
        raise UpstreamError(f"{provider} API timed out after {timeout_seconds}s") from e
    except aiohttp.ClientError as e:
        raise UpstreamError(f"{provider} API request failed: {e}") from e
