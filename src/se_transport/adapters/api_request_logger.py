"""Utility for logging outgoing API requests when TRANSPORT_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_PARAMS = {"accessid", "key", "api_key", "apikey"}
SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via TRANSPORT_LOG_REQUESTS."""
    return os.getenv("TRANSPORT_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Copy of query parameters with API keys masked."""
    if not params:
        return {}
    return {k: REDACTED if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with (redacted) query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(redact_params(params).items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if TRANSPORT_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional, API keys are redacted).
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]

    if headers:
        safe_headers = {
            k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()
        }
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
