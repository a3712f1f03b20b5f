"""Single-URL HTTP health checks."""

from __future__ import annotations

import http.client
import time
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class Result:
    """Outcome of one health check. ``response_time`` is in seconds."""

    url: str
    status: int = 0
    response_time: float = 0.0
    error: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    details: dict[str, Any] = field(default_factory=dict)
    is_slow: bool = False


class Checker:
    """Performs GET health checks against one URL; times are held in seconds."""

    def __init__(self, url: str, timeout_seconds: int, slow_threshold_ms: int) -> None:
        self.url = url
        self.timeout = float(timeout_seconds)
        self.slow_threshold = slow_threshold_ms / 1000.0

    def ping(self) -> Result:
        """Request the URL once and describe what happened."""
        started = time.monotonic()
        result = Result(url=self.url)

        try:
            request = urllib.request.Request(self.url, method="GET")
        except ValueError as exc:
            result.error = f"failed to create request: {exc}"
            return result

        scheme = urllib.parse.urlsplit(self.url).scheme.lower()
        if scheme not in ("http", "https"):
            result.error = f'request failed: unsupported protocol scheme "{scheme}"'
            return result

        try:
            response = urllib.request.urlopen(
                request, timeout=self.timeout if self.timeout > 0 else None
            )
        except urllib.error.HTTPError as exc:
            response = exc
        except (OSError, http.client.HTTPException, ValueError) as exc:
            result.error = f"request failed: {exc}"
            return result

        with response:
            status = response.getcode()
            result.status = status
            result.response_time = time.monotonic() - started
            length = response.headers.get("Content-Length", "").strip()
            result.details["content_length"] = int(length) if length.isdigit() else -1
            result.details["content_type"] = response.headers.get("Content-Type", "")
            result.is_slow = result.response_time > self.slow_threshold
            if status >= 400:
                result.error = f"HTTP {status}: {status} {response.reason}"

        return result