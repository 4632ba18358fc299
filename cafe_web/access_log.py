from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from fastapi import Request, Response

logger = logging.getLogger("cafe_web.access")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send ``cafe_web`` log records to stdout as bare lines."""
    root = logging.getLogger("cafe_web")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    return root


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def request_line(request: Request) -> str:
    raw_path = request.scope.get("raw_path")
    path = raw_path.split(b"?", 1)[0].decode("latin-1") if raw_path else request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return f"[{iso_timestamp()}] {request.method} {path}"


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    logger.info(request_line(request))
    return await call_next(request)


__all__ = ["configure_logging", "iso_timestamp", "log_requests", "request_line"]
