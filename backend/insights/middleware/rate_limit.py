from __future__ import annotations

import time
from collections import defaultdict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

_EXEMPT_PATHS: frozenset[str] = frozenset({"/health", "/health/detail", "/openapi.json", "/docs", "/redoc"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP sliding-window limit on feedback and report requests."""

    def __init__(self, app, max_requests: int = 60, window_seconds: int = 60):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: dict[str, list[float]] = defaultdict(list)

    async def dispatch(self, request: Request, call_next):
        if request.url.path in _EXEMPT_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        window_start = now - self.window_seconds

        recent = [t for t in self._requests[client_ip] if t > window_start]
        if len(recent) >= self.max_requests:
            self._requests[client_ip] = recent
            retry_after = max(1, int(recent[0] + self.window_seconds - now))
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit exceeded. Try again later."},
                headers={"Retry-After": str(retry_after)},
            )

        recent.append(now)
        self._requests[client_ip] = recent
        return await call_next(request)
