from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

JSON_BODY_PATHS: frozenset[str] = frozenset({"/feedback"})


class SecurityMiddleware(BaseHTTPMiddleware):
    """Body size limit for writes and JSON-only feedback submissions."""

    def __init__(self, app, max_body_size: int = 1024 * 1024):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next):
        if request.method in ("POST", "PUT"):
            content_length = request.headers.get("content-length")
            if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
                return JSONResponse(
                    status_code=413,
                    content={"detail": f"Request body too large. Maximum size: {self.max_body_size} bytes."},
                )

            if request.url.path in JSON_BODY_PATHS:
                content_type = request.headers.get("content-type", "")
                if content_type.split(";")[0].strip() != "application/json":
                    return JSONResponse(
                        status_code=415,
                        content={"detail": "Feedback must be submitted as application/json."},
                    )

        return await call_next(request)
