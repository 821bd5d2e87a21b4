"""
Rate limiting middleware
- sliding window per client
- keyed by user id when a valid bearer token is sent, otherwise by IP
"""
import logging
import time
from typing import Optional

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from core.auth import decode_access_token
from core.config import AppSettings

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = {"/", "/api/health", "/docs", "/redoc", "/openapi.json"}


class RateLimiter:
    """In-memory limiter, state lives as long as the process."""

    def __init__(self, max_requests: int = 100, window_seconds: int = 3600):
        self.requests: dict[str, list[float]] = {}
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._last_sweep = 0.0

    def is_allowed(self, key: str, now: Optional[float] = None) -> tuple[bool, Optional[int]]:
        """Records the request if allowed. Returns (allowed, seconds until reset)."""
        now = time.time() if now is None else now
        window_start = now - self.window_seconds

        if now - self._last_sweep >= self.window_seconds:
            self._sweep(window_start)
            self._last_sweep = now

        recent = [req_time for req_time in self.requests.get(key, []) if req_time > window_start]
        if len(recent) >= self.max_requests:
            self.requests[key] = recent
            oldest_request = min(recent)
            reset_time = int(oldest_request + self.window_seconds - now)
            return False, max(reset_time, 0)

        recent.append(now)
        self.requests[key] = recent
        return True, None

    def remaining(self, key: str) -> int:
        return max(0, self.max_requests - len(self.requests.get(key, [])))

    def _sweep(self, window_start: float) -> None:
        # drop clients with no request left in the window
        for key in [key for key, times in self.requests.items() if max(times) <= window_start]:
            del self.requests[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, settings: AppSettings):
        super().__init__(app)
        self.settings = settings
        self.rate_limiter = RateLimiter(
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )

    def _client_key(self, request: Request) -> str:
        client_ip = request.client.host if request.client else "unknown"

        user_id = None
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            payload = decode_access_token(auth_header.split(" ", 1)[1], self.settings)
            if payload:
                user_id = payload.get("sub")

        return f"{user_id}:{client_ip}" if user_id else f"anon:{client_ip}"

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        key = self._client_key(request)
        allowed, reset_time = self.rate_limiter.is_allowed(key)

        if not allowed:
            logger.warning(f"⛔ Rate limit exceeded - key: {key}, path: {request.url.path}")
            response = JSONResponse(
                content={"detail": f"Rate limit exceeded. Try again in {reset_time} seconds."},
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            )
            response.headers["X-RateLimit-Limit"] = str(self.rate_limiter.max_requests)
            response.headers["X-RateLimit-Remaining"] = "0"
            response.headers["X-RateLimit-Reset"] = str(int(time.time()) + reset_time)
            return response

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.rate_limiter.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(self.rate_limiter.remaining(key))
        response.headers["X-RateLimit-Reset"] = str(int(time.time()) + self.rate_limiter.window_seconds)
        return response
