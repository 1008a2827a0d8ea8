"""
Rate Limiting Middleware

Token bucket rate limiting for API protection.

ARCHITECTURE: Chat endpoints get a larger bucket than the rest of
the API so a student in distress is the last to be throttled.
"""

import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional, Callable
import asyncio

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from genibi.config.logging_config import get_logger
from genibi.config.settings import RateLimitSettings
from genibi.infrastructure.metrics import RATE_LIMIT_EXCEEDED

logger = get_logger(__name__)


@dataclass
class RateLimitConfig:
    """Rate limit configuration."""

    # Requests per minute for general API
    requests_per_minute: int = 60

    # Requests per minute for chat endpoints (higher limit)
    chat_requests_per_minute: int = 120

    # Burst allowance (tokens above limit)
    burst_size: int = 10

    @classmethod
    def from_settings(cls, settings: RateLimitSettings) -> "RateLimitConfig":
        return cls(
            requests_per_minute=settings.requests_per_minute,
            chat_requests_per_minute=settings.chat_requests_per_minute,
            burst_size=settings.burst_size,
        )


class TokenBucket:
    """Token bucket for rate limiting."""

    def __init__(
        self,
        rate: float,  # Tokens per second
        capacity: int,  # Maximum tokens
    ) -> None:
        self.rate = rate
        self.capacity = capacity
        self.tokens = float(capacity)
        self.last_update = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self, tokens: int = 1) -> bool:
        """
        Attempt to acquire tokens.

        Returns True if tokens acquired, False if rate limited.
        """
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self.last_update

            self.tokens = min(
                self.capacity,
                self.tokens + elapsed * self.rate
            )
            self.last_update = now

            if self.tokens >= tokens:
                self.tokens -= tokens
                return True

            return False

    @property
    def available_tokens(self) -> int:
        """Get current available tokens."""
        return int(self.tokens)


class RateLimiter:
    """
    Rate limiter using token bucket algorithm.

    Maintains separate buckets per client identifier.
    """

    # Buckets idle this long are dropped on the next sweep
    INACTIVE_SECONDS = 600

    def __init__(self, config: Optional[RateLimitConfig] = None) -> None:
        self.config = config or RateLimitConfig()
        self._buckets: dict[str, TokenBucket] = defaultdict(self._create_bucket)
        self._chat_buckets: dict[str, TokenBucket] = defaultdict(self._create_chat_bucket)

    def _create_bucket(self) -> TokenBucket:
        """Create standard rate limit bucket."""
        rate = self.config.requests_per_minute / 60.0
        capacity = self.config.requests_per_minute + self.config.burst_size
        return TokenBucket(rate=rate, capacity=capacity)

    def _create_chat_bucket(self) -> TokenBucket:
        """Create chat endpoint bucket (higher limit)."""
        rate = self.config.chat_requests_per_minute / 60.0
        capacity = self.config.chat_requests_per_minute + self.config.burst_size
        return TokenBucket(rate=rate, capacity=capacity)

    async def check_rate_limit(
        self,
        client_id: str,
        is_chat_endpoint: bool = False,
    ) -> tuple[bool, int]:
        """
        Check if request is within rate limit.

        Returns:
            Tuple of (allowed, remaining_tokens)
        """
        buckets = self._chat_buckets if is_chat_endpoint else self._buckets
        bucket = buckets[client_id]

        allowed = await bucket.acquire()
        remaining = bucket.available_tokens

        if not allowed:
            client_type = "chat" if is_chat_endpoint else "standard"
            RATE_LIMIT_EXCEEDED.labels(client_type=client_type).inc()
            logger.warning(
                "Rate limit exceeded",
                client_id=client_id[:11] + "...",  # Truncate for privacy
                is_chat=is_chat_endpoint,
            )

        return allowed, remaining

    def cleanup_inactive_buckets(self) -> int:
        """Remove buckets that haven't been used recently."""
        now = time.monotonic()
        removed = 0

        for buckets in (self._buckets, self._chat_buckets):
            inactive_keys = [
                key for key, bucket in buckets.items()
                if now - bucket.last_update > self.INACTIVE_SECONDS
            ]
            for key in inactive_keys:
                del buckets[key]
            removed += len(inactive_keys)

        return removed


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for rate limiting.

    Applies different limits for chat vs standard endpoints.
    Never blocks health, metrics or docs endpoints.
    """

    EXEMPT_PATHS = (
        "/metrics",
        "/docs",
        "/redoc",
        "/openapi.json",
    )

    def __init__(
        self,
        app,
        config: Optional[RateLimitConfig] = None,
        api_prefix: str = "/api/v1",
    ) -> None:
        super().__init__(app)
        self.exempt_prefixes = (f"{api_prefix}/health", *self.EXEMPT_PATHS)
        self.chat_prefixes = (f"{api_prefix}/chat",)
        self.limiter = RateLimiter(config)
        self._requests_seen = 0

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        path = request.url.path

        if path == "/" or path.startswith(self.exempt_prefixes):
            return await call_next(request)

        client_id = self._get_client_id(request)
        is_chat = path.startswith(self.chat_prefixes)

        allowed, remaining = await self.limiter.check_rate_limit(
            client_id,
            is_chat_endpoint=is_chat,
        )

        if not allowed:
            return Response(
                content='{"error": "Rate limit exceeded", "message": "Too many requests. Please try again later."}',
                status_code=429,
                media_type="application/json",
                headers={
                    "X-RateLimit-Remaining": "0",
                    "Retry-After": "60",
                },
            )

        self._requests_seen += 1
        if self._requests_seen % 1000 == 0:
            self.limiter.cleanup_inactive_buckets()

        response = await call_next(request)
        response.headers["X-RateLimit-Remaining"] = str(remaining)

        return response

    def _get_client_id(self, request: Request) -> str:
        """Client identifier for rate limiting: first forwarded IP, else peer IP."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            client_ip = forwarded.split(",")[0].strip()
        else:
            client_ip = request.client.host if request.client else "unknown"

        return f"ip:{client_ip}"
