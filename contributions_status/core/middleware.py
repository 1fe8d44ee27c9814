from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


CONTRIBUTIONS_PATH = "/api/contributions"


class ContributionsRateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory sliding-window limiter for GET /api/contributions.

    Every graph request fans out to both upstream providers, so only that
    route is limited. Clients are keyed by socket peer address; the
    `X-Forwarded-For` header is only honoured when `trust_forwarded_for` is
    set, i.e. when the service runs behind a proxy that overwrites it.
    """

    def __init__(
        self,
        app,
        requests_per_window: int = 30,
        window_seconds: int = 60,
        trust_forwarded_for: bool = False,
    ) -> None:
        super().__init__(app)
        self.max_requests = max(1, requests_per_window)
        self.window_seconds = max(1, window_seconds)
        self.trust_forwarded_for = trust_forwarded_for
        self._buckets: dict[str, deque[float]] = {}
        self._last_sweep = monotonic()
        self._lock = RLock()

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)

    def register_request(self, client_key: str, now: float) -> int | None:
        """Record a request; return Retry-After seconds when over the limit."""

        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(now)

            bucket = self._buckets.get(client_key)
            if bucket is None:
                bucket = self._buckets[client_key] = deque()
            self._evict(bucket, now)

            if len(bucket) >= self.max_requests:
                return max(1, int(self.window_seconds - (now - bucket[0])))

            bucket.append(now)
            return None

    def _evict(self, bucket: deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while bucket and bucket[0] <= cutoff:
            bucket.popleft()

    def _sweep(self, now: float) -> None:
        # Drop clients with no request left inside the window.
        for client_key in list(self._buckets):
            bucket = self._buckets[client_key]
            self._evict(bucket, now)
            if not bucket:
                del self._buckets[client_key]
        self._last_sweep = now

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method != "GET" or request.url.path.rstrip("/") != CONTRIBUTIONS_PATH:
            return await call_next(request)

        retry_after = self.register_request(self.client_key(request), monotonic())
        if retry_after is not None:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too Many Requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)

    def client_key(self, request: Request) -> str:
        if self.trust_forwarded_for:
            forwarded_for = request.headers.get("x-forwarded-for")
            if forwarded_for:
                return forwarded_for.split(",")[0].strip() or "unknown"

        if request.client and request.client.host:
            return request.client.host

        return "unknown"
