"""
Hybrid in-memory + Redis rate limiting for the authentication endpoints.

Counts live in process memory and are pushed to Redis every few seconds, so
several API workers converge on a shared fixed window without a Redis round
trip per request.
"""

import logging
import os
import time
from dataclasses import dataclass
from threading import Lock
from typing import Optional

import redis
from fastapi import HTTPException, Request, status

from .config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS

logger = logging.getLogger(__name__)

redis_client: Optional[redis.Redis] = None

REDIS_SYNC_INTERVAL = 10  # seconds between pushes of a window count to Redis
CLEANUP_INTERVAL = 60


@dataclass
class Window:
    count: int
    reset_time: int
    last_redis_sync: int = 0


_windows: dict[str, Window] = {}
_windows_lock = Lock()
_last_cleanup = 0


def get_redis_client() -> redis.Redis:
    """Create the Redis client on first use (REDIS_URL, or host/port settings)"""
    global redis_client

    if redis_client is not None:
        return redis_client

    options = {
        "decode_responses": True,
        "socket_connect_timeout": 15,
        "socket_timeout": 30,
        "retry_on_timeout": True,
        "health_check_interval": 30,
        "max_connections": 20,
    }
    redis_url = os.getenv("REDIS_URL")
    try:
        if redis_url:
            host_part = redis_url.split("@")[-1] if "@" in redis_url else "****"
            logger.info(f"📡 Connecting to Redis via URL ({host_part})")
            client = redis.from_url(redis_url, **options)
        else:
            host = os.getenv("REDIS_HOST", "localhost")
            port = int(os.getenv("REDIS_PORT", "6379"))
            logger.info(f"📡 Connecting to Redis at {host}:{port}")
            client = redis.Redis(
                host=host,
                port=port,
                password=os.getenv("REDIS_PASSWORD"),
                db=int(os.getenv("REDIS_DB", "0")),
                ssl=os.getenv("REDIS_SSL", "false").lower() == "true",
                **options,
            )
        client.ping()
    except redis.RedisError as e:
        logger.error(f"❌ Failed to connect to Redis: {e}")
        raise

    logger.info("✅ Redis connected for rate limiting")
    redis_client = client
    return redis_client


def _cleanup_expired(now: int):
    global _last_cleanup
    if now - _last_cleanup < CLEANUP_INTERVAL:
        return
    expired = [k for k, w in _windows.items() if now >= w.reset_time]
    for k in expired:
        del _windows[k]
    if expired:
        logger.debug(f"🧹 Cleaned up {len(expired)} expired rate limit windows")
    _last_cleanup = now


def _load_window(key: str, window_seconds: int, client: redis.Redis, now: int) -> Window:
    try:
        stored = client.get(key)
        ttl = client.ttl(key)
    except redis.RedisError as e:
        logger.warning(f"⚠️ Failed to load {key} from Redis, using memory only: {e}")
        return Window(count=0, reset_time=now + window_seconds, last_redis_sync=now)
    if stored and ttl > 0:
        return Window(count=int(stored), reset_time=now + ttl, last_redis_sync=now)
    return Window(count=0, reset_time=now + window_seconds, last_redis_sync=now)


def check_rate_limit(key: str, limit: int, window_seconds: int, client: redis.Redis) -> tuple[bool, int, int]:
    """
    Count one request against a fixed window.

    Returns:
        Tuple of (is_allowed, current_count, seconds_until_reset)
    """
    now = int(time.time())

    with _windows_lock:
        _cleanup_expired(now)

        window = _windows.get(key)
        if window is None:
            window = _windows[key] = _load_window(key, window_seconds, client, now)

        if now >= window.reset_time:
            window.count = 0
            window.reset_time = now + window_seconds
            window.last_redis_sync = 0

        is_allowed = window.count < limit
        if is_allowed:
            window.count += 1

        if now - window.last_redis_sync >= REDIS_SYNC_INTERVAL:
            try:
                client.set(key, window.count, ex=max(1, window.reset_time - now))
                window.last_redis_sync = now
            except redis.RedisError as e:
                logger.warning(f"⚠️ Failed to sync {key} to Redis: {e}")

        return is_allowed, window.count, max(0, window.reset_time - now)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def create_rate_limiter(limit: int, window_seconds: int, key_prefix: str = "rate_limit"):
    """
    Build a per-IP rate limit dependency.

    Example:
        login_rate_limit = create_rate_limiter(limit=10, window_seconds=60, key_prefix="auth_login")

        @router.post("/login")
        async def login(data: LoginRequest, _: None = Depends(login_rate_limit)):
            ...
    """

    async def rate_limiter(request: Request):
        key = f"{key_prefix}:{client_ip(request)}"
        try:
            is_allowed, current_count, ttl = check_rate_limit(key, limit, window_seconds, get_redis_client())
        except redis.RedisError as e:
            logger.error(f"❌ Rate limiting unavailable: {e}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Rate limiting service temporarily unavailable",
            ) from e

        if not is_allowed:
            logger.warning(f"🚫 Rate limit exceeded for {key} ({current_count}/{limit})")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail={
                    "message": f"Rate limit exceeded. Maximum {limit} requests per {window_seconds} seconds.",
                    "retry_after": ttl,
                },
                headers={"Retry-After": str(ttl)},
            )

        request.state.rate_limit_remaining = limit - current_count

    return rate_limiter


login_rate_limit = create_rate_limiter(RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS, "auth_login")
register_rate_limit = create_rate_limiter(RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS, "auth_register")
password_reset_rate_limit = create_rate_limiter(5, 3600, "auth_password_reset")
