"""Server-side session storage keyed by the opaque value of the session cookie."""
import asyncio
import json
import secrets
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

from redis.asyncio import Redis
from structlog import get_logger

from aldar.config import Settings

logger = get_logger()


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class SessionStore(ABC):
    ttl_seconds: int

    @abstractmethod
    async def get(self, session_id: str) -> Optional[dict]:
        ...

    @abstractmethod
    async def set(self, session_id: str, data: dict) -> None:
        ...

    @abstractmethod
    async def destroy(self, session_id: str) -> None:
        ...

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None


class MemorySessionStore(SessionStore):
    """Sessions held in process memory.

    Expired entries are never returned. They are physically removed by a sweep
    that runs on access at most once per ``check_period_seconds``.
    """

    def __init__(self, ttl_seconds: int = 86400, check_period_seconds: int = 86400,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.check_period_seconds = check_period_seconds
        self._clock = clock
        self._sessions: Dict[str, Tuple[float, dict]] = {}
        self._lock = asyncio.Lock()
        self._last_prune = clock()

    async def get(self, session_id: str) -> Optional[dict]:
        async with self._lock:
            self._maybe_prune()
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at <= self._clock():
                del self._sessions[session_id]
                return None
            return dict(data)

    async def set(self, session_id: str, data: dict) -> None:
        async with self._lock:
            self._maybe_prune()
            self._sessions[session_id] = (self._clock() + self.ttl_seconds, dict(data))

    async def destroy(self, session_id: str) -> None:
        async with self._lock:
            self._sessions.pop(session_id, None)

    def prune(self) -> int:
        now = self._clock()
        expired = [sid for sid, (expires_at, _) in self._sessions.items() if expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        self._last_prune = now
        if expired:
            logger.info("Expired sessions pruned", count=len(expired))
        return len(expired)

    def _maybe_prune(self):
        if self._clock() - self._last_prune >= self.check_period_seconds:
            self.prune()

    def __len__(self) -> int:
        return len(self._sessions)


class RedisSessionStore(SessionStore):
    """Sessions stored as JSON under ``sess:<id>``; Redis handles expiry."""

    key_prefix = "sess:"

    def __init__(self, redis: Redis, ttl_seconds: int = 86400):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def get(self, session_id: str) -> Optional[dict]:
        raw = await self.redis.get(self._key(session_id))
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable session payload", session_key=self._key(session_id))
            await self.redis.delete(self._key(session_id))
            return None

    async def set(self, session_id: str, data: dict) -> None:
        await self.redis.setex(self._key(session_id), self.ttl_seconds, json.dumps(data))

    async def destroy(self, session_id: str) -> None:
        await self.redis.delete(self._key(session_id))

    async def ping(self) -> bool:
        return bool(await self.redis.ping())

    async def close(self) -> None:
        await self.redis.aclose()


def create_session_store(settings: Settings) -> SessionStore:
    backend = settings.SESSION_BACKEND.lower()
    if backend == "redis":
        redis = Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
        logger.info("Using Redis session store", url=settings.REDIS_URL)
        return RedisSessionStore(redis, ttl_seconds=settings.SESSION_TTL_SECONDS)
    if backend != "memory":
        raise ValueError(f"Unknown SESSION_BACKEND: {settings.SESSION_BACKEND}")
    return MemorySessionStore(
        ttl_seconds=settings.SESSION_TTL_SECONDS,
        check_period_seconds=settings.SESSION_CHECK_PERIOD_SECONDS,
    )
