"""Redis adapter – RedisConnection."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError(
            "Install 'persistent-dismissible[redis]' to use the Redis adapter"
        ) from exc


class RedisConnection:
    """Thin async wrapper over the handful of Redis commands the store needs."""

    def __init__(self, url: str, **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, **kwargs)

    async def get(self, key: str) -> bytes | None:
        return await self._client.get(key)

    async def set(self, key: str, value: str | bytes, *, nx: bool = False) -> bool:
        """``SET``; with *nx* only when *key* is absent.  ``False`` if not written."""
        return bool(await self._client.set(key, value, nx=nx))

    async def delete(self, key: str) -> int:
        return int(await self._client.delete(key))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisConnection"]
