"""Redis adapter – RedisUserMetaStore."""
from __future__ import annotations

from typing import Any

from persistent_dismissible.adapters import serialization
from persistent_dismissible.adapters.redis.connection import RedisConnection
from persistent_dismissible.application.dismissible.args import UserRef
from persistent_dismissible.application.dismissible.store import UserMetaStore


class RedisUserMetaStore(UserMetaStore):
    """Redis-backed user meta: one JSON string per ``{namespace}:{user}:{key}``.

    ``add`` maps to ``SET NX``, which Redis executes atomically.  Entries
    carry no Redis TTL; expiry stays under the control of the dismissible
    service so that reads and deletes behave the same on every backend.
    """

    def __init__(
        self,
        connection: RedisConnection,
        *,
        namespace: str = "usermeta",
        prefix_template: str | None = None,
    ) -> None:
        self._conn = connection
        self._namespace = namespace
        if prefix_template is not None:
            self.prefix_template = prefix_template

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisUserMetaStore":
        namespace = kwargs.pop("namespace", "usermeta")
        prefix_template = kwargs.pop("prefix_template", None)
        return cls(RedisConnection(url, **kwargs), namespace=namespace, prefix_template=prefix_template)

    def _key(self, user_id: UserRef, key: str) -> str:
        return f"{self._namespace}:{user_id}:{key}"

    async def get(self, user_id: UserRef, key: str) -> Any | None:
        raw = await self._conn.get(self._key(user_id, key))
        if raw is None:
            return None
        return serialization.loads(raw)

    async def add(self, user_id: UserRef, key: str, value: Any) -> int | bool:
        return await self._conn.set(self._key(user_id, key), serialization.dumps(value), nx=True)

    async def update(self, user_id: UserRef, key: str, value: Any) -> bool:
        return await self._conn.set(self._key(user_id, key), serialization.dumps(value))

    async def delete(self, user_id: UserRef, key: str) -> bool:
        return await self._conn.delete(self._key(user_id, key)) > 0

    async def close(self) -> None:
        await self._conn.close()


__all__ = ["RedisUserMetaStore"]
