"""Redis adapter – connection wrapper and user-meta store."""
from persistent_dismissible.adapters.redis.connection import RedisConnection
from persistent_dismissible.adapters.redis.user_meta import RedisUserMetaStore

__all__ = ["RedisConnection", "RedisUserMetaStore"]
