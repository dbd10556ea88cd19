"""Dismissible flags – PersistentDismissible lifecycle service.

Think of a dismissible as a transient stored in user meta instead of a
cache: every call reads the store fresh, and expiry is only evaluated when
a dismissible is read (there is no sweeper).

Entry lifecycle per ``(user, id)``::

    absent ──set──▶ present (no expiry) ──set(lifespan)──▶ recreated with expiry
       ▲                     │                                   │
       └──────delete─────────┴──────get after expiry / delete────┘

None of the multi-entry sequences below are transactional.  A crash or a
concurrent writer between two store calls can leave the value and its
expiry out of step until the next ``set`` or ``delete``; the only atomic
primitive relied upon is :meth:`UserMetaStore.add`.
"""
from __future__ import annotations

from typing import Any

from persistent_dismissible.application.dismissible.args import (
    ArgsInput,
    DismissibleArgs,
    check_args,
    resolve_args,
)
from persistent_dismissible.application.dismissible.identity import (
    ContextUserProvider,
    CurrentUserProvider,
)
from persistent_dismissible.application.dismissible.keys import (
    DEFAULT_TIMEOUT_SUFFIX,
    DismissibleKeys,
    build_keys,
)
from persistent_dismissible.application.dismissible.store import UserMetaStore
from persistent_dismissible.kernel.time import Clock, SystemClock
from persistent_dismissible.observability.logging import get_logger

log = get_logger(__name__)


def _expiry_seconds(raw: Any) -> int | None:
    """Parse a stored expiry into unix seconds, or ``None`` when unreadable."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None


class PersistentDismissible:
    """Get, set and delete per-user dismissibles with an optional lifespan.

    Arguments may be given as a mapping, a :class:`DismissibleArgs`, a bare
    id string, keyword arguments, or any mix of those::

        dismissibles = PersistentDismissible(store, users=StaticUserProvider(42))
        await dismissibles.set("banner_v2", value="dismissed", lifespan=3600)
        await dismissibles.get({"id": "banner_v2", "global": False, "tenant": "2"})

    Invalid arguments (no id, no user, or a tenant-local flag without a
    tenant) never reach the store: ``get`` returns its default, ``set``
    and ``delete`` return ``False``.
    """

    def __init__(
        self,
        store: UserMetaStore,
        *,
        users: CurrentUserProvider | None = None,
        clock: Clock | None = None,
        default_tenant: str | None = None,
        timeout_suffix: str = DEFAULT_TIMEOUT_SUFFIX,
    ) -> None:
        self._store = store
        self._users = users if users is not None else ContextUserProvider()
        self._clock = clock if clock is not None else SystemClock()
        self._default_tenant = default_tenant or None
        self._timeout_suffix = timeout_suffix

    @property
    def store(self) -> UserMetaStore:
        return self._store

    def resolve(self, args: ArgsInput = None, /, **kwargs: Any) -> DismissibleArgs:
        """Apply defaults to *args* without validating them."""
        return resolve_args(
            args,
            current_user=self._users.current_user,
            default_tenant=self._default_tenant,
            **kwargs,
        )

    def keys_for(self, args: DismissibleArgs) -> DismissibleKeys:
        return build_keys(args, self._store.tenant_prefix, suffix=self._timeout_suffix)

    def _prepare(
        self, args: ArgsInput, kwargs: dict[str, Any], operation: str
    ) -> tuple[DismissibleArgs, DismissibleKeys] | None:
        r = self.resolve(args, **kwargs)
        if not check_args(r):
            log.debug(
                "dismissible_args_invalid",
                operation=operation,
                dismissible_id=r.id,
                user_id=r.user_id,
                is_global=r.is_global,
            )
            return None
        return r, self.keys_for(r)

    def _is_expired(self, expires_at: Any) -> bool:
        # An unreadable expiry counts as elapsed.
        seconds = _expiry_seconds(expires_at)
        return seconds is None or seconds <= self._clock.timestamp()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get(
        self, args: ArgsInput = None, /, *, default: Any = False, **kwargs: Any
    ) -> Any:
        """Return the stored value, or *default* when missing, expired or invalid.

        An expired dismissible is deleted on the spot, value and expiry both.
        """
        prepared = self._prepare(args, kwargs, "get")
        if prepared is None:
            return default
        r, keys = prepared

        value = await self._store.get(r.user_id, keys.value_key)
        expires_at = await self._store.get(r.user_id, keys.timeout_key)

        if expires_at is not None and self._is_expired(expires_at):
            await self._store.delete(r.user_id, keys.value_key)
            await self._store.delete(r.user_id, keys.timeout_key)
            log.info(
                "dismissible_expired",
                dismissible_id=r.id,
                user_id=r.user_id,
                expired_at=_expiry_seconds(expires_at),
            )
            return default

        return default if value is None else value

    async def set(self, args: ArgsInput = None, /, **kwargs: Any) -> int | bool:
        """Store a dismissible for a user.

        Returns the store's ``add`` result (new row id or ``True``) when the
        value entry is created, the ``update`` result when it is updated in
        place, and ``False`` on failure.
        """
        prepared = self._prepare(args, kwargs, "set")
        if prepared is None:
            return False
        r, keys = prepared
        user = r.user_id
        expires_at = self._clock.timestamp() + r.lifespan

        if await self._store.get(user, keys.value_key) is None:
            if r.expires:
                await self._store.add(user, keys.timeout_key, expires_at)
            log.debug("dismissible_created", dismissible_id=r.id, user_id=user, lifespan=r.lifespan)
            return await self._store.add(user, keys.value_key, r.value)

        if r.expires:
            if await self._store.get(user, keys.timeout_key) is None:
                return await self._recreate(r, keys, expires_at)
            await self._store.update(user, keys.timeout_key, expires_at)

        log.debug("dismissible_updated", dismissible_id=r.id, user_id=user, lifespan=r.lifespan)
        return await self._store.update(user, keys.value_key, r.value)

    async def _recreate(
        self, r: DismissibleArgs, keys: DismissibleKeys, expires_at: int
    ) -> int | bool:
        # A dismissible stored without expiry is gaining one: write both
        # entries from scratch through add() instead of updating in place.
        user = r.user_id
        await self._store.delete(user, keys.value_key)
        await self._store.delete(user, keys.timeout_key)
        await self._store.add(user, keys.timeout_key, expires_at)
        log.info("dismissible_recreated", dismissible_id=r.id, user_id=user, expires_at=expires_at)
        return await self._store.add(user, keys.value_key, r.value)

    async def delete(self, args: ArgsInput = None, /, **kwargs: Any) -> bool:
        """Remove a dismissible and its expiry; succeeds even when absent."""
        prepared = self._prepare(args, kwargs, "delete")
        if prepared is None:
            return False
        r, keys = prepared
        await self._store.delete(r.user_id, keys.value_key)
        await self._store.delete(r.user_id, keys.timeout_key)
        return True

    async def is_dismissed(self, args: ArgsInput = None, /, **kwargs: Any) -> bool:
        """``True`` when the user has a live, truthy dismissible for the id."""
        return bool(await self.get(args, **kwargs))


__all__ = ["PersistentDismissible"]
