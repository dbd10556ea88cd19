"""Dismissible flags – UserMetaStore port."""
from __future__ import annotations

import abc
from typing import Any

from persistent_dismissible.application.dismissible.args import UserRef

DEFAULT_PREFIX_TEMPLATE = "{tenant}_"


class UserMetaStore(abc.ABC):
    """Port: durable key-value entries keyed by ``(user_id, key)``.

    ``add`` is the only primitive that must be atomic: it inserts the entry
    only when the key does not exist yet and reports ``False`` otherwise.
    A successful ``add`` returns the new row id when the backend assigns
    one, ``True`` when it does not.

    ``get`` returns ``None`` for a missing entry, so ``None`` itself cannot
    be stored meaningfully.
    """

    prefix_template: str = DEFAULT_PREFIX_TEMPLATE

    @abc.abstractmethod
    async def get(self, user_id: UserRef, key: str) -> Any | None: ...

    @abc.abstractmethod
    async def add(self, user_id: UserRef, key: str, value: Any) -> int | bool: ...

    @abc.abstractmethod
    async def update(self, user_id: UserRef, key: str, value: Any) -> bool:
        """Overwrite the entry, creating it when missing."""

    @abc.abstractmethod
    async def delete(self, user_id: UserRef, key: str) -> bool:
        """Remove the entry; deleting a missing key is not an error."""

    def tenant_prefix(self, tenant: str) -> str:
        """Key prefix for entries private to *tenant*."""
        return self.prefix_template.format(tenant=tenant)


__all__ = ["DEFAULT_PREFIX_TEMPLATE", "UserMetaStore"]
