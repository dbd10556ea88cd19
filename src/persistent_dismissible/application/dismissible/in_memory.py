"""Dismissible flags – InMemoryUserMetaStore."""

from __future__ import annotations

from typing import Any

from persistent_dismissible.application.dismissible.args import UserRef
from persistent_dismissible.application.dismissible.store import UserMetaStore


class InMemoryUserMetaStore(UserMetaStore):
    """Dict-backed store for tests and single-process tools.

    Rows get increasing ids like a database would.  ``add`` checks and
    inserts without awaiting in between, so it is atomic on one event loop.
    """

    def __init__(self, *, prefix_template: str | None = None) -> None:
        self._rows: dict[tuple[str, str], tuple[int, Any]] = {}
        self._last_id = 0
        if prefix_template is not None:
            self.prefix_template = prefix_template

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    async def get(self, user_id: UserRef, key: str) -> Any | None:
        row = self._rows.get((str(user_id), key))
        return None if row is None else row[1]

    async def add(self, user_id: UserRef, key: str, value: Any) -> int | bool:
        slot = (str(user_id), key)
        if slot in self._rows:
            return False
        row_id = self._next_id()
        self._rows[slot] = (row_id, value)
        return row_id

    async def update(self, user_id: UserRef, key: str, value: Any) -> bool:
        slot = (str(user_id), key)
        row = self._rows.get(slot)
        row_id = row[0] if row is not None else self._next_id()
        self._rows[slot] = (row_id, value)
        return True

    async def delete(self, user_id: UserRef, key: str) -> bool:
        return self._rows.pop((str(user_id), key), None) is not None

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    def snapshot(self, user_id: UserRef) -> dict[str, Any]:
        """All entries of *user_id* as ``{key: value}``."""
        uid = str(user_id)
        return {key: value for (owner, key), (_, value) in self._rows.items() if owner == uid}

    def row_id(self, user_id: UserRef, key: str) -> int | None:
        row = self._rows.get((str(user_id), key))
        return None if row is None else row[0]

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)


__all__ = ["InMemoryUserMetaStore"]
