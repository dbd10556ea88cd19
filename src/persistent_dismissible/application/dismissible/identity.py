"""Dismissible flags – current-user resolution."""
from __future__ import annotations

from typing import Protocol

from persistent_dismissible.application.dismissible.args import UserRef
from persistent_dismissible.observability.correlation import CorrelationContext


class CurrentUserProvider(Protocol):
    """Port: who is making the current call (``None`` when anonymous)."""

    def current_user(self) -> UserRef | None: ...


class StaticUserProvider:
    """Always reports the same user; handy for scripts and tests."""

    def __init__(self, user_id: UserRef | None = None) -> None:
        self._user_id = user_id

    def current_user(self) -> UserRef | None:
        return self._user_id


class ContextUserProvider:
    """Reads ``user_id`` from the ambient :class:`RequestContext`."""

    def current_user(self) -> UserRef | None:
        ctx = CorrelationContext.get()
        return ctx.user_id if ctx is not None else None


__all__ = ["ContextUserProvider", "CurrentUserProvider", "StaticUserProvider"]
