"""Observability – RequestContext, CorrelationContext.

The request context is where an application records *who* is making the
current call; :class:`~persistent_dismissible.application.dismissible.identity.ContextUserProvider`
reads the current user from it.
"""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar
from typing import Iterator
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single request/use-case execution."""
    correlation_id: str
    tenant_id: str | None = None
    user_id: int | str | None = None

    @classmethod
    def new(
        cls, tenant_id: str | None = None, user_id: int | str | None = None
    ) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), tenant_id=tenant_id, user_id=user_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_pd_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scoped(ctx: RequestContext) -> Iterator[RequestContext]:
        """Set *ctx* for the duration of the block, restoring the previous one on exit.

        Example::

            with CorrelationContext.scoped(RequestContext.new(user_id=42)):
                await dismissibles.set(id="welcome_tour")
        """
        token = _CTX_VAR.set(ctx)
        try:
            yield ctx
        finally:
            _CTX_VAR.reset(token)


__all__ = ["CorrelationContext", "RequestContext"]
