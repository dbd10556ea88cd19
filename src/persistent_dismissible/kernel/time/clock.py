"""Kernel time – Clock protocol + implementations.

Expiry records are stored as whole unix seconds, so every clock exposes
``timestamp()`` as an ``int`` alongside the aware ``now()``.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def timestamp(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> int:
        return int(datetime.now(UTC).timestamp())


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> int:
        return int(self._fixed.timestamp())

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    def set(self, fixed: datetime) -> None:
        self._fixed = fixed


__all__ = ["Clock", "FrozenClock", "SystemClock"]
