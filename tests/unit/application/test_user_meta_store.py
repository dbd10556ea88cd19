"""Unit tests for InMemoryUserMetaStore and current-user providers."""

from __future__ import annotations

import asyncio

import pytest

from persistent_dismissible.application.dismissible import (
    ContextUserProvider,
    InMemoryUserMetaStore,
    StaticUserProvider,
    UserMetaStore,
)
from persistent_dismissible.observability.correlation import CorrelationContext, RequestContext


class TestInMemoryUserMetaStore:
    def test_is_a_user_meta_store(self) -> None:
        assert isinstance(InMemoryUserMetaStore(), UserMetaStore)

    def test_get_missing_returns_none(self) -> None:
        assert asyncio.run(InMemoryUserMetaStore().get(1, "tour")) is None

    def test_add_returns_increasing_ids(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            assert await store.add(1, "a", True) == 1
            assert await store.add(1, "b", True) == 2
            assert await store.add(2, "a", True) == 3

        asyncio.run(run())

    def test_add_refuses_existing_key(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            await store.add(1, "a", "first")
            assert await store.add(1, "a", "second") is False
            assert await store.get(1, "a") == "first"

        asyncio.run(run())

    def test_concurrent_adds_only_one_wins(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> list[int | bool]:
            return await asyncio.gather(*(store.add(1, "a", n) for n in range(10)))

        results = asyncio.run(run())
        assert sum(1 for r in results if r is not False) == 1

    def test_update_upserts_and_keeps_row_id(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            assert await store.update(1, "a", "x") is True
            row_id = store.row_id(1, "a")
            assert await store.update(1, "a", "y") is True
            assert store.row_id(1, "a") == row_id
            assert await store.get(1, "a") == "y"

        asyncio.run(run())

    def test_delete(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            await store.add(1, "a", True)
            assert await store.delete(1, "a") is True
            assert await store.delete(1, "a") is False

        asyncio.run(run())
        assert len(store) == 0

    def test_int_and_str_user_ids_share_rows(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            await store.add(7, "a", True)
            assert await store.get("7", "a") is True

        asyncio.run(run())

    def test_snapshot_and_clear(self) -> None:
        store = InMemoryUserMetaStore()

        async def run() -> None:
            await store.add(1, "a", 1)
            await store.add(2, "b", 2)

        asyncio.run(run())
        assert store.snapshot(1) == {"a": 1}
        store.clear()
        assert store.snapshot(2) == {}

    def test_tenant_prefix(self) -> None:
        assert InMemoryUserMetaStore().tenant_prefix("2") == "2_"
        store = InMemoryUserMetaStore(prefix_template="wp_{tenant}_")
        assert store.tenant_prefix("2") == "wp_2_"


class TestUserProviders:
    def test_static(self) -> None:
        assert StaticUserProvider(5).current_user() == 5
        assert StaticUserProvider().current_user() is None

    def test_context_without_request(self) -> None:
        CorrelationContext.clear()
        assert ContextUserProvider().current_user() is None

    def test_context_with_request(self) -> None:
        with CorrelationContext.scoped(RequestContext.new(user_id="u-9")):
            assert ContextUserProvider().current_user() == "u-9"
        assert ContextUserProvider().current_user() is None

    @pytest.mark.parametrize("user_id", [None, 0])
    def test_context_passes_falsy_users_through(self, user_id: int | None) -> None:
        with CorrelationContext.scoped(RequestContext.new(user_id=user_id)):
            assert ContextUserProvider().current_user() == user_id
