"""Integration tests for the Redis user-meta store.

Uses testcontainers to spawn a real Redis instance.
Run with: PYTHONPATH=src pytest tests/integration/test_redis.py -m integration -v
"""
from __future__ import annotations

import asyncio

import pytest
from testcontainers.redis import RedisContainer

from persistent_dismissible.adapters.redis import RedisUserMetaStore
from persistent_dismissible.application.dismissible import PersistentDismissible, StaticUserProvider
from persistent_dismissible.testing import FakeClock


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def _redis_url(container) -> str:  # type: ignore[no-untyped-def]
    host = container.get_container_host_ip()
    port = container.get_exposed_port(container.port)
    return f"redis://{host}:{port}/0"


# ---------------------------------------------------------------------------
# RedisUserMetaStore
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestRedisUserMetaStoreIntegration:
    """Real Redis store primitives."""

    def test_add_is_add_if_absent(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisUserMetaStore.from_url(url, namespace="it")
                assert await store.add(1, "k", True)
                assert await store.add(1, "k", False) is False
                assert await store.get(1, "k") is True
                await store.close()

            _run(run())

    def test_update_upserts_and_delete_reports_presence(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisUserMetaStore.from_url(url, namespace="it")
                assert await store.update(1, "k", {"step": 2}) is True
                assert await store.get(1, "k") == {"step": 2}
                assert await store.delete(1, "k") is True
                assert await store.delete(1, "k") is False
                assert await store.get(1, "k") is None
                await store.close()

            _run(run())

    def test_users_are_isolated(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisUserMetaStore.from_url(url, namespace="it")
                await store.add(1, "k", "one")
                assert await store.get(2, "k") is None
                await store.close()

            _run(run())


# ---------------------------------------------------------------------------
# PersistentDismissible on Redis
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestPersistentDismissibleOnRedis:
    """Full lifecycle against a real Redis."""

    def test_set_get_expire(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                clock = FakeClock()
                store = RedisUserMetaStore.from_url(url)
                dismissibles = PersistentDismissible(store, users=StaticUserProvider(7), clock=clock)

                assert await dismissibles.set("banner_v2", lifespan=60)
                assert await dismissibles.get("banner_v2") is True
                clock.advance(seconds=60)
                assert await dismissibles.get("banner_v2") is False
                assert await store.get(7, "banner_v2") is None
                assert await store.get(7, "banner_v2_expires") is None
                await store.close()

            _run(run())

    def test_recreate_adds_timeout_to_permanent_flag(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                clock = FakeClock()
                store = RedisUserMetaStore.from_url(url)
                dismissibles = PersistentDismissible(store, users=StaticUserProvider(7), clock=clock)

                await dismissibles.set("tour")
                assert await store.get(7, "tour_expires") is None
                assert await dismissibles.set("tour", lifespan=30)
                assert await store.get(7, "tour_expires") == clock.timestamp() + 30
                await store.close()

            _run(run())

    def test_tenant_local_flag_uses_prefixed_keys(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisUserMetaStore.from_url(url)
                dismissibles = PersistentDismissible(store, users=StaticUserProvider(7))

                await dismissibles.set("tour", is_global=False, tenant="2")
                assert await store.get(7, "2_tour") is True
                assert await dismissibles.delete("tour", is_global=False, tenant="2") is True
                assert await store.get(7, "2_tour") is None
                await store.close()

            _run(run())
