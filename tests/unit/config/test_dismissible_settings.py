"""Unit tests for DismissibleSettings and service wiring."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from persistent_dismissible.application.dismissible import (
    InMemoryUserMetaStore,
    PersistentDismissible,
    StaticUserProvider,
)
from persistent_dismissible.config.settings import (
    DismissibleSettings,
    build_dismissibles,
    build_store,
    load_settings,
)
from persistent_dismissible.config.validation import InvalidSettingValueError
from persistent_dismissible.testing.fakes import FakeClock

_ENV_KEYS = (
    "DISMISSIBLE_BACKEND",
    "DISMISSIBLE_REDIS_URL",
    "DISMISSIBLE_REDIS_NAMESPACE",
    "DISMISSIBLE_DATABASE_URL",
    "DISMISSIBLE_TENANT_PREFIX_TEMPLATE",
    "DISMISSIBLE_TIMEOUT_SUFFIX",
    "DISMISSIBLE_DEFAULT_TENANT",
    "DISMISSIBLE_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestDismissibleSettings:
    def test_defaults(self) -> None:
        s = DismissibleSettings()
        assert s.backend == "memory"
        assert s.timeout_suffix == "_expires"
        assert s.tenant_prefix_template == "{tenant}_"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("backend", "mongo"),
            ("timeout_suffix", ""),
            ("tenant_prefix_template", "site_"),
            ("log_level", "chatty"),
        ],
    )
    def test_invalid_values(self, field: str, value: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            DismissibleSettings(**{field: value})
        assert exc_info.value.setting_name == field


class TestLoadSettings:
    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISMISSIBLE_BACKEND", "redis")
        clean_env.setenv("DISMISSIBLE_DEFAULT_TENANT", "3")
        s = load_settings()
        assert s.backend == "redis"
        assert s.default_tenant == "3"

    def test_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        assert load_settings(overrides={"timeout_suffix": "_ttl"}).timeout_suffix == "_ttl"

    def test_invalid_environment_value(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISMISSIBLE_BACKEND", "mongo")
        # the failing loader is skipped, defaults remain
        assert load_settings().backend == "memory"


class TestBuildStore:
    def test_memory(self) -> None:
        store = build_store(DismissibleSettings(tenant_prefix_template="wp_{tenant}_"))
        assert isinstance(store, InMemoryUserMetaStore)
        assert store.tenant_prefix("2") == "wp_2_"

    def test_redis(self) -> None:
        import persistent_dismissible.adapters.redis.connection as conn_mod
        from persistent_dismissible.adapters.redis import RedisUserMetaStore

        mock_aioredis = MagicMock()
        with patch.object(conn_mod, "_require_redis", return_value=mock_aioredis):
            store = build_store(DismissibleSettings(backend="redis", redis_url="redis://r:6379/2"))
        assert isinstance(store, RedisUserMetaStore)
        mock_aioredis.from_url.assert_called_once_with("redis://r:6379/2")

    def test_sqlalchemy(self, tmp_path) -> None:
        from persistent_dismissible.adapters.sqlalchemy import SqlAlchemyUserMetaStore

        store = build_store(
            DismissibleSettings(backend="sqlalchemy", database_url=f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
        )
        assert isinstance(store, SqlAlchemyUserMetaStore)


class TestBuildDismissibles:
    def test_wires_settings_into_service(self) -> None:
        settings = DismissibleSettings(default_tenant="5", timeout_suffix="_until")
        store = InMemoryUserMetaStore()
        service = build_dismissibles(
            settings, store=store, users=StaticUserProvider(1), clock=FakeClock()
        )
        assert isinstance(service, PersistentDismissible)
        asyncio.run(service.set("tour", is_global=False, lifespan=10))
        assert set(store.snapshot(1)) == {"5_tour", "5_tour_until"}

    def test_empty_injected_store_is_kept(self) -> None:
        store = InMemoryUserMetaStore()
        assert len(store) == 0
        service = build_dismissibles(
            DismissibleSettings(backend="redis"), store=store, users=StaticUserProvider(1)
        )
        assert service.store is store

    def test_defaults_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        service = build_dismissibles(users=StaticUserProvider(1))
        assert isinstance(service.store, InMemoryUserMetaStore)

    def test_configure_logging(self) -> None:
        with patch(
            "persistent_dismissible.config.settings.dismissible.JsonLoggerFactory.configure"
        ) as configure:
            build_dismissibles(DismissibleSettings(log_level="DEBUG"), configure_logging=True)
        configure.assert_called_once_with("DEBUG")
