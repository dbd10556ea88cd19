"""Config settings – DismissibleSettings and service wiring.

Environment variables (all optional)::

    DISMISSIBLE_BACKEND=memory|redis|sqlalchemy
    DISMISSIBLE_REDIS_URL=redis://localhost:6379/0
    DISMISSIBLE_REDIS_NAMESPACE=usermeta
    DISMISSIBLE_DATABASE_URL=sqlite+aiosqlite:///dismissibles.db
    DISMISSIBLE_TENANT_PREFIX_TEMPLATE={tenant}_
    DISMISSIBLE_TIMEOUT_SUFFIX=_expires
    DISMISSIBLE_DEFAULT_TENANT=
    DISMISSIBLE_LOG_LEVEL=INFO
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, ClassVar

from persistent_dismissible.application.dismissible import (
    DEFAULT_PREFIX_TEMPLATE,
    DEFAULT_TIMEOUT_SUFFIX,
    CurrentUserProvider,
    InMemoryUserMetaStore,
    PersistentDismissible,
    UserMetaStore,
)
from persistent_dismissible.config.settings.base import Settings
from persistent_dismissible.config.settings.factory import SettingsFactory
from persistent_dismissible.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader
from persistent_dismissible.config.validation import InvalidSettingValueError
from persistent_dismissible.kernel.time import Clock
from persistent_dismissible.observability.logging import JsonLoggerFactory

BACKENDS = frozenset({"memory", "redis", "sqlalchemy"})


@dataclasses.dataclass
class DismissibleSettings(Settings):
    _prefix: ClassVar[str] = "DISMISSIBLE"

    backend: str = "memory"
    redis_url: str = "redis://localhost:6379/0"
    redis_namespace: str = "usermeta"
    database_url: str = "sqlite+aiosqlite:///dismissibles.db"
    tenant_prefix_template: str = DEFAULT_PREFIX_TEMPLATE
    timeout_suffix: str = DEFAULT_TIMEOUT_SUFFIX
    default_tenant: str = ""
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.backend not in BACKENDS:
            raise InvalidSettingValueError(
                "backend", self.backend, f"expected one of {sorted(BACKENDS)}"
            )
        if not self.timeout_suffix:
            raise InvalidSettingValueError("timeout_suffix", self.timeout_suffix, "must not be empty")
        if "{tenant}" not in self.tenant_prefix_template:
            raise InvalidSettingValueError(
                "tenant_prefix_template", self.tenant_prefix_template, "must contain '{tenant}'"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


def load_settings(
    env_file: str | None = None, overrides: dict[str, Any] | None = None
) -> DismissibleSettings:
    """Read :class:`DismissibleSettings` from the environment (and *env_file*)."""
    loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    return SettingsFactory.create(DismissibleSettings, loaders=[loader], overrides=overrides)


def build_store(settings: DismissibleSettings) -> UserMetaStore:
    """Instantiate the configured :class:`UserMetaStore` backend.

    The SQLAlchemy store expects its table to exist; see
    :meth:`SqlAlchemyUserMetaStore.create_table`.
    """
    template = settings.tenant_prefix_template
    if settings.backend == "redis":
        from persistent_dismissible.adapters.redis import RedisUserMetaStore

        return RedisUserMetaStore.from_url(
            settings.redis_url, namespace=settings.redis_namespace, prefix_template=template
        )
    if settings.backend == "sqlalchemy":
        from persistent_dismissible.adapters.sqlalchemy import (
            SqlAlchemySessionFactory,
            SqlAlchemyUserMetaStore,
        )

        return SqlAlchemyUserMetaStore(
            SqlAlchemySessionFactory(settings.database_url), prefix_template=template
        )
    return InMemoryUserMetaStore(prefix_template=template)


def build_dismissibles(
    settings: DismissibleSettings | None = None,
    *,
    store: UserMetaStore | None = None,
    users: CurrentUserProvider | None = None,
    clock: Clock | None = None,
    configure_logging: bool = False,
) -> PersistentDismissible:
    """Wire a :class:`PersistentDismissible` from *settings* (env when omitted)."""
    settings = settings if settings is not None else load_settings()
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)
    return PersistentDismissible(
        store if store is not None else build_store(settings),
        users=users,
        clock=clock,
        default_tenant=settings.default_tenant or None,
        timeout_suffix=settings.timeout_suffix,
    )


__all__ = [
    "BACKENDS",
    "DismissibleSettings",
    "build_dismissibles",
    "build_store",
    "load_settings",
]
