"""Dismissible flags – per-user acknowledgements with an optional lifespan."""
from persistent_dismissible.application.dismissible.args import (
    DismissibleArgs,
    UserRef,
    check_args,
    resolve_args,
)
from persistent_dismissible.application.dismissible.identity import (
    ContextUserProvider,
    CurrentUserProvider,
    StaticUserProvider,
)
from persistent_dismissible.application.dismissible.in_memory import InMemoryUserMetaStore
from persistent_dismissible.application.dismissible.keys import (
    DEFAULT_TIMEOUT_SUFFIX,
    DismissibleKeys,
    build_keys,
    sanitize_key,
    timeout_key,
)
from persistent_dismissible.application.dismissible.service import PersistentDismissible
from persistent_dismissible.application.dismissible.store import DEFAULT_PREFIX_TEMPLATE, UserMetaStore

__all__ = [
    "DEFAULT_PREFIX_TEMPLATE",
    "DEFAULT_TIMEOUT_SUFFIX",
    "ContextUserProvider",
    "CurrentUserProvider",
    "DismissibleArgs",
    "DismissibleKeys",
    "InMemoryUserMetaStore",
    "PersistentDismissible",
    "StaticUserProvider",
    "UserMetaStore",
    "UserRef",
    "build_keys",
    "check_args",
    "resolve_args",
    "sanitize_key",
    "timeout_key",
]
