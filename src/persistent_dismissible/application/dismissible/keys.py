"""Dismissible storage keys.

Each dismissible occupies two user-meta entries::

    <prefix><id>                       the value
    <prefix><sanitize(id)>_expires     absolute expiry, unix seconds

``prefix`` is empty for global dismissibles and the tenant prefix otherwise.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable
from typing import Final

from persistent_dismissible.application.dismissible.args import DismissibleArgs

DEFAULT_TIMEOUT_SUFFIX: Final = "_expires"

_UNSAFE_KEY_CHARS: Final = re.compile(r"[^a-z0-9_\-]")


@dataclasses.dataclass(frozen=True)
class DismissibleKeys:
    prefix: str
    value_key: str
    timeout_key: str


def sanitize_key(key: str) -> str:
    """Lowercase *key* and drop everything outside ``[a-z0-9_-]``."""
    return _UNSAFE_KEY_CHARS.sub("", key.lower())


def timeout_key(dismissible_id: str, suffix: str = DEFAULT_TIMEOUT_SUFFIX) -> str:
    """Unprefixed name of the entry holding the expiry of *dismissible_id*."""
    return sanitize_key(dismissible_id) + suffix


def key_prefix(args: DismissibleArgs, tenant_prefix: Callable[[str], str]) -> str:
    if args.is_global or not args.tenant:
        return ""
    return tenant_prefix(args.tenant)


def build_keys(
    args: DismissibleArgs,
    tenant_prefix: Callable[[str], str],
    *,
    suffix: str = DEFAULT_TIMEOUT_SUFFIX,
) -> DismissibleKeys:
    prefix = key_prefix(args, tenant_prefix)
    return DismissibleKeys(
        prefix=prefix,
        value_key=prefix + args.id,
        timeout_key=prefix + timeout_key(args.id, suffix),
    )


__all__ = [
    "DEFAULT_TIMEOUT_SUFFIX",
    "DismissibleKeys",
    "build_keys",
    "key_prefix",
    "sanitize_key",
    "timeout_key",
]
