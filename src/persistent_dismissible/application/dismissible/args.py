"""Dismissible arguments – defaults, normalisation and validation."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

UserRef: TypeAlias = int | str


@dataclasses.dataclass(frozen=True)
class DismissibleArgs:
    """Fully resolved identification of one dismissible for one user.

    ``lifespan`` is in seconds; ``0`` means the dismissible never expires.
    ``is_global`` flags are shared by every tenant of the installation,
    tenant-local ones are stored under the prefix of ``tenant``.
    """

    id: str = ""
    user_id: UserRef | None = None
    value: Any = True
    lifespan: int = 0
    is_global: bool = True
    tenant: str | None = None

    @property
    def expires(self) -> bool:
        return self.lifespan > 0


ArgsInput: TypeAlias = DismissibleArgs | Mapping[str, Any] | str | None

_FIELDS = frozenset(f.name for f in dataclasses.fields(DismissibleArgs))
_ALIASES = {
    "global": "is_global",
    "life": "lifespan",
    "lifespan_seconds": "lifespan",
}


def _absint(value: Any) -> int:
    try:
        return abs(int(value))
    except (TypeError, ValueError):
        return 0


def _as_dict(raw: ArgsInput) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, str):
        return {"id": raw}
    if isinstance(raw, DismissibleArgs):
        return {name: getattr(raw, name) for name in _FIELDS}
    supplied: dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELDS:
            raise TypeError(f"Unknown dismissible argument {key!r}")
        supplied[name] = value
    return supplied


def resolve_args(
    raw: ArgsInput = None,
    *,
    current_user: Callable[[], UserRef | None],
    default_tenant: str | None = None,
    **overrides: Any,
) -> DismissibleArgs:
    """Merge caller-supplied arguments over the defaults.

    *raw* may be a mapping, a :class:`DismissibleArgs`, or a bare id string;
    keyword *overrides* win over *raw*.  ``None`` counts as "not supplied",
    so ``user_id`` then falls back to *current_user* and ``tenant`` to
    *default_tenant*.  *current_user* is only called when needed.
    """
    supplied = _as_dict(raw)
    supplied.update(_as_dict(overrides))
    supplied = {k: v for k, v in supplied.items() if v is not None}

    if "user_id" not in supplied:
        supplied["user_id"] = current_user()
    if "tenant" not in supplied and default_tenant:
        supplied["tenant"] = default_tenant
    supplied["id"] = str(supplied.get("id", ""))
    supplied["lifespan"] = _absint(supplied.get("lifespan", 0))
    supplied["is_global"] = bool(supplied.get("is_global", True))
    return DismissibleArgs(**supplied)


def check_args(args: DismissibleArgs) -> bool:
    """``True`` when *args* identify a dismissible that can be stored."""
    if not args.id or not args.user_id:
        return False
    # tenant-local flags need a tenant to build their key prefix
    return args.is_global or bool(args.tenant)


__all__ = ["ArgsInput", "DismissibleArgs", "UserRef", "check_args", "resolve_args"]
