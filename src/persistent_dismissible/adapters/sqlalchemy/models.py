"""SQLAlchemy adapter – ``user_meta`` table."""
from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from persistent_dismissible.adapters.sqlalchemy.mixins import TimestampMixin


class Base(DeclarativeBase):
    pass


class UserMetaModel(TimestampMixin, Base):
    """One row per ``(user_id, meta_key)``.

    The unique constraint is what makes :meth:`SqlAlchemyUserMetaStore.add`
    an add-if-absent operation.
    """

    __tablename__ = "user_meta"
    __table_args__ = (
        UniqueConstraint("user_id", "meta_key", name="uq_user_meta_user_key"),
    )

    umeta_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False)
    meta_value: Mapped[Any] = mapped_column(JSON, nullable=True)


__all__ = ["Base", "UserMetaModel"]
