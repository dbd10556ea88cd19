"""SQLAlchemy adapter – SqlAlchemyUserMetaStore."""
from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from persistent_dismissible.adapters import serialization
from persistent_dismissible.adapters.sqlalchemy.models import Base, UserMetaModel
from persistent_dismissible.application.dismissible.args import UserRef
from persistent_dismissible.application.dismissible.store import UserMetaStore


class SqlAlchemyUserMetaStore(UserMetaStore):
    """User meta persisted in the ``user_meta`` table.

    Every operation runs in its own short session and commits before
    returning.  ``add`` returns the new ``umeta_id``; a unique-constraint
    violation means the key already exists and is reported as ``False``.

    The store **does not** create its table.  Call :meth:`create_table`
    once (app startup or a migration) before using it.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning an
        :class:`~sqlalchemy.ext.asyncio.AsyncSession`, e.g. a
        :class:`SqlAlchemySessionFactory` or an ``async_sessionmaker``.
    """

    def __init__(self, session_factory: Any, *, prefix_template: str | None = None) -> None:
        self._session_factory = session_factory
        if prefix_template is not None:
            self.prefix_template = prefix_template

    @classmethod
    async def create_table(cls, bind: Any) -> None:
        """Create the ``user_meta`` table if it does not exist."""
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, tables=[UserMetaModel.__table__])

    @staticmethod
    def _match(user_id: UserRef, key: str) -> tuple[Any, Any]:
        return UserMetaModel.user_id == str(user_id), UserMetaModel.meta_key == key

    async def get(self, user_id: UserRef, key: str) -> Any | None:
        stmt = select(UserMetaModel.meta_value).where(*self._match(user_id, key))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def add(self, user_id: UserRef, key: str, value: Any) -> int | bool:
        serialization.ensure_serialisable(value)
        row = UserMetaModel(user_id=str(user_id), meta_key=key, meta_value=value)
        async with self._session_factory() as session:
            session.add(row)
            try:
                await session.flush()
                row_id = row.umeta_id
                await session.commit()
            except IntegrityError:
                await session.rollback()
                return False
            return row_id

    async def update(self, user_id: UserRef, key: str, value: Any) -> bool:
        serialization.ensure_serialisable(value)
        stmt = update(UserMetaModel).where(*self._match(user_id, key)).values(meta_value=value)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                session.add(UserMetaModel(user_id=str(user_id), meta_key=key, meta_value=value))
            try:
                await session.commit()
            except IntegrityError:
                # a concurrent add() created the row between our UPDATE and INSERT
                await session.rollback()
                return False
            return True

    async def delete(self, user_id: UserRef, key: str) -> bool:
        stmt = delete(UserMetaModel).where(*self._match(user_id, key))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount > 0


__all__ = ["SqlAlchemyUserMetaStore"]
