"""SQLAlchemy adapter – session factory, user_meta model and store."""
from persistent_dismissible.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from persistent_dismissible.adapters.sqlalchemy.mixins import TimestampMixin
from persistent_dismissible.adapters.sqlalchemy.models import Base, UserMetaModel
from persistent_dismissible.adapters.sqlalchemy.user_meta import SqlAlchemyUserMetaStore

__all__ = [
    "Base",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUserMetaStore",
    "TimestampMixin",
    "UserMetaModel",
]
