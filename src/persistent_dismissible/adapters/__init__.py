"""Adapters – UserMetaStore backends for Redis and SQLAlchemy."""
