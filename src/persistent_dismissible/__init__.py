"""
persistent_dismissible – per-user dismissible flags with an optional lifespan.

Import path convention::

    from persistent_dismissible.application.dismissible import PersistentDismissible
    from persistent_dismissible.application.dismissible import InMemoryUserMetaStore
    from persistent_dismissible.adapters.redis import RedisUserMetaStore
    from persistent_dismissible.config.settings import DismissibleSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
