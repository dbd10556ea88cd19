"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["persistent_dismissible.testing.fixtures"]
"""

from persistent_dismissible.testing.fakes import FakeClock, RecordingUserMetaStore, StoreCall

__all__ = ["FakeClock", "RecordingUserMetaStore", "StoreCall"]
