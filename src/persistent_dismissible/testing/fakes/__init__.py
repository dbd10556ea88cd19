"""Testing fakes – in-memory doubles for the dismissible ports."""
from persistent_dismissible.testing.fakes.clock import FAKE_NOW, FakeClock
from persistent_dismissible.testing.fakes.user_meta import RecordingUserMetaStore, StoreCall
from persistent_dismissible.kernel.time import FrozenClock

__all__ = ["FAKE_NOW", "FakeClock", "FrozenClock", "RecordingUserMetaStore", "StoreCall"]
