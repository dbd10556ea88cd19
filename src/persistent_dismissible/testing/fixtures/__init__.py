"""Testing fixtures – pytest fixtures for fake doubles."""
try:
    import pytest  # noqa: F401

    from persistent_dismissible.testing.fixtures.clock import fake_clock
    from persistent_dismissible.testing.fixtures.dismissible import (
        dismissibles,
        recording_store,
        request_context,
    )

except ImportError:
    pass

__all__ = [
    "dismissibles",
    "fake_clock",
    "recording_store",
    "request_context",
]
