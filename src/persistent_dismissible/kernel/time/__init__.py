"""Kernel time – Clock port + implementations."""
from persistent_dismissible.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
