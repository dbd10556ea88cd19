"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError

Dismissible operations never raise these for control flow: invalid
arguments and store misses come back as plain return values.  The
hierarchy covers configuration, serialisation and programmer errors.
"""

from persistent_dismissible.kernel.errors.application import ApplicationError
from persistent_dismissible.kernel.errors.base import BaseError
from persistent_dismissible.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
]
