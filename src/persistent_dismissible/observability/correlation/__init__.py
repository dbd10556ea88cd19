"""Observability – request correlation context."""
from persistent_dismissible.observability.correlation.context import CorrelationContext, RequestContext

__all__ = ["CorrelationContext", "RequestContext"]
