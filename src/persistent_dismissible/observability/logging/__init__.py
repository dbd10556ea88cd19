"""Observability – structured logging helpers."""
from persistent_dismissible.observability.logging.factory import JsonLoggerFactory
from persistent_dismissible.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
