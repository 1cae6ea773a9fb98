"""Validation producing Degraded reasons for LokiStacks."""

from .storage import validate_object_storage, validate_replication

__all__ = [
    "validate_object_storage",
    "validate_replication",
]
