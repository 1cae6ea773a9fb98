"""Exceptions raised while reconciling LokiStack status."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .services.store.base import NamespacedName


class StatusError(Exception):
    """Base class for resource store failures."""

    def __init__(self, key: NamespacedName, message: str):
        super().__init__(f"{key.namespace}/{key.name}: {message}")
        self.key = key


class NotFoundError(StatusError):
    """The LokiStack no longer exists."""


class ReadFailureError(StatusError):
    """Reading the LokiStack failed for a reason other than not-found."""


class WriteFailureError(StatusError):
    """Writing the LokiStack status failed."""


class WriteConflictError(WriteFailureError):
    """The status write was rejected because the resource version is stale."""


class InvalidConditionError(ValueError):
    """A condition was requested without the inputs it requires."""


class DegradedError(Exception):
    """Upstream validation found a LokiStack in a degraded state.

    Args:
        message: Human-readable detail for the Degraded condition
        reason: Machine-readable reason for the Degraded condition
        requeue: Whether the control loop should retry the reconcile
    """

    def __init__(self, message: str, reason: str, requeue: bool = False):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.requeue = requeue
