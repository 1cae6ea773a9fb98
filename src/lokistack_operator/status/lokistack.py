"""Condition reconciliation for the LokiStack status sub-resource.

Each setter performs one read and at most one write against the resource
store. A LokiStack that no longer exists is not an error, and a condition
that already reports the requested state is never written again. Store
failures propagate to the caller, which owns requeueing.
"""

from __future__ import annotations

from typing import Any

from ..constants import (
    COND_DEGRADED,
    COND_FAILED,
    COND_PENDING,
    COND_READY,
    MESSAGE_FAILED,
    MESSAGE_PENDING,
    MESSAGE_READY,
    REASON_FAILED_COMPONENTS,
    REASON_PENDING_COMPONENTS,
    REASON_READY_COMPONENTS,
    STATUS_TRUE,
)
from ..exceptions import InvalidConditionError, NotFoundError
from ..services.store.base import NamespacedName, ResourceStore
from ..utils.conditions import condition_matches, find_condition, update_condition


def set_ready_condition(store: ResourceStore, key: NamespacedName) -> bool:
    """Set the Ready condition to True."""
    return _set_condition(store, key, COND_READY, REASON_READY_COMPONENTS, MESSAGE_READY)


def set_failed_condition(store: ResourceStore, key: NamespacedName) -> bool:
    """Set the Failed condition to True."""
    return _set_condition(store, key, COND_FAILED, REASON_FAILED_COMPONENTS, MESSAGE_FAILED)


def set_pending_condition(store: ResourceStore, key: NamespacedName) -> bool:
    """Set the Pending condition to True."""
    return _set_condition(store, key, COND_PENDING, REASON_PENDING_COMPONENTS, MESSAGE_PENDING)


def set_degraded_condition(
    store: ResourceStore,
    key: NamespacedName,
    message: str,
    reason: str,
) -> bool:
    """Set the Degraded condition to True with an explicit cause.

    Args:
        store: Resource store holding the LokiStack
        key: Namespace and name of the LokiStack
        message: Human-readable description of the degradation
        reason: Machine-readable reason, e.g. MissingObjectStorageSecret

    Returns:
        True if the status was written, False if nothing changed

    Raises:
        InvalidConditionError: If message or reason is empty
    """
    if not message or not reason:
        raise InvalidConditionError("Degraded condition requires both a reason and a message")
    return _set_condition(store, key, COND_DEGRADED, reason, message)


def _set_condition(
    store: ResourceStore,
    key: NamespacedName,
    condition_type: str,
    reason: str,
    message: str,
) -> bool:
    try:
        stack = store.get(key)
    except NotFoundError:
        return False

    status: dict[str, Any] = stack.get("status") or {}
    conditions: list[dict[str, Any]] = status.get("conditions") or []

    existing = find_condition(conditions, condition_type)
    if existing is not None and condition_matches(existing, STATUS_TRUE, reason, message):
        return False

    status["conditions"] = update_condition(
        conditions,
        condition_type,
        STATUS_TRUE,
        reason,
        message,
        observed_generation=stack.get("metadata", {}).get("generation"),
    )
    stack["status"] = status

    store.update_status(stack)
    return True
