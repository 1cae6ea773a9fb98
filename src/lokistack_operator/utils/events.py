"""Utilities for emitting Kubernetes events."""

from __future__ import annotations

from typing import Any

import kopf

from ..constants import (
    COND_READY,
    EVENT_REASON_CONDITION_CHANGED,
    EVENT_REASON_DEGRADED,
    EVENT_REASON_RECONCILE_FAILED,
    EVENT_REASON_RECONCILE_STARTED,
)


def emit_event(
    meta: dict[str, Any],
    reason: str,
    message: str,
    type_: str = "Normal",
) -> None:
    """Emit a Kubernetes event.

    Args:
        meta: Resource metadata
        reason: Event reason
        message: Event message
        type_: Event type (Normal or Warning)
    """
    kopf.event(
        meta,
        reason=reason,
        message=message,
        type=type_,
    )


def emit_reconcile_started(meta: dict[str, Any]) -> None:
    """Emit reconcile started event."""
    emit_event(meta, EVENT_REASON_RECONCILE_STARTED, "Reconciliation started")


def emit_reconcile_failed(meta: dict[str, Any], message: str) -> None:
    """Emit reconcile failed event."""
    emit_event(meta, EVENT_REASON_RECONCILE_FAILED, message, type_="Warning")


def emit_condition_changed(meta: dict[str, Any], condition_type: str) -> None:
    """Emit condition changed event."""
    type_ = "Normal" if condition_type == COND_READY else "Warning"
    emit_event(meta, EVENT_REASON_CONDITION_CHANGED, f"Condition {condition_type} set to True", type_=type_)


def emit_degraded(meta: dict[str, Any], reason: str, message: str) -> None:
    """Emit degraded event."""
    emit_event(meta, EVENT_REASON_DEGRADED, f"{reason}: {message}", type_="Warning")
