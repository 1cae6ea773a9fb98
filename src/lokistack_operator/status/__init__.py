"""LokiStack status reconciliation."""

from .components import collect_components_status, refresh, set_components_status
from .lokistack import (
    set_degraded_condition,
    set_failed_condition,
    set_pending_condition,
    set_ready_condition,
)

__all__ = [
    "set_ready_condition",
    "set_failed_condition",
    "set_degraded_condition",
    "set_pending_condition",
    "collect_components_status",
    "set_components_status",
    "refresh",
]
