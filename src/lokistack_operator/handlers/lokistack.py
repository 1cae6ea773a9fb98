"""Handler for LokiStack CRD status."""

from __future__ import annotations

import os
from typing import Any

import kopf
from kubernetes import client

from .. import metrics
from ..constants import API_GROUP_VERSION, KIND_LOKISTACK
from ..exceptions import DegradedError, StatusError, WriteConflictError
from ..services.store import KubernetesStore, NamespacedName, ResourceStore
from ..services.store.kubernetes import get_core_api
from ..status import refresh, set_degraded_condition
from ..tracing import add_span_attribute, trace_span
from ..utils.events import emit_condition_changed, emit_degraded
from ..validation import validate_object_storage, validate_replication
from .base import BaseHandler

_REFRESH_INTERVAL_SECONDS = float(os.getenv("STATUS_REFRESH_INTERVAL_SECONDS", "30"))

# Requeue delays handed to kopf; conflicts are retried against a fresh read soon
_CONFLICT_DELAY_SECONDS = 1.0
_ERROR_DELAY_SECONDS = 10.0


def as_temporary_error(error: StatusError) -> kopf.TemporaryError:
    """Convert a resource store failure into a kopf requeue."""
    delay = _CONFLICT_DELAY_SECONDS if isinstance(error, WriteConflictError) else _ERROR_DELAY_SECONDS
    return kopf.TemporaryError(str(error), delay=delay)


class LokiStackHandler(BaseHandler):
    """Handler keeping LokiStack status conditions current."""

    def __init__(
        self,
        store: ResourceStore | None = None,
        core_api: client.CoreV1Api | None = None,
    ):
        """Initialize LokiStack handler.

        Args:
            store: Resource store for LokiStacks (Kubernetes API when omitted)
            core_api: CoreV1Api for pods and secrets (loaded lazily when omitted)
        """
        super().__init__(KIND_LOKISTACK)
        self._store = store
        self._core_api = core_api

    @property
    def store(self) -> ResourceStore:
        if self._store is None:
            self._store = KubernetesStore()
        return self._store

    @property
    def core_api(self) -> client.CoreV1Api:
        if self._core_api is None:
            self._core_api = get_core_api()
        return self._core_api

    def reconcile(self, spec: dict[str, Any], meta: dict[str, Any]) -> None:
        """Validate a LokiStack and refresh its status conditions."""
        key = NamespacedName(namespace=meta.get("namespace", "default"), name=meta.get("name", ""))

        with trace_span(
            "reconcile_lokistack",
            kind=KIND_LOKISTACK,
            attributes={"lokistack.name": key.name, "lokistack.namespace": key.namespace},
        ):
            try:
                with trace_span("validate_lokistack", kind=KIND_LOKISTACK):
                    validate_replication(spec)
                    validate_object_storage(self.core_api, key.namespace, spec)
            except DegradedError as e:
                self.handle_degraded(meta, key, e)
                return

            try:
                with trace_span("refresh_status", kind=KIND_LOKISTACK):
                    result = refresh(self.store, self.core_api, key)
            except StatusError as e:
                raise as_temporary_error(e) from e

            if result is None:
                self.log_info(meta, "LokiStack not found, skipping status refresh", reason="NotFound")
                return

            condition_type, changed = result
            add_span_attribute("lokistack.condition", condition_type)
            metrics.resource_status_total.labels(kind=self.kind, status=condition_type.lower()).inc()
            if changed:
                metrics.condition_changes_total.labels(kind=self.kind, condition=condition_type).inc()
                emit_condition_changed(meta, condition_type)
                self.log_info(
                    meta,
                    f"Condition {condition_type} set to True",
                    event="condition_changed",
                    reason=condition_type,
                )

    def handle_degraded(
        self,
        meta: dict[str, Any],
        key: NamespacedName,
        error: DegradedError,
    ) -> None:
        """Report a validation failure as the Degraded condition.

        Raises:
            kopf.TemporaryError: If the degradation asks for a requeue or the
                status write failed
        """
        self.log_warning(meta, error.message, event="degraded", reason=error.reason)

        try:
            changed = set_degraded_condition(self.store, key, error.message, error.reason)
        except StatusError as e:
            raise as_temporary_error(e) from e

        metrics.resource_status_total.labels(kind=self.kind, status="degraded").inc()
        if changed:
            metrics.condition_changes_total.labels(kind=self.kind, condition="Degraded").inc()
            emit_degraded(meta, error.reason, error.message)

        if error.requeue:
            raise kopf.TemporaryError(error.message, delay=_ERROR_DELAY_SECONDS)


# Global handler instance
_handler = LokiStackHandler()


@kopf.on.create(API_GROUP_VERSION, KIND_LOKISTACK)
@kopf.on.update(API_GROUP_VERSION, KIND_LOKISTACK)
@kopf.on.resume(API_GROUP_VERSION, KIND_LOKISTACK)
def handle_lokistack(
    spec: dict[str, Any],
    meta: dict[str, Any],
    **kwargs: Any,
) -> None:
    """Handle LokiStack reconciliation."""
    _handler.reconcile_with_metrics(meta, lambda: _handler.reconcile(spec, meta))


@kopf.timer(API_GROUP_VERSION, KIND_LOKISTACK, interval=_REFRESH_INTERVAL_SECONDS)
def refresh_lokistack(
    spec: dict[str, Any],
    meta: dict[str, Any],
    **kwargs: Any,
) -> None:
    """Periodically refresh LokiStack status from its component pods."""
    _handler.reconcile_with_metrics(meta, lambda: _handler.reconcile(spec, meta), emit_started=False)
