"""LokiStack resource store backed by the Kubernetes API."""

from __future__ import annotations

import os
import time
from typing import Any

from kubernetes import client
from kubernetes.client.exceptions import ApiException

from ... import metrics
from ...constants import API_GROUP, API_VERSION, PLURAL_LOKISTACK
from ...exceptions import (
    NotFoundError,
    ReadFailureError,
    WriteConflictError,
    WriteFailureError,
)
from ...utils.errors import sanitize_exception
from ...utils.rate_limit import is_rate_limit_error, rate_limit_k8s
from .base import NamespacedName

_REQUEST_TIMEOUT_SECONDS = float(os.getenv("K8S_REQUEST_TIMEOUT_SECONDS", "30.0"))


class KubernetesStore:
    """Read LokiStacks and replace their status through CustomObjectsApi."""

    def __init__(
        self,
        api: client.CustomObjectsApi | None = None,
        request_timeout: float | None = _REQUEST_TIMEOUT_SECONDS,
    ):
        """Initialize the store.

        Args:
            api: CustomObjectsApi instance (loaded from cluster config when omitted)
            request_timeout: Timeout in seconds applied to every API call
        """
        self.api = api or get_custom_objects_api()
        self.request_timeout = request_timeout

    def get(self, key: NamespacedName) -> dict[str, Any]:
        """Get the LokiStack identified by key."""
        start_time = time.time()
        try:
            stack = rate_limit_k8s(self.api.get_namespaced_custom_object)(
                group=API_GROUP,
                version=API_VERSION,
                namespace=key.namespace,
                plural=PLURAL_LOKISTACK,
                name=key.name,
                _request_timeout=self.request_timeout,
            )
            metrics.api_call_total.labels(api_type="k8s", operation="get_lokistack", result="success").inc()
            return stack
        except ApiException as e:
            if e.status == 404:
                metrics.api_call_total.labels(api_type="k8s", operation="get_lokistack", result="not_found").inc()
                raise NotFoundError(key, "lokistack not found") from e
            self._record_error("get_lokistack", e)
            raise ReadFailureError(key, f"failed to lookup lokistack: {sanitize_exception(e)}") from e
        finally:
            duration = time.time() - start_time
            metrics.api_call_duration_seconds.labels(api_type="k8s", operation="get_lokistack").observe(duration)

    def update_status(self, resource: dict[str, Any]) -> None:
        """Replace the status sub-resource of a LokiStack.

        The body carries the resourceVersion that was read, so the API server
        rejects the write with 409 Conflict if the object changed meanwhile.
        """
        meta = resource.get("metadata", {})
        key = NamespacedName(namespace=meta.get("namespace", ""), name=meta.get("name", ""))

        start_time = time.time()
        try:
            rate_limit_k8s(self.api.replace_namespaced_custom_object_status)(
                group=API_GROUP,
                version=API_VERSION,
                namespace=key.namespace,
                plural=PLURAL_LOKISTACK,
                name=key.name,
                body=resource,
                _request_timeout=self.request_timeout,
            )
            metrics.api_call_total.labels(api_type="k8s", operation="update_lokistack_status", result="success").inc()
        except ApiException as e:
            self._record_error("update_lokistack_status", e)
            if e.status == 409:
                raise WriteConflictError(key, "lokistack status was modified concurrently") from e
            raise WriteFailureError(key, f"failed to update lokistack status: {sanitize_exception(e)}") from e
        finally:
            duration = time.time() - start_time
            metrics.api_call_duration_seconds.labels(
                api_type="k8s", operation="update_lokistack_status"
            ).observe(duration)

    def _record_error(self, operation: str, e: ApiException) -> None:
        metrics.api_call_total.labels(api_type="k8s", operation=operation, result="error").inc()
        if is_rate_limit_error(e):
            metrics.rate_limit_hits_total.labels(api_type="k8s").inc()


def load_kube_config() -> None:
    """Load in-cluster config, falling back to the local kubeconfig."""
    from kubernetes import config

    try:
        config.load_incluster_config()
    except config.ConfigException:
        config.load_kube_config()


def get_custom_objects_api() -> client.CustomObjectsApi:
    """Get Kubernetes CustomObjectsApi client.

    Returns:
        CustomObjectsApi instance
    """
    load_kube_config()
    return client.CustomObjectsApi()


def get_core_api() -> client.CoreV1Api:
    """Get Kubernetes CoreV1Api client.

    Returns:
        CoreV1Api instance
    """
    load_kube_config()
    return client.CoreV1Api()
