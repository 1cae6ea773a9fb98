"""Component pod status collection and overall LokiStack status refresh."""

from __future__ import annotations

from typing import Any

from kubernetes import client

from ..constants import (
    COND_FAILED,
    COND_PENDING,
    COND_READY,
    LABEL_COMPONENT,
    LABEL_INSTANCE,
    POD_FAILED,
    POD_PENDING,
    POD_UNKNOWN,
)
from ..exceptions import NotFoundError
from ..services.store.base import NamespacedName, ResourceStore
from ..utils.rate_limit import rate_limit_k8s
from .lokistack import set_failed_condition, set_pending_condition, set_ready_condition

# Status field name -> app.kubernetes.io/component label value
COMPONENTS = {
    "compactor": "compactor",
    "distributor": "distributor",
    "indexGateway": "index-gateway",
    "ingester": "ingester",
    "querier": "querier",
    "queryFrontend": "query-frontend",
    "gateway": "lokistack-gateway",
    "ruler": "ruler",
}


def list_component_pods(
    api: client.CoreV1Api,
    namespace: str,
    stack_name: str,
    component: str,
) -> dict[str, list[str]]:
    """List the pods of one LokiStack component grouped by phase.

    Args:
        api: Kubernetes API client
        namespace: Namespace of the LokiStack
        stack_name: Name of the LokiStack
        component: Component label value

    Returns:
        Mapping of pod phase to sorted pod names
    """
    selector = f"{LABEL_INSTANCE}={stack_name},{LABEL_COMPONENT}={component}"
    pods = rate_limit_k8s(api.list_namespaced_pod)(namespace=namespace, label_selector=selector)

    phases: dict[str, list[str]] = {}
    for pod in pods.items:
        phase = (pod.status.phase if pod.status else None) or POD_UNKNOWN
        phases.setdefault(phase, []).append(pod.metadata.name)

    return {phase: sorted(names) for phase, names in phases.items()}


def collect_components_status(api: client.CoreV1Api, key: NamespacedName) -> dict[str, Any]:
    """Collect pod phases for every LokiStack component."""
    return {
        field: list_component_pods(api, key.namespace, key.name, component)
        for field, component in COMPONENTS.items()
    }


def set_components_status(
    store: ResourceStore,
    api: client.CoreV1Api,
    key: NamespacedName,
) -> bool:
    """Write status.components if the observed pod phases changed.

    Returns:
        True if the status was written
    """
    try:
        stack = store.get(key)
    except NotFoundError:
        return False

    components = collect_components_status(api, key)

    status: dict[str, Any] = stack.get("status") or {}
    if status.get("components") == components:
        return False

    status["components"] = components
    stack["status"] = status
    store.update_status(stack)
    return True


def count_pods(components: dict[str, Any], phase: str) -> int:
    """Count pods in a phase across all components."""
    return sum(len((pods or {}).get(phase) or []) for pods in components.values())


def refresh(
    store: ResourceStore,
    api: client.CoreV1Api,
    key: NamespacedName,
) -> tuple[str, bool] | None:
    """Refresh component status and report Failed, Pending or Ready.

    Failed and unknown pods take precedence over pending ones.

    Returns:
        The reported condition type and whether it was written, or None if
        the LokiStack is gone
    """
    set_components_status(store, api, key)

    try:
        stack = store.get(key)
    except NotFoundError:
        return None

    components = (stack.get("status") or {}).get("components") or {}

    if count_pods(components, POD_FAILED) or count_pods(components, POD_UNKNOWN):
        return COND_FAILED, set_failed_condition(store, key)

    if count_pods(components, POD_PENDING):
        return COND_PENDING, set_pending_condition(store, key)

    return COND_READY, set_ready_condition(store, key)
