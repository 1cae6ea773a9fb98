"""Tests for the Kubernetes-backed LokiStack store."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
from kubernetes.client.exceptions import ApiException

from lokistack_operator.exceptions import (
    NotFoundError,
    ReadFailureError,
    WriteConflictError,
    WriteFailureError,
)
from lokistack_operator.services.store.base import NamespacedName
from lokistack_operator.services.store.kubernetes import KubernetesStore

KEY = NamespacedName(namespace="some-ns", name="my-stack")

STACK = {
    "apiVersion": "loki.grafana.com/v1",
    "kind": "LokiStack",
    "metadata": {"name": "my-stack", "namespace": "some-ns", "resourceVersion": "42"},
    "status": {"conditions": []},
}


@pytest.fixture(autouse=True)
def no_rate_limit():
    with patch(
        "lokistack_operator.services.store.kubernetes.rate_limit_k8s",
        side_effect=lambda func: func,
    ):
        yield


class TestKubernetesStoreGet:
    """Test cases for reading LokiStacks."""

    @patch("lokistack_operator.services.store.kubernetes.metrics")
    def test_get_success(self, mock_metrics):
        """Test reading a LokiStack."""
        mock_api = Mock()
        mock_api.get_namespaced_custom_object.return_value = STACK
        store = KubernetesStore(api=mock_api, request_timeout=5.0)

        result = store.get(KEY)

        assert result == STACK
        mock_api.get_namespaced_custom_object.assert_called_once_with(
            group="loki.grafana.com",
            version="v1",
            namespace="some-ns",
            plural="lokistacks",
            name="my-stack",
            _request_timeout=5.0,
        )
        mock_metrics.api_call_total.labels.assert_called_with(
            api_type="k8s", operation="get_lokistack", result="success"
        )
        assert mock_metrics.api_call_duration_seconds.labels.called

    def test_get_not_found(self):
        """Test that 404 is reported as NotFoundError."""
        mock_api = Mock()
        mock_api.get_namespaced_custom_object.side_effect = ApiException(status=404, reason="Not Found")
        store = KubernetesStore(api=mock_api)

        with pytest.raises(NotFoundError) as exc_info:
            store.get(KEY)

        assert exc_info.value.key == KEY

    @pytest.mark.parametrize("status", [400, 403, 500])
    def test_get_other_error(self, status):
        """Test that other API errors are reported as ReadFailureError."""
        mock_api = Mock()
        mock_api.get_namespaced_custom_object.side_effect = ApiException(status=status, reason="Bad")
        store = KubernetesStore(api=mock_api)

        with pytest.raises(ReadFailureError) as exc_info:
            store.get(KEY)

        assert not isinstance(exc_info.value, NotFoundError)
        assert "some-ns/my-stack" in str(exc_info.value)

    @patch("lokistack_operator.services.store.kubernetes.metrics")
    def test_get_rate_limited(self, mock_metrics):
        """Test that throttled reads are counted."""
        mock_api = Mock()
        mock_api.get_namespaced_custom_object.side_effect = ApiException(status=429, reason="Too Many Requests")
        store = KubernetesStore(api=mock_api)

        with pytest.raises(ReadFailureError):
            store.get(KEY)

        mock_metrics.rate_limit_hits_total.labels.assert_called_once_with(api_type="k8s")


class TestKubernetesStoreUpdateStatus:
    """Test cases for writing LokiStack status."""

    def test_update_status_success(self):
        """Test replacing the status sub-resource with the read version."""
        mock_api = Mock()
        store = KubernetesStore(api=mock_api, request_timeout=None)

        store.update_status(STACK)

        mock_api.replace_namespaced_custom_object_status.assert_called_once_with(
            group="loki.grafana.com",
            version="v1",
            namespace="some-ns",
            plural="lokistacks",
            name="my-stack",
            body=STACK,
            _request_timeout=None,
        )
        body = mock_api.replace_namespaced_custom_object_status.call_args[1]["body"]
        assert body["metadata"]["resourceVersion"] == "42"

    def test_update_status_conflict(self):
        """Test that 409 is reported as WriteConflictError."""
        mock_api = Mock()
        mock_api.replace_namespaced_custom_object_status.side_effect = ApiException(status=409, reason="Conflict")
        store = KubernetesStore(api=mock_api)

        with pytest.raises(WriteConflictError):
            store.update_status(STACK)

    def test_update_status_failure(self):
        """Test that other write errors are reported as WriteFailureError."""
        mock_api = Mock()
        mock_api.replace_namespaced_custom_object_status.side_effect = ApiException(status=500, reason="Boom")
        store = KubernetesStore(api=mock_api)

        with pytest.raises(WriteFailureError) as exc_info:
            store.update_status(STACK)

        assert not isinstance(exc_info.value, WriteConflictError)


class TestKubernetesStoreInit:
    """Test cases for client construction."""

    @patch("lokistack_operator.services.store.kubernetes.get_custom_objects_api")
    def test_default_api_is_loaded(self, mock_get_api):
        """Test that the API client is created from cluster config when omitted."""
        store = KubernetesStore()

        assert store.api is mock_get_api.return_value
