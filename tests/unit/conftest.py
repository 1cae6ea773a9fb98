"""Shared fixtures for unit tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from lokistack_operator.exceptions import NotFoundError, ReadFailureError
from lokistack_operator.services.store.base import NamespacedName


class FakeStore:
    """In-memory resource store counting reads and writes."""

    def __init__(self, stack: dict[str, Any] | None = None, get_error: Exception | None = None):
        self.stack = stack
        self.get_error = get_error
        self.update_error: Exception | None = None
        self.get_calls = 0
        self.updates: list[dict[str, Any]] = []

    def get(self, key: NamespacedName) -> dict[str, Any]:
        self.get_calls += 1
        if self.get_error is not None:
            raise self.get_error
        meta = (self.stack or {}).get("metadata", {})
        if self.stack is None or (meta.get("namespace"), meta.get("name")) != (key.namespace, key.name):
            raise NotFoundError(key, "something wasn't found")
        return copy.deepcopy(self.stack)

    def update_status(self, resource: dict[str, Any]) -> None:
        if self.update_error is not None:
            raise self.update_error
        self.updates.append(copy.deepcopy(resource))
        self.stack = copy.deepcopy(resource)

    @property
    def conditions(self) -> list[dict[str, Any]]:
        return (self.stack or {}).get("status", {}).get("conditions", [])


def make_stack(conditions: list[dict[str, Any]] | None = None, **status: Any) -> dict[str, Any]:
    """Build a LokiStack object named my-stack in some-ns."""
    stack: dict[str, Any] = {
        "apiVersion": "loki.grafana.com/v1",
        "kind": "LokiStack",
        "metadata": {
            "name": "my-stack",
            "namespace": "some-ns",
            "generation": 1,
            "resourceVersion": "100",
        },
        "spec": {},
    }
    if conditions is not None or status:
        stack["status"] = dict(status)
        if conditions is not None:
            stack["status"]["conditions"] = conditions
    return stack


@pytest.fixture
def key() -> NamespacedName:
    return NamespacedName(namespace="some-ns", name="my-stack")


@pytest.fixture
def bad_request_store(key: NamespacedName) -> FakeStore:
    return FakeStore(get_error=ReadFailureError(key, "something wasn't found"))


@pytest.fixture
def stack_factory():
    return make_stack


@pytest.fixture
def store_factory():
    return FakeStore
