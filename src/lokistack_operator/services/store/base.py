"""Resource store interface for LokiStack objects."""

from __future__ import annotations

from typing import Any, NamedTuple, Protocol


class NamespacedName(NamedTuple):
    """Identity of a single LokiStack instance."""

    namespace: str
    name: str


class ResourceStore(Protocol):
    """Protocol defining the reads and writes the status reconciler needs."""

    def get(self, key: NamespacedName) -> dict[str, Any]:
        """Get the LokiStack identified by key.

        Raises:
            NotFoundError: If the LokiStack does not exist
            ReadFailureError: On any other read failure
        """
        ...

    def update_status(self, resource: dict[str, Any]) -> None:
        """Replace the status sub-resource of a previously read LokiStack.

        Raises:
            WriteConflictError: If the resource version is stale
            WriteFailureError: On any other write failure
        """
        ...
