"""Resource stores for LokiStack objects."""

from .base import NamespacedName, ResourceStore
from .kubernetes import KubernetesStore

__all__ = [
    "NamespacedName",
    "ResourceStore",
    "KubernetesStore",
]
