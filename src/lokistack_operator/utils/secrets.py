"""Utilities for reading Kubernetes secrets."""

from __future__ import annotations

import base64

from kubernetes import client


def read_secret_data(
    api: client.CoreV1Api,
    namespace: str,
    secret_name: str,
) -> dict[str, str]:
    """Read all data from a Kubernetes secret.

    Args:
        api: Kubernetes API client
        namespace: Namespace of the secret
        secret_name: Name of the secret

    Returns:
        Dictionary of secret data (decoded)

    Raises:
        client.exceptions.ApiException: If the secret cannot be read
    """
    secret = api.read_namespaced_secret(name=secret_name, namespace=namespace)
    result = {}
    for key, value in (secret.data or {}).items():
        if isinstance(value, str):
            try:
                result[key] = base64.b64decode(value, validate=True).decode("utf-8")
            except ValueError:
                # Already decoded
                result[key] = value
        else:
            result[key] = value.decode("utf-8")
    return result
