"""Validation of the LokiStack object storage and replication settings."""

from __future__ import annotations

from typing import Any

from kubernetes import client

from ..constants import (
    REASON_INVALID_OBJECT_STORAGE_SECRET,
    REASON_INVALID_REPLICATION_CONFIGURATION,
    REASON_MISSING_OBJECT_STORAGE_SECRET,
)
from ..exceptions import DegradedError
from ..utils.secrets import read_secret_data

# Keys every object storage secret of a given type must provide
REQUIRED_SECRET_KEYS = {
    "azure": ["environment", "container", "account_name", "account_key"],
    "gcs": ["bucketname", "key.json"],
    "s3": ["endpoint", "bucketnames", "access_key_id", "access_key_secret"],
    "swift": [
        "auth_url",
        "username",
        "user_domain_name",
        "user_domain_id",
        "user_id",
        "password",
        "domain_id",
        "domain_name",
        "container_name",
    ],
    "alibabacloud": ["endpoint", "bucket", "access_key_id", "secret_access_key"],
}


def validate_object_storage(
    api: client.CoreV1Api,
    namespace: str,
    spec: dict[str, Any],
) -> dict[str, str]:
    """Validate that the object storage secret exists and is complete.

    Args:
        api: Kubernetes API client
        namespace: Namespace of the LokiStack
        spec: LokiStack spec

    Returns:
        Decoded secret data

    Raises:
        DegradedError: If the secret is missing or its contents are invalid
        client.exceptions.ApiException: On any other API failure
    """
    secret_spec = spec.get("storage", {}).get("secret", {})
    secret_name = secret_spec.get("name")
    secret_type = secret_spec.get("type", "")

    if not secret_name:
        raise DegradedError(
            "Missing object storage secret",
            REASON_MISSING_OBJECT_STORAGE_SECRET,
        )

    try:
        data = read_secret_data(api, namespace, secret_name)
    except client.exceptions.ApiException as e:
        if e.status == 404:
            raise DegradedError(
                "Missing object storage secret",
                REASON_MISSING_OBJECT_STORAGE_SECRET,
            ) from e
        raise

    required = REQUIRED_SECRET_KEYS.get(secret_type)
    if required is None:
        raise DegradedError(
            f"Invalid object storage secret contents: unsupported storage type {secret_type!r}",
            REASON_INVALID_OBJECT_STORAGE_SECRET,
        )

    missing = [key for key in required if not data.get(key)]
    if missing:
        raise DegradedError(
            f"Invalid object storage secret contents: missing {', '.join(missing)}",
            REASON_INVALID_OBJECT_STORAGE_SECRET,
        )

    return data


def validate_replication(spec: dict[str, Any]) -> None:
    """Validate the replication settings of a LokiStack spec.

    Raises:
        DegradedError: If the replication factor is defined twice or is below 1
    """
    legacy_factor = spec.get("replicationFactor")
    replication = spec.get("replication") or {}
    factor = replication.get("factor")

    if legacy_factor is not None and factor is not None:
        raise DegradedError(
            "Invalid replication configuration: replicationFactor and replication.factor are mutually exclusive",
            REASON_INVALID_REPLICATION_CONFIGURATION,
        )

    effective = factor if factor is not None else legacy_factor
    if effective is not None and effective < 1:
        raise DegradedError(
            f"Invalid replication configuration: factor {effective} must be at least 1",
            REASON_INVALID_REPLICATION_CONFIGURATION,
        )
