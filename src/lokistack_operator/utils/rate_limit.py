"""Rate limiting utilities for Kubernetes API calls."""

from __future__ import annotations

import os
import threading
import time
from functools import wraps
from typing import Any, Callable, TypeVar

from kubernetes.client.exceptions import ApiException

_F = TypeVar("_F", bound=Callable[..., Any])

# Rate limit configuration
_K8S_RATE_LIMIT_PER_SECOND = float(os.getenv("K8S_RATE_LIMIT_PER_SECOND", "10.0"))

# Last call time, shared by kopf worker threads
_k8s_last_call_time: float = 0.0
_k8s_lock = threading.Lock()


def rate_limit_k8s(func: _F) -> _F:
    """Decorator to rate limit Kubernetes API calls.

    Enforces a minimum interval between calls so that status refreshes of
    many LokiStacks do not overwhelm the API server.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        global _k8s_last_call_time
        min_interval = 1.0 / _K8S_RATE_LIMIT_PER_SECOND

        with _k8s_lock:
            time_since_last_call = time.time() - _k8s_last_call_time
            if time_since_last_call < min_interval:
                time.sleep(min_interval - time_since_last_call)
            _k8s_last_call_time = time.time()

        return func(*args, **kwargs)

    return wrapper  # type: ignore


def is_rate_limit_error(e: ApiException) -> bool:
    """Check if an API exception reports server-side throttling.

    Args:
        e: API exception

    Returns:
        True for HTTP 429, or 503 mentioning a rate limit
    """
    return e.status == 429 or (e.status == 503 and "rate limit" in str(e).lower())
