"""Main entry point for the LokiStack Operator.

Run with ``kopf run -m lokistack_operator.main``.
"""

from __future__ import annotations

import os
import threading
from typing import Any

import kopf
from werkzeug.serving import BaseWSGIServer, make_server

from . import handlers  # noqa: F401
from . import health
from . import logging as structured_logging
from .tracing import initialize_tracing

_server: BaseWSGIServer | None = None


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
    """Configure the operator."""
    global _server

    structured_logging.setup_structured_logging()
    initialize_tracing()

    # Keep kopf's own bookkeeping out of the status sub-resource
    settings.persistence.progress_storage = kopf.AnnotationsProgressStorage()
    settings.persistence.diffbase_storage = kopf.AnnotationsDiffBaseStorage()

    settings.posting.level = 0
    settings.networking.request_timeout = float(os.getenv("K8S_REQUEST_TIMEOUT_SECONDS", "30.0"))
    settings.execution.max_workers = 4

    # Metrics and health endpoints
    metrics_port = int(os.getenv("METRICS_PORT", "8080"))
    _server = make_server("", metrics_port, health.create_combined_wsgi_app(), threaded=True)
    threading.Thread(target=_server.serve_forever, daemon=True).start()

    health.mark_ready()


@kopf.on.cleanup()
def shutdown(**_: Any) -> None:
    """Stop reporting ready and close the metrics server."""
    global _server

    health.mark_not_ready()
    if _server is not None:
        _server.shutdown()
        _server = None
