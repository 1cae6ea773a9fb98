"""Liveness, readiness and metrics endpoints served on METRICS_PORT."""

import json
import threading
from typing import Any

from prometheus_client import make_wsgi_app
from werkzeug.wrappers import Response

# Set once kopf startup handlers have finished configuring the operator
_ready = threading.Event()


def mark_ready() -> None:
    _ready.set()


def mark_not_ready() -> None:
    _ready.clear()


def _json(body: dict[str, str], status: int) -> Response:
    return Response(json.dumps(body), mimetype="application/json", status=status)


def create_combined_wsgi_app() -> Any:
    """Route /healthz and /readyz, and hand every other path to prometheus_client.

    /readyz answers 503 until :func:`mark_ready` has been called.
    """
    metrics_app = make_wsgi_app()

    def combined_app(environ: dict[str, Any], start_response: Any) -> list[bytes]:
        path = environ.get("PATH_INFO", "")

        if path == "/healthz":
            return _json({"status": "ok"}, 200)(environ, start_response)
        if path == "/readyz":
            if _ready.is_set():
                return _json({"status": "ready"}, 200)(environ, start_response)
            return _json({"status": "starting"}, 503)(environ, start_response)
        return metrics_app(environ, start_response)

    return combined_app
