"""JSON-lines logging for LokiStack status events."""

import json
import logging
import os
import sys
from typing import Any


def setup_structured_logging() -> None:
    """Log bare JSON messages to stdout at LOG_LEVEL (default INFO)."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_resource_event(
    logger: logging.Logger,
    controller: str,
    resource_kind: str,
    resource_name: str,
    namespace: str,
    uid: str,
    event: str,
    reason: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """Emit one JSON object describing what happened to a LokiStack.

    Extra keyword arguments become additional top-level keys. Values that
    are not JSON serialisable are rendered with ``str``.
    """
    record = {
        "controller": controller,
        "resource": resource_kind,
        "namespace": namespace,
        "name": resource_name,
        "uid": uid,
        "event": event,
        "reason": reason,
        "message": message,
        **kwargs,
    }
    logger.log(level, json.dumps(record, default=str))
