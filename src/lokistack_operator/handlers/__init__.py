"""Handler modules for CRD resources."""

# Import handlers to register them - all handlers register themselves via @kopf decorators
from . import lokistack  # noqa: F401
