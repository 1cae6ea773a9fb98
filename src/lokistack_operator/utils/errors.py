"""Redaction of object storage credentials from error text."""

import re

# Keys of the object storage secret whose values must never reach logs or events
SENSITIVE_FIELDS = (
    "access_key_id",
    "access_key_secret",
    "secret_access_key",
    "account_key",
    "key.json",
    "password",
    "credentials",
    "token",
)

_SENSITIVE_VALUE = re.compile(
    r"(?P<field>" + "|".join(re.escape(f) for f in SENSITIVE_FIELDS) + r")[:=\s]+[^\s,;)]+",
    re.IGNORECASE,
)


def sanitize_error_message(message: str) -> str:
    """Replace ``field: value`` / ``field=value`` credentials with ``[REDACTED]``."""
    return _SENSITIVE_VALUE.sub(lambda m: f"{m.group('field')}: [REDACTED]", message)


def sanitize_exception(error: Exception) -> str:
    return sanitize_error_message(str(error))
