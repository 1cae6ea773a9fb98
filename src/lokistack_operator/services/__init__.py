"""External services used by the LokiStack Operator."""
