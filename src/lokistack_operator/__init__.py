"""LokiStack Operator: keeps LokiStack status conditions current."""

__version__ = "0.1.0"
