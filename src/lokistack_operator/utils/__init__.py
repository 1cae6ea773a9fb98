"""Utility functions for the LokiStack Operator."""
