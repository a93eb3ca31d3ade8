"""
Error types for scenario records.
"""
from __future__ import annotations


class SchemaError(ValueError):
    """
    Raised when a JSON payload does not match the declared schema of a scenario.

    Covers unknown keys, missing or null required keys, a null root where
    required fields exist, malformed JSON text and field type mismatches.
    """


__all__ = ["SchemaError"]
