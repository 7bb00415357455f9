"""Exceptions raised by rdocgen."""

from __future__ import annotations


class RdocgenError(Exception):
    """Base exception for rdocgen operations."""

    pass


class SchemaError(RdocgenError, ValueError):
    """Raised when the rustdoc document does not have the expected shape."""

    def __init__(self, message: str, item_id: str | None = None):
        super().__init__(message)
        self.item_id = item_id
