"""Error kinds surfaced by scan operations."""

from __future__ import annotations


class ScanError(RuntimeError):
    """Base class for failures raised by scan operations."""


class InputFailure(ScanError):
    """A required input was missing, empty, or rejected."""


class AuditFailure(ScanError):
    """The external audit engine could not produce results for a page."""
