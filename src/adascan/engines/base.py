"""AuditEngine protocol — all page audit implementations must satisfy this."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass
class AuditResult:
    """Raw output of one page audit."""

    page_url: str
    document_title: str = ""
    issues: list[dict[str, Any]] = field(default_factory=list)


@runtime_checkable
class AuditEngine(Protocol):
    """Protocol for external page audit engines."""

    async def audit(self, url: str) -> AuditResult:
        """Audit ``url`` and return its raw issue records.

        Implementations raise :class:`adascan.errors.AuditFailure` when the
        page cannot be audited.
        """
        ...
