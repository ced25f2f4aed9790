"""Scan service — the scan-URL and scan-PDFs operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from adascan.audit.models import PdfBatchResult, Report
from adascan.audit.normalize import normalize_issues
from adascan.audit.report import build_report
from adascan.engines.base import AuditEngine
from adascan.errors import AuditFailure, InputFailure
from adascan.pdf.inspector import scan_pdfs
from adascan.pdf.uploads import UploadSource

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScanService:
    """Runs page audits and PDF inspections and builds their reports."""

    def __init__(
        self,
        engine: AuditEngine,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._engine = engine
        self._clock = clock or _utcnow

    async def scan_url(self, url: str | None) -> Report:
        """Audit a page and return its report."""
        url = (url or "").strip()
        if not url:
            raise InputFailure("URL is required")

        logger.info("Scanning: %s", url)
        try:
            result = await self._engine.audit(url)
        except AuditFailure:
            raise
        except Exception as e:
            logger.error("Scan error for %s: %s", url, e)
            raise AuditFailure(str(e) or type(e).__name__) from e

        findings = normalize_issues(result.issues)
        logger.info("Audit of %s returned %d findings", url, len(findings))
        return build_report(
            result.page_url or url,
            result.document_title,
            findings,
            now=self._clock(),
        )

    def scan_pdfs(self, uploads: Sequence[UploadSource]) -> PdfBatchResult:
        """Inspect uploaded PDFs, one result per file."""
        return scan_pdfs(uploads)
