"""Heuristic PDF inspection on raw bytes.

PDF structural markers are ASCII tokens that survive in the raw file even
when streams are compressed, so presence checks on a latin-1 view of the
bytes are enough to flag the common gaps: no tag tree, no document language,
no title. Nothing here parses the object graph. A token inside an unrelated
stream counts as present, and a present token may not be wired up correctly,
so results are advisory.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from adascan.audit.models import Finding, IssueType, PdfBatchResult, PdfResult
from adascan.errors import InputFailure
from adascan.pdf.uploads import UploadSource

logger = logging.getLogger(__name__)

# Files below this size are almost certainly truncated or placeholders
MIN_PDF_SIZE = 1000


class CheckKind(enum.Enum):
    ISSUE = "issue"
    WARNING = "warning"


@dataclass(frozen=True)
class PdfCheck:
    """A heuristic that fires when ``fails`` returns True."""

    code: str
    kind: CheckKind
    message: str
    fails: Callable[[str, int], bool]


def _missing(token: str) -> Callable[[str, int], bool]:
    def _check(text: str, size: int) -> bool:
        return token not in text

    return _check


def _too_small(text: str, size: int) -> bool:
    return size < MIN_PDF_SIZE


CHECKS: tuple[PdfCheck, ...] = (
    PdfCheck(
        code="pdf-empty-or-corrupted",
        kind=CheckKind.ISSUE,
        message="PDF file appears to be empty or corrupted",
        fails=_too_small,
    ),
    PdfCheck(
        code="pdf-missing-struct-tree",
        kind=CheckKind.ISSUE,
        message="PDF does not appear to be tagged (missing structure tree)",
        fails=_missing("/StructTreeRoot"),
    ),
    PdfCheck(
        code="pdf-missing-lang",
        kind=CheckKind.WARNING,
        message="PDF language not specified",
        fails=_missing("/Lang"),
    ),
    PdfCheck(
        code="pdf-missing-title",
        kind=CheckKind.WARNING,
        message="PDF title metadata not set",
        fails=_missing("/Title"),
    ),
)

_KIND_TYPES = {
    CheckKind.ISSUE: IssueType.ERROR,
    CheckKind.WARNING: IssueType.WARNING,
}


def inspect_pdf(raw: bytes, filename: str, size: int) -> PdfResult:
    """Run every check against ``raw`` and collect what fails."""
    text = raw.decode("latin-1")
    result = PdfResult(filename=filename, size=size)

    for check in CHECKS:
        if not check.fails(text, size):
            continue
        if check.kind is CheckKind.ISSUE:
            result.issues.append(check.message)
        else:
            result.warnings.append(check.message)
        result.findings.append(
            Finding(
                code=check.code,
                type=_KIND_TYPES[check.kind],
                message=check.message,
                runner="pdf",
            )
        )

    return result


def scan_pdfs(uploads: Sequence[UploadSource]) -> PdfBatchResult:
    """Inspect each upload independently.

    A file that cannot be read is reported as an issue on that file and does
    not stop the rest of the batch. Every upload is closed afterwards.
    """
    if not uploads:
        raise InputFailure("No PDF files uploaded")

    batch = PdfBatchResult()
    for upload in uploads:
        logger.info("Checking PDF: %s", upload.filename)
        try:
            raw = upload.read()
        except Exception as e:
            logger.warning("Could not read %s: %s", upload.filename, e)
            batch.results.append(_unreadable(upload, e))
        else:
            batch.results.append(inspect_pdf(raw, upload.filename, upload.size))
        finally:
            upload.close()

    return batch


def _unreadable(upload: UploadSource, error: Exception) -> PdfResult:
    message = f"Failed to read PDF: {error}"
    return PdfResult(
        filename=upload.filename,
        size=upload.size,
        issues=[message],
        findings=[
            Finding(
                code="pdf-unreadable",
                type=IssueType.ERROR,
                message=message,
                runner="pdf",
            )
        ],
    )
