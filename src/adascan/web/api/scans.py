"""REST API for page and PDF scans."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from adascan.errors import AuditFailure, InputFailure
from adascan.pdf.uploads import SpooledUpload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scans"])

_PDF_CONTENT_TYPE = "application/pdf"


class ScanRequest(BaseModel):
    url: str | None = None


@router.post("/scan")
async def scan_url(request: Request, body: ScanRequest | None = None):
    service = request.app.state.service
    try:
        report = await service.scan_url(body.url if body else None)
    except InputFailure as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except AuditFailure as e:
        logger.error("Scan error: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Scan failed", "message": str(e)},
        )
    return report.to_dict()


@router.post("/scan-pdf")
def scan_pdf(request: Request, pdfs: list[UploadFile] | None = File(None)):
    # Runs in a worker thread; spooled files are read synchronously
    uploads = list(pdfs or [])
    config = request.app.state.config
    try:
        rejection = _reject(uploads, config.max_upload_files, config.max_upload_bytes)
        if rejection:
            return JSONResponse(status_code=400, content={"error": rejection})

        sources = [
            SpooledUpload(u.file, u.filename or "upload.pdf", u.size) for u in uploads
        ]
        try:
            batch = request.app.state.service.scan_pdfs(sources)
        except InputFailure as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except Exception as e:
            logger.exception("PDF scan error")
            return JSONResponse(
                status_code=500,
                content={"error": "PDF scan failed", "message": str(e)},
            )
        return batch.to_dict()
    finally:
        for upload in uploads:
            upload.file.close()


def _reject(uploads: list[UploadFile], max_files: int, max_bytes: int) -> str | None:
    """Return why the upload set is refused, or None when it is acceptable."""
    if not uploads:
        return "No PDF files uploaded"
    if len(uploads) > max_files:
        return f"Too many files uploaded (maximum {max_files})"
    for upload in uploads:
        if upload.content_type != _PDF_CONTENT_TYPE:
            return "Only PDF files are allowed"
        if upload.size is not None and upload.size > max_bytes:
            return f"File too large: {upload.filename} (maximum {max_bytes} bytes)"
    return None
