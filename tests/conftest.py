"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from adascan.engines.base import AuditResult
from adascan.errors import AuditFailure

FROZEN_NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


class FakeEngine:
    """In-memory AuditEngine returning canned results."""

    def __init__(
        self,
        result: AuditResult | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def audit(self, url: str) -> AuditResult:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.result or AuditResult(page_url=url)


@pytest.fixture
def engine_factory() -> type[FakeEngine]:
    return FakeEngine


@pytest.fixture
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture
def raw_issues() -> list[dict]:
    return [
        {
            "code": "color-contrast",
            "type": "error",
            "message": "Elements must have sufficient color contrast",
            "selector": "#nav > a",
            "context": '<a href="/">Home</a>',
            "runner": "axe",
            "runnerExtras": {
                "impact": "serious",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/color-contrast",
            },
        },
        {
            "code": "image-alt",
            "type": "error",
            "message": "Images must have alternate text",
            "selector": "img.logo",
            "context": '<img class="logo" src="logo.png">',
            "runner": "axe",
            "runnerExtras": {"impact": "critical", "help": "Images must have alt text"},
        },
        {
            "code": "color-contrast",
            "type": "error",
            "message": "Elements must have sufficient color contrast",
            "selector": "footer p",
            "context": "<p>Copyright</p>",
            "runner": "axe",
            "runnerExtras": {"impact": "serious"},
        },
        {
            "code": "region",
            "type": "warning",
            "message": "All page content should be contained by landmarks",
            "selector": "body > div",
            "context": "<div>...</div>",
            "runner": "axe",
        },
    ]


@pytest.fixture
def fake_engine(raw_issues: list[dict]) -> FakeEngine:
    return FakeEngine(
        AuditResult(
            page_url="https://example.org/",
            document_title="Example Domain",
            issues=raw_issues,
        )
    )


@pytest.fixture
def failing_engine() -> FakeEngine:
    return FakeEngine(error=AuditFailure("net::ERR_NAME_NOT_RESOLVED"))


@pytest.fixture
def tagged_pdf_bytes() -> bytes:
    header = (
        b"%PDF-1.7\n1 0 obj << /Type /Catalog /StructTreeRoot 2 0 R "
        b"/Lang (en-US) >>\n3 0 obj << /Title (Annual report) >>\n"
    )
    return header + b"\x00" * (5000 - len(header))


@pytest.fixture
def untagged_pdf_bytes() -> bytes:
    header = b"%PDF-1.4\n1 0 obj << /Type /Catalog >>\n"
    return header + b"\x00" * (500 - len(header))


@pytest.fixture
def pdf_dir(tmp_path: Path, tagged_pdf_bytes: bytes, untagged_pdf_bytes: bytes) -> Path:
    (tmp_path / "tagged.pdf").write_bytes(tagged_pdf_bytes)
    (tmp_path / "untagged.pdf").write_bytes(untagged_pdf_bytes)
    return tmp_path
