"""Audit data models — findings, issue groups, and reports."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class IssueType(enum.Enum):
    """Finding severity as reported by the audit engine."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


class Category(enum.Enum):
    """WCAG principle a finding is filed under."""

    PERCEIVABLE = "Perceivable"
    OPERABLE = "Operable"
    UNDERSTANDABLE = "Understandable"
    ROBUST = "Robust"
    OTHER = "Other"


@dataclass(frozen=True)
class Finding:
    """A single normalized accessibility issue."""

    code: str
    type: IssueType
    message: str
    selector: str = ""
    context: str = ""
    runner: str = ""
    impact: str = "unknown"
    help_url: str = ""

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Finding code must not be empty")


@dataclass(frozen=True)
class Occurrence:
    """Where one finding of an issue group was seen."""

    selector: str = ""
    context: str = ""
    runner: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "selector": self.selector,
            "context": self.context,
            "runner": self.runner,
        }


@dataclass
class IssueGroup:
    """All findings sharing one rule code."""

    code: str
    type: IssueType
    message: str
    impact: str = "unknown"
    help_url: str = ""
    count: int = 0
    occurrences: list[Occurrence] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "type": self.type.value,
            "message": self.message,
            "count": self.count,
            "impact": self.impact,
            "helpUrl": self.help_url,
            "occurrences": [o.to_dict() for o in self.occurrences],
        }


@dataclass(frozen=True)
class ReportSummary:
    """Top-level counts for a scanned page."""

    url: str
    title: str
    total: int
    errors: int
    warnings: int
    notices: int
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "total": self.total,
            "errors": self.errors,
            "warnings": self.warnings,
            "notices": self.notices,
            "timestamp": self.timestamp,
        }


@dataclass
class Report:
    """Complete accessibility report for one page."""

    summary: ReportSummary
    categories: dict[Category, int]
    detailed_issues: list[IssueGroup] = field(default_factory=list)

    @property
    def total_unique_issues(self) -> int:
        return len(self.detailed_issues)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the web UI."""
        return {
            "summary": self.summary.to_dict(),
            "categories": {c.value: n for c, n in self.categories.items()},
            "detailedIssues": [g.to_dict() for g in self.detailed_issues],
            "totalUniqueIssues": self.total_unique_issues,
        }


@dataclass
class PdfResult:
    """Heuristic inspection result for one PDF file."""

    filename: str
    size: int
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "size": self.size,
            "issues": list(self.issues),
            "warnings": list(self.warnings),
        }


@dataclass
class PdfBatchResult:
    """Aggregate result of inspecting a batch of PDFs."""

    results: list[PdfResult] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.results)

    @property
    def total_issues(self) -> int:
        return sum(len(r.issues) for r in self.results)

    @property
    def total_warnings(self) -> int:
        return sum(len(r.warnings) for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "results": [r.to_dict() for r in self.results],
            "summary": {
                "totalIssues": self.total_issues,
                "totalWarnings": self.total_warnings,
            },
        }
