"""Report builder — composes summary, categories, and ranked issue groups."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from adascan.audit.aggregator import aggregate
from adascan.audit.classifier import count_categories
from adascan.audit.models import Finding, IssueType, Report, ReportSummary


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as UTC ISO-8601 with millisecond precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_report(
    page_url: str,
    title: str,
    findings: Sequence[Finding],
    *,
    now: datetime | None = None,
) -> Report:
    """Build the report for one scanned page.

    ``now`` pins the summary timestamp; naive datetimes are taken as UTC.
    """
    by_type = {issue_type: 0 for issue_type in IssueType}
    for finding in findings:
        by_type[finding.type] += 1

    summary = ReportSummary(
        url=page_url,
        title=title,
        total=len(findings),
        errors=by_type[IssueType.ERROR],
        warnings=by_type[IssueType.WARNING],
        notices=by_type[IssueType.NOTICE],
        timestamp=format_timestamp(now or datetime.now(timezone.utc)),
    )

    return Report(
        summary=summary,
        categories=count_categories(findings),
        detailed_issues=aggregate(findings),
    )
