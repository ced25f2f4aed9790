"""Map raw audit-engine issue records onto Finding instances."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from adascan.audit.models import Finding, IssueType

logger = logging.getLogger(__name__)

_ISSUE_TYPES = {issue_type.value: issue_type for issue_type in IssueType}


def finding_from_raw(raw: Mapping[str, Any]) -> Finding | None:
    """Convert one engine record; records without a code are dropped."""
    code = str(raw.get("code") or "").strip()
    if not code:
        logger.debug("Dropping issue without a code: %r", raw)
        return None

    extras = raw.get("runnerExtras")
    if not isinstance(extras, Mapping):
        extras = {}

    return Finding(
        code=code,
        type=_issue_type(raw.get("type")),
        message=str(raw.get("message") or ""),
        selector=str(raw.get("selector") or ""),
        context=str(raw.get("context") or ""),
        runner=str(raw.get("runner") or ""),
        impact=str(extras.get("impact") or "unknown"),
        help_url=str(extras.get("helpUrl") or extras.get("help") or ""),
    )


def normalize_issues(raw_issues: Iterable[Mapping[str, Any]]) -> list[Finding]:
    """Convert engine records in order, skipping unusable ones."""
    findings: list[Finding] = []
    for raw in raw_issues:
        if not isinstance(raw, Mapping):
            logger.debug("Skipping non-mapping issue record: %r", raw)
            continue
        finding = finding_from_raw(raw)
        if finding is not None:
            findings.append(finding)
    return findings


def _issue_type(value: object) -> IssueType:
    if isinstance(value, str):
        issue_type = _ISSUE_TYPES.get(value.strip().lower())
        if issue_type is not None:
            return issue_type
    logger.debug("Unknown issue type %r, treating as notice", value)
    return IssueType.NOTICE
