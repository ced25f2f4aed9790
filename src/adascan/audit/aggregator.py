"""Group findings by rule code and rank the groups."""

from __future__ import annotations

from collections.abc import Iterable

from adascan.audit.models import Finding, IssueGroup, Occurrence


def aggregate(findings: Iterable[Finding]) -> list[IssueGroup]:
    """Collapse findings into one group per code, most frequent first.

    The representative type, message, impact and help URL of a group come
    from the first finding seen with its code. Groups with the same count
    keep the order in which their code first appeared.
    """
    groups: dict[str, IssueGroup] = {}

    for finding in findings:
        group = groups.get(finding.code)
        if group is None:
            group = IssueGroup(
                code=finding.code,
                type=finding.type,
                message=finding.message,
                impact=finding.impact or "unknown",
                help_url=finding.help_url or "",
            )
            groups[finding.code] = group

        group.count += 1
        group.occurrences.append(
            Occurrence(
                selector=finding.selector,
                context=finding.context,
                runner=finding.runner,
            )
        )

    # sorted() is stable, dict preserves first-seen order
    return sorted(groups.values(), key=lambda g: g.count, reverse=True)
