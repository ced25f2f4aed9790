"""Keyword rules mapping rule codes onto WCAG principles."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from adascan.audit.models import Category, Finding


@dataclass(frozen=True)
class CategoryRule:
    """A category assigned when ``matches`` accepts the uppercased code."""

    category: Category
    matches: Callable[[str], bool]


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def _match(code: str) -> bool:
        return any(keyword in code for keyword in keywords)

    return _match


# Evaluated in order, first match wins
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.PERCEIVABLE,
        _contains_any("IMAGE", "CONTRAST", "COLOR", "TEXT"),
    ),
    CategoryRule(
        Category.OPERABLE,
        _contains_any("LINK", "BUTTON", "FOCUS", "KEYBOARD"),
    ),
    CategoryRule(
        Category.UNDERSTANDABLE,
        _contains_any("LABEL", "LANG", "HEADING"),
    ),
    CategoryRule(
        Category.ROBUST,
        _contains_any("ARIA", "ROLE", "MARKUP"),
    ),
)


def classify(code: str) -> Category:
    """Return the category for a rule code; unmatched codes are ``Other``."""
    upper = code.upper()
    for rule in CATEGORY_RULES:
        if rule.matches(upper):
            return rule.category
    return Category.OTHER


def count_categories(findings: Iterable[Finding]) -> dict[Category, int]:
    """Tally findings into every category, including empty ones."""
    counts = {category: 0 for category in Category}
    for finding in findings:
        counts[classify(finding.code)] += 1
    return counts
