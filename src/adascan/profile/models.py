"""Scan profile — options handed to the audit engine for every page."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanProfile:
    """How a page audit is run."""

    name: str = "default"
    standard: str = "WCAG2AA"
    runners: tuple[str, ...] = ("axe",)
    include_notices: bool = False
    include_warnings: bool = True
    timeout_ms: int = 30000
    wait_ms: int = 1000
    chrome_args: tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")
    description: str = ""
    inherit: tuple[str, ...] = ()
