"""pa11y audit engine — runs the pa11y CLI and parses its JSON report."""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from adascan.engines.base import AuditResult
from adascan.errors import AuditFailure
from adascan.profile.models import ScanProfile

logger = logging.getLogger(__name__)

# pa11y exits 2 when the page was audited and issues were found
_SUCCESS_CODES = {0, 2}

# Extra wall-clock time on top of the profile timeout before the process is killed
_KILL_GRACE_SECONDS = 15.0


class Pa11yEngine:
    """Audit pages with the pa11y command-line tool."""

    def __init__(
        self,
        profile: ScanProfile | None = None,
        executable: str = "pa11y",
    ) -> None:
        self._profile = profile or ScanProfile()
        self._executable = executable

    @property
    def profile(self) -> ScanProfile:
        return self._profile

    async def audit(self, url: str) -> AuditResult:
        config_path = self._write_config()
        try:
            command = self.build_command(url, config_path)
            logger.debug("Running %s", " ".join(command))
            returncode, stdout, stderr = await self._run(command)
        finally:
            Path(config_path).unlink(missing_ok=True)

        if returncode not in _SUCCESS_CODES:
            message = stderr.strip() or stdout.strip() or f"pa11y exited with code {returncode}"
            raise AuditFailure(message)

        return parse_report(stdout, url)

    def build_command(self, url: str, config_path: str) -> list[str]:
        """Assemble the pa11y invocation for ``url``."""
        profile = self._profile
        command = [
            self._executable,
            "--reporter",
            "json",
            "--standard",
            profile.standard,
            "--timeout",
            str(profile.timeout_ms),
            "--wait",
            str(profile.wait_ms),
            "--config",
            config_path,
        ]
        for runner in profile.runners:
            command.extend(["--runner", runner])
        if profile.include_notices:
            command.append("--include-notices")
        if profile.include_warnings:
            command.append("--include-warnings")
        command.append(url)
        return command

    def _write_config(self) -> str:
        config = {"chromeLaunchConfig": {"args": list(self._profile.chrome_args)}}
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", suffix=".json", delete=False
        ) as handle:
            json.dump(config, handle)
            return handle.name

    async def _run(self, command: list[str]) -> tuple[int, str, str]:
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise AuditFailure(f"Executable not found: {command[0]}") from e
        except OSError as e:
            raise AuditFailure(f"Could not start {command[0]}: {e}") from e

        deadline = self._profile.timeout_ms / 1000 + _KILL_GRACE_SECONDS
        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=deadline)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise AuditFailure(f"Audit timed out after {deadline:.0f}s") from e

        return (
            proc.returncode if proc.returncode is not None else -1,
            stdout.decode("utf-8", errors="replace"),
            stderr.decode("utf-8", errors="replace"),
        )


def parse_report(output: str, url: str) -> AuditResult:
    """Parse pa11y JSON output into an AuditResult.

    The stock JSON reporter prints a bare list of issues; full result objects
    carry ``pageUrl`` and ``documentTitle`` alongside ``issues``.
    """
    try:
        data: Any = json.loads(output or "[]")
    except json.JSONDecodeError as e:
        raise AuditFailure("Failed to parse pa11y output") from e

    if isinstance(data, list):
        return AuditResult(page_url=url, issues=[i for i in data if isinstance(i, dict)])

    if isinstance(data, dict):
        issues = data.get("issues") or []
        return AuditResult(
            page_url=str(data.get("pageUrl") or url),
            document_title=str(data.get("documentTitle") or ""),
            issues=[i for i in issues if isinstance(i, dict)],
        )

    raise AuditFailure("Unexpected pa11y output")
