"""Global configuration — XDG paths, env vars, defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from adascan.profile.loader import load_preset, load_profile
from adascan.profile.models import ScanProfile


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "adascan"
    return Path.home() / ".config" / "adascan"


def _default_static_dir() -> Path:
    return Path(__file__).parent / "web" / "frontend"


@dataclass
class AdaScanConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    static_dir: Path = field(default_factory=_default_static_dir)
    profile_path: Path | None = None
    pa11y_bin: str = "pa11y"
    web_host: str = "127.0.0.1"
    web_port: int = 3000
    max_upload_files: int = 10
    max_upload_bytes: int = 50 * 1024 * 1024
    verbose: bool = False

    @classmethod
    def load(cls) -> AdaScanConfig:
        """Load config from environment variables with XDG defaults."""
        config = cls()

        env_port = os.environ.get("ADASCAN_WEB_PORT")
        if env_port:
            config.web_port = int(env_port)

        env_pa11y = os.environ.get("ADASCAN_PA11Y_BIN")
        if env_pa11y:
            config.pa11y_bin = env_pa11y

        env_static = os.environ.get("ADASCAN_STATIC_DIR")
        if env_static:
            config.static_dir = Path(env_static)

        env_files = os.environ.get("ADASCAN_MAX_UPLOAD_FILES")
        if env_files:
            config.max_upload_files = int(env_files)

        env_bytes = os.environ.get("ADASCAN_MAX_UPLOAD_BYTES")
        if env_bytes:
            config.max_upload_bytes = int(env_bytes)

        env_profile = os.environ.get("ADASCAN_PROFILE")
        if env_profile:
            config.profile_path = Path(env_profile)
        else:
            # Fall back to a profile in the config dir if one exists
            user_profile = config.config_dir / "profile.yaml"
            if user_profile.is_file():
                config.profile_path = user_profile

        return config

    def scan_profile(self) -> ScanProfile:
        """Resolve the configured profile, or the packaged default."""
        if self.profile_path is not None:
            return load_profile(self.profile_path)
        return load_preset()
