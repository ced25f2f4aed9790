"""Load and resolve ScanProfile objects from YAML files."""

from __future__ import annotations

import importlib.resources
from pathlib import Path
from typing import Any

import yaml

from adascan.profile.models import ScanProfile

_PRESET_PREFIX = "preset:"

DEFAULT_PRESET = "wcag2aa"

_FIELDS = (
    "standard",
    "runners",
    "include_notices",
    "include_warnings",
    "timeout_ms",
    "wait_ms",
    "chrome_args",
)


def load_profile(path: str | Path, _resolved: set[str] | None = None) -> ScanProfile:
    """Load a profile from a YAML file path."""
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Profile YAML must be a mapping")
    return _build_profile(data, _resolved=_resolved if _resolved is not None else set())


def load_profile_from_string(text: str) -> ScanProfile:
    """Parse a YAML string into a ScanProfile, resolving inheritance."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Profile YAML must be a mapping")
    return _build_profile(data, _resolved=set())


def load_preset(name: str = DEFAULT_PRESET) -> ScanProfile:
    """Load one of the profiles shipped with the package."""
    return _load_preset(name, set())


def _build_profile(data: dict, _resolved: set[str]) -> ScanProfile:
    name = data.get("name", "unnamed")

    if name in _resolved:
        raise ValueError(f"Circular profile inheritance detected: {name}")
    _resolved.add(name)

    inherit_list = data.get("inherit", [])
    if isinstance(inherit_list, str):
        inherit_list = [inherit_list]

    # Later parents override earlier ones, own values override all parents
    values: dict[str, Any] = {}
    for ref in inherit_list:
        parent = _load_ref(ref, _resolved)
        values.update({f: getattr(parent, f) for f in _FIELDS})

    for key in _FIELDS:
        if key in data and data[key] is not None:
            values[key] = data[key]

    return ScanProfile(
        name=name,
        description=data.get("description", ""),
        inherit=tuple(inherit_list),
        **_coerce(values),
    )


def _coerce(values: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in values.items():
        if key in ("runners", "chrome_args"):
            if isinstance(value, str):
                value = [value]
            out[key] = tuple(str(v) for v in value)
        elif key in ("include_notices", "include_warnings"):
            out[key] = bool(value)
        elif key in ("timeout_ms", "wait_ms"):
            out[key] = int(value)
        else:
            out[key] = str(value)
    return out


def _load_ref(ref: str, _resolved: set[str]) -> ScanProfile:
    if ref.startswith(_PRESET_PREFIX):
        preset_name = ref[len(_PRESET_PREFIX) :]
        return _load_preset(preset_name, _resolved)
    # Treat as file path
    return load_profile(ref, _resolved=_resolved)


def _load_preset(name: str, _resolved: set[str]) -> ScanProfile:
    filename = f"{name}.yaml"
    pkg = importlib.resources.files("adascan.profile.presets")
    resource = pkg.joinpath(filename)
    text = resource.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return _build_profile(data, _resolved)
