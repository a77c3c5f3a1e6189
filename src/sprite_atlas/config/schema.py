"""Configuration schema and loading utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CompatibilityProfile:
    """Reader behaviors that differ between descriptor producers."""

    name: str
    # Page ``size:`` stores its first integer into both width and height, as
    # historical readers of this format did.
    legacy_page_size: bool


_PROFILES: Dict[str, CompatibilityProfile] = {
    "standard": CompatibilityProfile(name="standard", legacy_page_size=False),
    "legacy": CompatibilityProfile(name="legacy", legacy_page_size=True),
}


@dataclass(frozen=True)
class Config:
    """Top-level configuration for reading and writing descriptors."""

    profile: CompatibilityProfile = field(default_factory=lambda: _PROFILES["standard"])
    # None takes the profile's setting.
    legacy_page_size: Optional[bool] = None
    encoding: str = "utf-8"
    enable_profiling: bool = False
    profile_output: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.legacy_page_size is None:
            object.__setattr__(self, "legacy_page_size", self.profile.legacy_page_size)


def profile_config(name: str) -> CompatibilityProfile:
    """Return a compatibility profile by name."""

    key = name.lower()
    if key not in _PROFILES:
        raise ValueError(f"Unknown profile '{name}'. Available: {', '.join(_PROFILES)}")
    return _PROFILES[key]


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into base without mutating either input."""

    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path], profile_name: str = "standard") -> Config:
    """Load configuration from JSON and apply profile defaults.

    A ``profile`` key in the JSON file replaces ``profile_name``; an explicit
    ``legacy_page_size`` key wins over the profile's setting.
    """

    base: Dict[str, Any] = {
        "profile": profile_name,
        "encoding": "utf-8",
        "enable_profiling": False,
        "profile_output": None,
    }

    if path:
        raw = json.loads(Path(path).read_text())
        merged = _merge_dict(base, raw)
    else:
        merged = base

    profile = profile_config(merged["profile"])
    legacy_page_size = merged.get("legacy_page_size")
    if legacy_page_size is None:
        legacy_page_size = profile.legacy_page_size

    return Config(
        profile=profile,
        legacy_page_size=bool(legacy_page_size),
        encoding=str(merged.get("encoding", base["encoding"])),
        enable_profiling=bool(merged.get("enable_profiling", base["enable_profiling"])),
        profile_output=Path(merged["profile_output"]) if merged.get("profile_output") else None,
    )
