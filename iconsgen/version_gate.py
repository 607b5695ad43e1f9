"""Decides whether the upstream icon set changed since the last generation."""

from __future__ import annotations

from typing import Any, Mapping, Optional


def version_key(label: str) -> str:
    """Return the ``meta`` key that records the generated upstream version."""
    return f"{label}-version"


def recorded_version(document: Mapping[str, Any], label: str) -> Optional[str]:
    meta = document.get("meta")
    if not isinstance(meta, Mapping):
        return None
    value = meta.get(version_key(label))
    return value if isinstance(value, str) else None


def is_up_to_date(current: str, recorded: Optional[str]) -> bool:
    """Plain string equality; no version range semantics."""
    return recorded is not None and current == recorded


__all__ = ["is_up_to_date", "recorded_version", "version_key"]
