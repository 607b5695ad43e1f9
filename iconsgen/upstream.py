"""Reads the upstream icon set's package descriptor."""

from __future__ import annotations

import json
from pathlib import Path

from .errors import SourceReadError
from .models import UpstreamPackage


def load_upstream(package_file: Path) -> UpstreamPackage:
    """Return version, license and homepage from the upstream ``package.json``."""
    try:
        payload = json.loads(package_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(package_file, str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise SourceReadError(package_file, f"invalid JSON ({exc})") from exc

    if not isinstance(payload, dict):
        raise SourceReadError(package_file, "descriptor must be a JSON object")
    version = payload.get("version")
    if not isinstance(version, str) or not version.strip():
        raise SourceReadError(package_file, "descriptor has no version")

    return UpstreamPackage(
        version=version.strip(),
        license=_as_text(payload.get("license")),
        homepage=_as_text(payload.get("homepage")),
    )


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else ""


__all__ = ["load_upstream"]
