"""Helper utilities for constructing temporary icon projects in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Mapping

from iconsgen.config import IconsGenConfig, load_config

SAMPLE_ICONS = {
    "arrow-up-circle.svg": """
        <svg width="1em" height="1em" viewBox="0 0 16 16" fill="currentColor" xmlns="http://www.w3.org/2000/svg">
          <path fill-rule="evenodd" d="M8 15A7 7 0 1 0 8 1a7 7 0 0 0 0 14z"/>
          <path fill-rule="evenodd" d="M8 4.5a.5.5 0 0 1 .5.5v5a.5.5 0 0 1-1 0V5a.5.5 0 0 1 .5-.5z"/>
        </svg>
    """,
    "alarm.svg": """
        <svg viewBox="0 0 16 16" xmlns="http://www.w3.org/2000/svg">
          <path stroke="#000" d="M8 15A6 6 0 1 0 8 3a6 6 0 0 0 0 12z"/>
        </svg>
    """,
    "x.svg": '<svg viewBox="0 0 16 16"><path d="M4 4l8 8"/></svg>\n',
}

REFERENCE_PROPS = [
    {"prop": "icon", "description": "Name of the icon to render"},
    {"prop": "variant", "description": "Applies one of the theme color variants"},
    {"prop": "fontScale", "description": "Scale factor relative to the font size"},
]


def default_metadata(recorded_version: str | None = None) -> dict[str, Any]:
    meta: dict[str, Any] = {
        "title": "Icons",
        "components": [
            {"component": "BIcon", "props": [dict(prop) for prop in REFERENCE_PROPS]},
            {"component": "BIconstack", "props": [{"prop": "animation"}]},
            {"component": "BIconBlank", "props": []},
        ],
    }
    if recorded_version is not None:
        meta["bootstrap-icons-version"] = recorded_version
    return {"name": "@bootstrap-vue/icons", "version": "1.0.0", "meta": meta}


class IconProjectBuilder:
    """Writes an upstream icon set and a metadata document into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()
        self.upstream = self.root / "node_modules" / "bootstrap-icons"
        self.icons_dir = self.upstream / "icons"
        self.icons_dir.mkdir(parents=True)
        self.output_dir = self.root / "src" / "icons"
        self.output_dir.mkdir(parents=True)

    def write_icons(self, files: Mapping[str, str]) -> None:
        """Write `filename -> svg` entries into the upstream icons directory."""
        for name, content in files.items():
            path = self.icons_dir / name
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def write_upstream(
        self,
        version: str = "1.0.0",
        *,
        license: str = "MIT",
        homepage: str = "https://icons.getbootstrap.com",
    ) -> None:
        payload = {"name": "bootstrap-icons", "version": version, "license": license, "homepage": homepage}
        (self.upstream / "package.json").write_text(json.dumps(payload), encoding="utf-8")

    def write_metadata(self, document: Mapping[str, Any] | None = None) -> Path:
        path = self.output_dir / "package.json"
        payload = document if document is not None else default_metadata()
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    def write_config(self, content: str) -> None:
        (self.root / ".iconsgen.yml").write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def config(self) -> IconsGenConfig:
        return load_config(self.root)

    def snapshot(self) -> dict[str, bytes]:
        """Return the bytes of every file under the output directory."""
        return {
            path.relative_to(self.output_dir).as_posix(): path.read_bytes()
            for path in sorted(self.output_dir.rglob("*"))
            if path.is_file()
        }


__all__ = ["IconProjectBuilder", "REFERENCE_PROPS", "SAMPLE_ICONS", "default_metadata"]
