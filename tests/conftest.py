from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.icon_builder import SAMPLE_ICONS, IconProjectBuilder


@pytest.fixture
def icon_project(tmp_path: Path) -> IconProjectBuilder:
    """Provide a project seeded with sample icons, an upstream descriptor and metadata."""
    builder = IconProjectBuilder(tmp_path)
    builder.write_icons(SAMPLE_ICONS)
    builder.write_upstream("1.0.0")
    builder.write_metadata()
    return builder
