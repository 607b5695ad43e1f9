"""Sanitizes raw SVG sources into inline icon content."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import SourceReadError

ICON_SUFFIX = ".svg"

_OPEN_SVG = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_CLOSE_SVG = re.compile(r"</svg>", re.IGNORECASE)
_INTER_ELEMENT_WHITESPACE = re.compile(r">\s+<")

# Some upstream icons hard-code black strokes instead of inheriting the text colour.
_STROKE_FIX = (' stroke="#000"', ' stroke="currentColor"')


def is_icon_source(path: Path) -> bool:
    """Return True when ``path`` is a ``.svg`` entry that should become an icon.

    Only directories are filtered out; an unreadable entry such as a dangling
    symlink is left for ``read_icon_source`` to reject.
    """
    return path.suffix == ICON_SUFFIX and not path.is_dir()


def transform_svg(raw: str) -> str:
    """Strip the outer ``<svg>`` wrapper and compact the remaining markup."""
    content = _OPEN_SVG.sub("", raw, count=1)
    content = _CLOSE_SVG.sub("", content, count=1)
    content = _INTER_ELEMENT_WHITESPACE.sub("><", content)
    content = content.replace(*_STROKE_FIX, 1)
    return content.strip()


def read_icon_source(path: Path) -> str:
    """Read an icon source as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, str(exc)) from exc


__all__ = ["ICON_SUFFIX", "is_icon_source", "read_icon_source", "transform_svg"]
