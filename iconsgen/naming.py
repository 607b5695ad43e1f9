"""Identifier derivation for icon components."""

from __future__ import annotations

import re
from pathlib import PurePath

from .errors import IdentifierError

DEFAULT_PREFIX = "BIcon"

_WORD_SEPARATORS = re.compile(r"[-_]+")
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def pascal_case(name: str) -> str:
    """Join hyphen/underscore separated words with their first letter upper-cased.

    The remainder of each word is left untouched so ``arrow90deg-up`` becomes
    ``Arrow90degUp`` and ``1-circle`` becomes ``1Circle``.
    """
    words = [word for word in _WORD_SEPARATORS.split(name) if word]
    return "".join(word[0].upper() + word[1:] for word in words)


def derive_identifier(filename: str, prefix: str = DEFAULT_PREFIX) -> tuple[str, str]:
    """Return ``(identifier, display_name)`` for an icon source filename."""
    stem = PurePath(filename).stem
    display_name = pascal_case(stem)
    if not display_name:
        raise IdentifierError(f"Cannot derive an identifier from {filename!r}")
    identifier = f"{prefix}{display_name}"
    if not _IDENTIFIER_PATTERN.fullmatch(identifier):
        raise IdentifierError(f"{filename!r} derives {identifier!r}, which is not a valid identifier")
    return identifier, display_name


__all__ = ["DEFAULT_PREFIX", "derive_identifier", "pascal_case"]
