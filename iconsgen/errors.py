"""Error taxonomy for the icon generation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence


class GenerationError(RuntimeError):
    """Base class for failures that abort a generation run."""

    stage = "generate"


class SourceReadError(GenerationError):
    """Raised when an icon source or the upstream descriptor cannot be read."""

    stage = "collect"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class IdentifierError(GenerationError):
    """Raised when a source filename cannot be turned into an identifier."""

    stage = "collect"


class IdentifierCollisionError(GenerationError):
    """Raised when two icon sources derive the same identifier."""

    stage = "collect"

    def __init__(self, identifier: str, sources: Sequence[str]) -> None:
        joined = ", ".join(sources)
        super().__init__(f"Identifier {identifier} is derived from more than one source: {joined}")
        self.identifier = identifier
        self.sources = list(sources)


class TemplateRenderError(GenerationError):
    """Raised when an artifact template fails to render."""

    stage = "render"

    def __init__(self, artifact: str, template: str, reason: str) -> None:
        super().__init__(f"Failed to render {artifact} from {template}: {reason}")
        self.artifact = artifact
        self.template = template
        self.reason = reason


class MetadataError(GenerationError):
    """Raised when the metadata document is unreadable or lacks required entries."""

    stage = "metadata"

    def __init__(self, path: Path | None, reason: str) -> None:
        message = f"{path}: {reason}" if path is not None else reason
        super().__init__(message)
        self.path = path
        self.reason = reason


class WriteError(GenerationError):
    """Raised when one or more artifacts could not be persisted."""

    stage = "write"

    def __init__(self, written: Iterable[Path], failed: dict[Path, str]) -> None:
        self.written = list(written)
        self.failed = dict(failed)
        details = "; ".join(f"{path}: {reason}" for path, reason in self.failed.items())
        summary = f"Failed to write {len(self.failed)} artifact(s): {details}"
        if self.written:
            summary += " (written: " + ", ".join(str(path) for path in self.written) + ")"
        super().__init__(summary)


__all__ = [
    "GenerationError",
    "IdentifierCollisionError",
    "IdentifierError",
    "MetadataError",
    "SourceReadError",
    "TemplateRenderError",
    "WriteError",
]
