"""Persists generated artifacts with staged, atomic replacement."""

from __future__ import annotations

import os
import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from .errors import WriteError
from .logging import get_logger

_DEFAULT_MODE = 0o644


class ArtifactWriter:
    """Writes a set of artifacts so that either all are staged or none are touched."""

    def __init__(self, *, max_workers: int | None = None) -> None:
        self.max_workers = max_workers
        self.logger = get_logger("writer")

    def write_all(self, artifacts: Mapping[Path, str]) -> List[Path]:
        """Write every changed artifact and return the paths that were replaced."""
        changed = {path: text for path, text in artifacts.items() if not _is_current(path, text)}
        for path in artifacts:
            if path not in changed:
                self.logger.debug("%s unchanged; leaving as is", path)
        if not changed:
            return []
        staged = self._stage(changed)
        return self._commit(staged)

    def _stage(self, artifacts: Mapping[Path, str]) -> Dict[Path, Path]:
        staged: Dict[Path, Path] = {}
        failed: Dict[Path, str] = {}
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="iconsgen-write"
        ) as executor:
            futures = {
                path: executor.submit(_stage_one, path, text) for path, text in artifacts.items()
            }
        unexpected: BaseException | None = None
        for path, future in futures.items():
            exc = future.exception()
            if exc is None:
                staged[path] = future.result()
            elif isinstance(exc, OSError):
                failed[path] = str(exc)
            elif unexpected is None:
                unexpected = exc
        if unexpected is not None or failed:
            _discard(staged.values())
            if unexpected is not None:
                raise unexpected
            raise WriteError([], failed)
        return staged

    def _commit(self, staged: Mapping[Path, Path]) -> List[Path]:
        written: List[Path] = []
        failed: Dict[Path, str] = {}
        for path, temp_path in staged.items():
            try:
                os.replace(temp_path, path)
            except OSError as exc:
                failed[path] = str(exc)
                _discard([temp_path])
                continue
            self.logger.info("Wrote to %s", path)
            written.append(path)
        if failed:
            raise WriteError(written, failed)
        return written


def _is_current(path: Path, text: str) -> bool:
    try:
        return path.read_bytes() == text.encode("utf-8")
    except OSError:
        return False


def _stage_one(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    handle = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        newline="\n",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            handle.write(text)
        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            os.chmod(temp_path, _DEFAULT_MODE)
    except BaseException:
        _discard([temp_path])
        raise
    return temp_path


def _discard(paths: Iterable[Path]) -> None:
    for temp_path in paths:
        temp_path.unlink(missing_ok=True)


__all__ = ["ArtifactWriter"]
