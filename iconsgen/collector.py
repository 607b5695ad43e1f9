"""Collects icon records from an upstream source directory."""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .errors import IdentifierCollisionError, SourceReadError
from .logging import get_logger
from .models import GenerationContext, IconRecord, UpstreamPackage
from .naming import DEFAULT_PREFIX, derive_identifier
from .transform import is_icon_source, read_icon_source, transform_svg


class IconCollector:
    """Reads and sanitizes every SVG in a directory on a thread pool."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, *, max_workers: int | None = None) -> None:
        self.prefix = prefix
        self.max_workers = max_workers
        self.logger = get_logger("collector")

    def collect(self, source_dir: Path) -> Dict[str, IconRecord]:
        """Return identifier -> record for every icon source in ``source_dir``."""
        entries = self._list_entries(source_dir)
        records = self._process_concurrently(entries)
        icons = merge_records(records, blank=f"{self.prefix}Blank")
        self.logger.debug("Collected %d icon(s) from %s", len(icons), source_dir)
        return icons

    def process(self, path: Path) -> Optional[IconRecord]:
        """Turn one directory entry into a record, or None for non-icon files."""
        if not is_icon_source(path):
            self.logger.debug("Skipping non-icon entry %s", path.name)
            return None
        identifier, display_name = derive_identifier(path.name, self.prefix)
        content = transform_svg(read_icon_source(path))
        return IconRecord(
            identifier=identifier,
            display_name=display_name,
            content=content,
            source=path.name,
        )

    def _list_entries(self, source_dir: Path) -> List[Path]:
        try:
            return list(source_dir.iterdir())
        except OSError as exc:
            raise SourceReadError(source_dir, str(exc)) from exc

    def _process_concurrently(self, entries: List[Path]) -> List[IconRecord]:
        if not entries:
            return []
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="iconsgen-read"
        ) as executor:
            futures = [executor.submit(self.process, path) for path in entries]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()
            # Surface the first failure; tasks already running finish before the pool exits.
            for future in done:
                exc = future.exception()
                if exc is not None:
                    raise exc
        return [record for record in (future.result() for future in futures) if record is not None]


def merge_records(records: Iterable[IconRecord], *, blank: str) -> Dict[str, IconRecord]:
    """Insert records into one mapping, refusing duplicate identifiers."""
    icons: Dict[str, IconRecord] = {}
    for record in records:
        if record.identifier == blank:
            raise IdentifierCollisionError(record.identifier, ["<built-in blank icon>", record.source])
        existing = icons.get(record.identifier)
        if existing is not None:
            raise IdentifierCollisionError(record.identifier, sorted([existing.source, record.source]))
        icons[record.identifier] = record
    return icons


def build_context(
    icons: Mapping[str, IconRecord],
    upstream: UpstreamPackage,
    *,
    created: str,
    prefix: str = DEFAULT_PREFIX,
) -> GenerationContext:
    """Freeze collected icons into the context shared by every renderer."""
    identifiers = tuple(sorted(icons))
    return GenerationContext(
        version=upstream.version,
        license=upstream.license,
        homepage=upstream.homepage,
        created=created,
        prefix=prefix,
        identifiers=identifiers,
        icons=MappingProxyType({identifier: icons[identifier] for identifier in identifiers}),
    )


__all__ = ["IconCollector", "build_context", "merge_records"]
