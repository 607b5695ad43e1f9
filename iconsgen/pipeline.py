"""Pipeline driver that regenerates the icon artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List

from .collector import IconCollector, build_context
from .config import IconsGenConfig, check_distinct_outputs, load_config
from .logging import get_logger
from .metadata import dump_metadata, load_metadata, merge_metadata
from .models import GenerationContext, RenderedArtifacts
from .rendering import ArtifactRenderer
from .upstream import load_upstream
from .version_gate import is_up_to_date, recorded_version
from .writer import ArtifactWriter


@dataclass
class GenerationOutcome:
    """Result of a pipeline run."""

    version: str
    skipped: bool
    icon_count: int = 0
    written: List[Path] = field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IconsPipeline:
    """Sequences collection, rendering, metadata merging and writing."""

    def __init__(
        self,
        config: IconsGenConfig,
        *,
        collector: IconCollector | None = None,
        renderer: ArtifactRenderer | None = None,
        writer: ArtifactWriter | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        check_distinct_outputs(config.output)
        self.collector = collector or IconCollector(
            config.source.prefix, max_workers=config.generation.max_workers
        )
        self.renderer = renderer or ArtifactRenderer(config.templates_dir)
        self.writer = writer or ArtifactWriter()
        self.clock = clock or _utc_now
        self.logger = get_logger("pipeline")

    @classmethod
    def from_path(cls, path: str | Path, **kwargs) -> "IconsPipeline":
        """Build a pipeline from the .iconsgen.yml found at ``path``."""
        return cls(load_config(Path(path).expanduser().resolve()), **kwargs)

    def run(self, *, force: bool = False) -> GenerationOutcome:
        """Regenerate all artifacts unless the upstream version is already recorded."""
        source = self.config.source
        output = self.config.output

        upstream = load_upstream(source.package_file)
        document = load_metadata(output.metadata)
        recorded = recorded_version(document, source.label)
        self.logger.debug("Upstream %s version %s, recorded %s", source.label, upstream.version, recorded)

        if is_up_to_date(upstream.version, recorded):
            if self.config.generation.skip_unchanged and not force:
                self.logger.info("No changes detected in %s version %s; skipping", source.label, upstream.version)
                return GenerationOutcome(version=upstream.version, skipped=True)
            self.logger.info("Regenerating unchanged %s version %s", source.label, upstream.version)

        self.logger.info("Reading SVGs from %s version %s", source.label, upstream.version)
        icons = self.collector.collect(source.icons_dir)
        self.logger.info("Read %d SVGs", len(icons))

        context = build_context(
            icons,
            upstream,
            created=format_timestamp(self.clock()),
            prefix=source.prefix,
        )
        artifacts = self.render(context, document)

        written = self.writer.write_all(self._targets(artifacts))
        self.logger.info("Generated %d icon components (%d file(s) changed)", len(icons), len(written))
        return GenerationOutcome(
            version=upstream.version,
            skipped=False,
            icon_count=len(icons),
            written=written,
        )

    def render(self, context: GenerationContext, document: Dict[str, Any]) -> RenderedArtifacts:
        """Render the three source artifacts and the merged metadata document."""
        self.logger.info("Creating icon components, plugin and type declarations")
        artifacts = self.renderer.render_all(context)
        self.logger.info("Updating icons meta info")
        merged = merge_metadata(
            document,
            context,
            label=self.config.source.label,
            reference_component=self.config.metadata.reference_component,
            excluded_prop=self.config.metadata.excluded_prop,
        )
        artifacts.metadata = dump_metadata(merged)
        return artifacts

    def _targets(self, artifacts: RenderedArtifacts) -> Dict[Path, str]:
        output = self.config.output
        paths = {
            "module": output.module,
            "plugin": output.plugin,
            "types": output.types,
            "metadata": output.metadata,
        }
        return {paths[role]: text for role, text in artifacts.as_dict().items()}


__all__ = ["GenerationOutcome", "IconsPipeline", "format_timestamp"]
