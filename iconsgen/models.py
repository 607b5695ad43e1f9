"""Core data models shared across iconsgen components."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class IconRecord:
    """Sanitized icon markup bound to its generated identifier."""

    identifier: str
    display_name: str
    content: str
    source: str


@dataclass(frozen=True)
class UpstreamPackage:
    """Descriptor fields of the upstream icon set."""

    version: str
    license: str
    homepage: str


@dataclass(frozen=True)
class GenerationContext:
    """Frozen state shared by the renderers and the metadata merger."""

    version: str
    license: str
    homepage: str
    created: str
    prefix: str
    identifiers: Tuple[str, ...]
    icons: Mapping[str, IconRecord] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def blank(self) -> str:
        return f"{self.prefix}Blank"


@dataclass
class RenderedArtifacts:
    """Final texts for one run, keyed by artifact role."""

    module: str
    plugin: str
    types: str
    metadata: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        texts = {"module": self.module, "plugin": self.plugin, "types": self.types}
        if self.metadata is not None:
            texts["metadata"] = self.metadata
        return texts
