"""Build-time generator for icon component modules."""

from .collector import IconCollector, build_context
from .config import ConfigError, IconsGenConfig, load_config
from .errors import (
    GenerationError,
    IdentifierCollisionError,
    IdentifierError,
    MetadataError,
    SourceReadError,
    TemplateRenderError,
    WriteError,
)
from .models import GenerationContext, IconRecord, RenderedArtifacts, UpstreamPackage
from .pipeline import GenerationOutcome, IconsPipeline

__all__ = [
    "ConfigError",
    "GenerationContext",
    "GenerationError",
    "GenerationOutcome",
    "IconCollector",
    "IconRecord",
    "IconsGenConfig",
    "IconsPipeline",
    "IdentifierCollisionError",
    "IdentifierError",
    "MetadataError",
    "RenderedArtifacts",
    "SourceReadError",
    "TemplateRenderError",
    "UpstreamPackage",
    "WriteError",
    "build_context",
    "load_config",
]
