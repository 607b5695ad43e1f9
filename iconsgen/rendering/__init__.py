"""Template rendering for generated icon artifacts."""

from .renderer import ARTIFACT_TEMPLATES, ArtifactRenderer, js_string

__all__ = ["ARTIFACT_TEMPLATES", "ArtifactRenderer", "js_string"]
