"""Renders the icon module, plugin and type declarations from Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..errors import TemplateRenderError
from ..models import GenerationContext, RenderedArtifacts

ARTIFACT_TEMPLATES: Dict[str, str] = {
    "module": "icons.js.j2",
    "plugin": "plugin.js.j2",
    "types": "icons.d.ts.j2",
}

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_string(value: str) -> str:
    """Escape ``value`` for use inside a single-quoted JavaScript literal."""
    return "".join(_JS_ESCAPES.get(char, char) for char in value)


class ArtifactRenderer:
    """Produces artifact texts from a frozen generation context."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render_module(self, context: GenerationContext) -> str:
        return self._render("module", context)

    def render_plugin(self, context: GenerationContext) -> str:
        return self._render("plugin", context)

    def render_types(self, context: GenerationContext) -> str:
        return self._render("types", context)

    def render_all(self, context: GenerationContext) -> RenderedArtifacts:
        """Render all three source artifacts from the same context."""
        return RenderedArtifacts(
            module=self.render_module(context),
            plugin=self.render_plugin(context),
            types=self.render_types(context),
        )

    def _render(self, artifact: str, context: GenerationContext) -> str:
        template_name = ARTIFACT_TEMPLATES[artifact]
        try:
            template = self._env.get_template(template_name)
            return template.render(**self._template_vars(context))
        except TemplateError as exc:
            raise TemplateRenderError(artifact, template_name, str(exc) or exc.__class__.__name__) from exc

    @staticmethod
    def _template_vars(context: GenerationContext) -> Dict[str, Any]:
        return {
            "version": context.version,
            "license": context.license,
            "homepage": context.homepage,
            "created": context.created,
            "prefix": context.prefix,
            "blank": context.blank,
            "identifiers": context.identifiers,
            "icons": context.icons,
        }

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["js_string"] = js_string
        return env


__all__ = ["ARTIFACT_TEMPLATES", "ArtifactRenderer", "js_string"]
