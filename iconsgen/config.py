"""Configuration loading for iconsgen (.iconsgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import GenerationError
from .naming import DEFAULT_PREFIX

CONFIG_FILENAME = ".iconsgen.yml"


class ConfigError(GenerationError):
    """Raised when the configuration file cannot be parsed."""

    stage = "config"


@dataclass
class SourceConfig:
    """Where the upstream icon set lives and how its icons are named."""

    icons_dir: Path
    package_file: Path
    prefix: str = DEFAULT_PREFIX
    label: str = "bootstrap-icons"


@dataclass
class OutputConfig:
    """Destinations of the generated artifacts."""

    module: Path
    plugin: Path
    types: Path
    metadata: Path


@dataclass
class MetadataConfig:
    """Which hand-authored component supplies the generated props."""

    reference_component: str = DEFAULT_PREFIX
    excluded_prop: str = "icon"


@dataclass
class GenerationConfig:
    """Run behaviour toggles."""

    skip_unchanged: bool = True
    max_workers: Optional[int] = None


@dataclass
class IconsGenConfig:
    """Represents the settings defined in .iconsgen.yml."""

    root: Path
    source: SourceConfig
    output: OutputConfig
    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    templates_dir: Optional[Path] = None


def default_config(root: Path) -> IconsGenConfig:
    """Return the configuration used when no .iconsgen.yml is present."""
    upstream = root / "node_modules" / "bootstrap-icons"
    output_dir = root / "src" / "icons"
    return IconsGenConfig(
        root=root,
        source=SourceConfig(
            icons_dir=upstream / "icons",
            package_file=upstream / "package.json",
        ),
        output=OutputConfig(
            module=output_dir / "icons.js",
            plugin=output_dir / "plugin.js",
            types=output_dir / "icons.d.ts",
            metadata=output_dir / "package.json",
        ),
    )


def load_config(config_path: Path) -> IconsGenConfig:
    """Load configuration from disk, falling back to defaults for missing keys."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source_data = _as_dict(data.get("source"))
    if source_data:
        source = config.source
        source.icons_dir = _as_path(root, source_data.get("icons_dir")) or source.icons_dir
        source.package_file = _as_path(root, source_data.get("package_file")) or source.package_file
        source.prefix = _as_str(source_data.get("prefix")) or source.prefix
        source.label = _as_str(source_data.get("label")) or source.label

    output_data = _as_dict(data.get("output"))
    if output_data:
        output = config.output
        output_dir = _as_path(root, output_data.get("dir"))
        if output_dir is not None:
            output.module = output_dir / output.module.name
            output.plugin = output_dir / output.plugin.name
            output.types = output_dir / output.types.name
            output.metadata = output_dir / output.metadata.name
        base = output_dir or root
        output.module = _as_path(base, output_data.get("module")) or output.module
        output.plugin = _as_path(base, output_data.get("plugin")) or output.plugin
        output.types = _as_path(base, output_data.get("types")) or output.types
        output.metadata = _as_path(base, output_data.get("metadata")) or output.metadata
        check_distinct_outputs(output)

    metadata_data = _as_dict(data.get("metadata"))
    if metadata_data:
        metadata = config.metadata
        metadata.reference_component = (
            _as_str(metadata_data.get("reference_component")) or metadata.reference_component
        )
        metadata.excluded_prop = _as_str(metadata_data.get("excluded_prop")) or metadata.excluded_prop

    generation_data = _as_dict(data.get("generation"))
    if generation_data:
        skip_unchanged = _as_bool(generation_data.get("skip_unchanged"))
        if skip_unchanged is not None:
            config.generation.skip_unchanged = skip_unchanged
        max_workers = _as_int(generation_data.get("max_workers"))
        if max_workers is not None:
            if max_workers < 1:
                raise ConfigError("generation.max_workers must be a positive integer")
            config.generation.max_workers = max_workers

    config.templates_dir = _as_path(root, data.get("templates_dir"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def check_distinct_outputs(output: OutputConfig) -> None:
    """Raise ConfigError when two artifacts would be written to the same file."""
    seen: Dict[Path, str] = {}
    for role in ("module", "plugin", "types", "metadata"):
        path = getattr(output, role).resolve()
        if path in seen:
            raise ConfigError(f"output.{role} and output.{seen[path]} both point to {path}")
        seen[path] = role


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(base: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else base / path


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GenerationConfig",
    "IconsGenConfig",
    "MetadataConfig",
    "OutputConfig",
    "SourceConfig",
    "check_distinct_outputs",
    "default_config",
    "load_config",
]
