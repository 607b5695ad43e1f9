"""Reconciles generated icon components with the hand-maintained package metadata."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .errors import MetadataError
from .models import GenerationContext
from .version_gate import version_key

AUTO_GEN_KEY = "auto-gen"


def load_metadata(path: Path) -> Dict[str, Any]:
    """Read the metadata document and check the shape the merger relies on."""
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataError(path, f"unable to read ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise MetadataError(path, f"invalid JSON ({exc})") from exc
    _check_shape(document, path)
    return document


def dump_metadata(document: Mapping[str, Any]) -> str:
    """Serialise the document as pretty-printed JSON with a trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def is_auto_generated(entry: Mapping[str, Any]) -> bool:
    return bool(entry.get(AUTO_GEN_KEY))


def merge_components(
    existing: Iterable[Mapping[str, Any]], fresh: Iterable[Mapping[str, Any]]
) -> List[Mapping[str, Any]]:
    """Keep hand-authored entries in order, replace every auto-generated one."""
    kept = [entry for entry in existing if not is_auto_generated(entry)]
    return [*kept, *fresh]


def reference_props(
    entries: Sequence[Mapping[str, Any]],
    reference_component: str,
    excluded_prop: str,
) -> List[Any]:
    """Return the props of the hand-authored reference entry without the excluded prop."""
    for entry in entries:
        if is_auto_generated(entry) or entry.get("component") != reference_component:
            continue
        props = entry.get("props") or []
        if not isinstance(props, list):
            raise MetadataError(None, f"Component {reference_component} has a non-list props field")
        return [
            prop
            for prop in props
            if not (isinstance(prop, Mapping) and prop.get("prop") == excluded_prop)
        ]
    raise MetadataError(None, f"Reference component {reference_component} not found in meta.components")


def build_component_entries(
    context: GenerationContext, props: Sequence[Any], label: str
) -> List[Dict[str, Any]]:
    """One auto-generated entry per icon, in the context's identifier order."""
    tag = f"{label} {context.version}"
    return [
        {"component": identifier, AUTO_GEN_KEY: tag, "props": copy.deepcopy(list(props))}
        for identifier in context.identifiers
    ]


def merge_metadata(
    document: Mapping[str, Any],
    context: GenerationContext,
    *,
    label: str,
    reference_component: str,
    excluded_prop: str,
) -> Dict[str, Any]:
    """Return a new document with regenerated icon entries and an updated version stamp."""
    _check_shape(document, None)
    merged = copy.deepcopy(dict(document))
    meta = merged["meta"]
    components = meta["components"]
    props = reference_props(components, reference_component, excluded_prop)
    fresh = build_component_entries(context, props, label)
    meta["components"] = merge_components(components, fresh)
    meta[version_key(label)] = context.version
    return merged


def _check_shape(document: Any, path: Path | None) -> None:
    if not isinstance(document, dict):
        raise MetadataError(path, "metadata document must be a JSON object")
    meta = document.get("meta")
    if not isinstance(meta, dict):
        raise MetadataError(path, "metadata document has no 'meta' object")
    components = meta.get("components")
    if not isinstance(components, list):
        raise MetadataError(path, "'meta.components' must be a list")
    for index, entry in enumerate(components):
        if not isinstance(entry, dict):
            raise MetadataError(path, f"'meta.components[{index}]' must be an object")


__all__ = [
    "AUTO_GEN_KEY",
    "build_component_entries",
    "dump_metadata",
    "is_auto_generated",
    "load_metadata",
    "merge_components",
    "merge_metadata",
    "reference_props",
]
