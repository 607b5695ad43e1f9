"""Tests for iconsgen.rendering."""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType

import pytest

from iconsgen.errors import TemplateRenderError
from iconsgen.models import GenerationContext, IconRecord
from iconsgen.rendering import ArtifactRenderer, js_string


def _context(*icons: IconRecord) -> GenerationContext:
    identifiers = tuple(sorted(icon.identifier for icon in icons))
    by_id = {icon.identifier: icon for icon in icons}
    return GenerationContext(
        version="1.2.0",
        license="MIT",
        homepage="https://icons.getbootstrap.com",
        created="2024-05-01T12:00:00.000Z",
        prefix="BIcon",
        identifiers=identifiers,
        icons=MappingProxyType({identifier: by_id[identifier] for identifier in identifiers}),
    )


def _icon(display_name: str, content: str = '<path d="M1 1"/>') -> IconRecord:
    return IconRecord(
        identifier=f"BIcon{display_name}",
        display_name=display_name,
        content=content,
        source=f"{display_name.lower()}.svg",
    )


SAMPLE = _context(_icon("Bell"), _icon("Alarm", '<path stroke="currentColor"/>'), _icon("1Circle"))


def test_module_exports_each_icon_with_provenance_header() -> None:
    module = ArtifactRenderer().render_module(SAMPLE)

    assert module.startswith("// --- BEGIN AUTO-GENERATED FILE ---\n//\n// @IconsVersion: 1.2.0\n")
    assert "// @Generated: 2024-05-01T12:00:00.000Z\n" in module
    assert " * @link https://icons.getbootstrap.com\n" in module
    assert " * @license MIT\n" in module
    assert "export const BIconBlank = /*#__PURE__*/ makeIcon('Blank', '')\n" in module
    assert (
        "// eslint-disable-next-line\n"
        "export const BIconAlarm = /*#__PURE__*/ makeIcon(\n"
        "  'Alarm',\n"
        "  '<path stroke=\"currentColor\"/>'\n"
        ")\n"
    ) in module
    assert module.endswith(")\n\n// --- END AUTO-GENERATED FILE ---\n")


def test_types_declare_one_class_per_icon() -> None:
    types = ArtifactRenderer().render_types(_context(_icon("A"), _icon("B")))

    assert types == (
        "// --- BEGIN AUTO-GENERATED FILE ---\n"
        "//\n"
        "// @IconsVersion: 1.2.0\n"
        "// @Generated: 2024-05-01T12:00:00.000Z\n"
        "//\n"
        "// This file is generated on each build. Do not edit this file!\n"
        "\n"
        "import Vue from 'vue'\n"
        "import { BvComponent } from '../'\n"
        "\n"
        "// --- BootstrapVue custom icons ---\n"
        "\n"
        "export declare class BIconBlank extends BvComponent {}\n"
        "\n"
        "// --- Bootstrap Icons ---\n"
        "\n"
        "export declare class BIconA extends BvComponent {}\n"
        "\n"
        "export declare class BIconB extends BvComponent {}\n"
        "\n"
        "// --- END AUTO-GENERATED FILE ---\n"
    )


def test_plugin_registers_helper_components_and_icons() -> None:
    plugin = ArtifactRenderer().render_plugin(SAMPLE)

    assert "import { BIcon } from './icon'\n" in plugin
    assert "import { BIconstack } from './iconstack'\n" in plugin
    assert "  BIconBell\n} from './icons'\n" in plugin
    assert "  'BIconBlank',\n  // Bootstrap icon component names\n  'BIcon1Circle',\n" in plugin
    assert "    BIconBell\n  }\n})\n" in plugin
    assert "{ NAME: 'BootstrapVueIcons' }" in plugin


def test_artifacts_share_identifier_order() -> None:
    artifacts = ArtifactRenderer().render_all(SAMPLE)

    module_order = re.findall(r"^export const (\w+) = ", artifacts.module, re.MULTILINE)
    names_block = artifacts.plugin.split("export const iconNames = [", 1)[1].split("]", 1)[0]
    plugin_order = re.findall(r"'(\w+)'", names_block)
    components_block = artifacts.plugin.split("components: {", 1)[1].split("}", 1)[0]
    registered = re.findall(r"^\s+(BIcon\w+),?$", components_block, re.MULTILINE)
    types_order = re.findall(r"^export declare class (\w+) ", artifacts.types, re.MULTILINE)

    expected = ["BIconBlank", "BIcon1Circle", "BIconAlarm", "BIconBell"]
    assert module_order == expected
    assert plugin_order == expected
    assert types_order == expected
    assert registered == ["BIconstack", *expected]


def test_render_is_deterministic() -> None:
    renderer = ArtifactRenderer()

    assert renderer.render_all(SAMPLE).as_dict() == renderer.render_all(SAMPLE).as_dict()


def test_render_handles_empty_icon_set() -> None:
    artifacts = ArtifactRenderer().render_all(_context())

    assert "export const BIconBlank" in artifacts.module
    assert "'BIconBlank',\n  // Bootstrap icon component names\n]" in artifacts.plugin


def test_content_is_escaped_for_single_quoted_literals() -> None:
    module = ArtifactRenderer().render_module(_context(_icon("Quote", "<text>it's\nhere</text>")))

    assert "  '<text>it\\'s\\nhere</text>'\n" in module


def test_js_string_escapes_backslashes_and_separators() -> None:
    assert js_string("a\\b") == "a\\\\b"
    assert js_string("line\u2028break\r") == "line\\u2028break\\r"
    assert js_string('"double"') == '"double"'


def test_custom_templates_directory_overrides_defaults(tmp_path: Path) -> None:
    (tmp_path / "icons.d.ts.j2").write_text(
        "{% for identifier in identifiers %}{{ identifier }};{% endfor %}\n", encoding="utf-8"
    )

    renderer = ArtifactRenderer(tmp_path)

    assert renderer.render_types(SAMPLE) == "BIcon1Circle;BIconAlarm;BIconBell;"
    assert "makeIcon" in renderer.render_module(SAMPLE)


def test_undefined_template_variable_raises_render_error(tmp_path: Path) -> None:
    (tmp_path / "plugin.js.j2").write_text("{{ unknown_field }}\n", encoding="utf-8")

    with pytest.raises(TemplateRenderError) as excinfo:
        ArtifactRenderer(tmp_path).render_plugin(SAMPLE)

    assert excinfo.value.artifact == "plugin"
    assert excinfo.value.template == "plugin.js.j2"
    assert "unknown_field" in str(excinfo.value)


def test_template_syntax_error_raises_render_error(tmp_path: Path) -> None:
    (tmp_path / "icons.js.j2").write_text("{% for %}\n", encoding="utf-8")

    with pytest.raises(TemplateRenderError) as excinfo:
        ArtifactRenderer(tmp_path).render_all(SAMPLE)

    assert excinfo.value.artifact == "module"
