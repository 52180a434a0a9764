"""Tests for `bootup.config` focusing on behavior and correctness."""

from __future__ import annotations

import dataclasses
import textwrap
from pathlib import Path

import jsonschema
import pytest

from bootup.config import (
    DEFAULT_CONFIG,
    AuditMeta,
    BootupConfig,
    load_taxonomy_file,
    load_taxonomy_yaml,
)
from bootup.taxonomy import DEFAULT_TAXONOMY, Category


def test_default_config_values() -> None:
    assert DEFAULT_CONFIG.threshold_ms == 4000.0
    assert DEFAULT_CONFIG.default_pass == "defaultPass"
    assert DEFAULT_CONFIG.strict_taxonomy is False
    assert DEFAULT_CONFIG.meta == AuditMeta()


def test_passes_is_strictly_below_threshold() -> None:
    config = BootupConfig()
    assert config.passes(0.0)
    assert config.passes(3999.99)
    assert not config.passes(4000.0)
    assert not config.passes(4000.01)


def test_config_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.threshold_ms = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"threshold_ms": 0},
        {"threshold_ms": -5.0},
        {"threshold_ms": float("nan")},
        {"row_granularity_ms": 0.0},
        {"display_granularity_ms": "10"},
        {"default_pass": ""},
    ],
)
def test_invalid_config_is_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        BootupConfig(**kwargs)


def test_load_taxonomy_yaml() -> None:
    extra = load_taxonomy_yaml(
        textwrap.dedent(
            """
            task_categories:
              Compile Module: scriptParseCompile
              Streaming Compile: scriptParseCompile
              Prerender: other
            """
        )
    )
    assert extra == {
        "Compile Module": Category.SCRIPT_PARSE_COMPILE,
        "Streaming Compile": Category.SCRIPT_PARSE_COMPILE,
        "Prerender": Category.OTHER,
    }


def test_load_taxonomy_yaml_normalizes_boolean_keys() -> None:
    extra = load_taxonomy_yaml("task_categories:\n  yes: scripting\n")
    assert extra == {"True": Category.SCRIPTING}


def test_load_taxonomy_yaml_rejects_unknown_category() -> None:
    with pytest.raises(jsonschema.ValidationError):
        load_taxonomy_yaml("task_categories:\n  Compile Module: compiling\n")


def test_load_taxonomy_yaml_rejects_unknown_top_level_keys() -> None:
    with pytest.raises(jsonschema.ValidationError):
        load_taxonomy_yaml("task_categories: {}\nthreshold_ms: 10\n")


def test_load_taxonomy_yaml_requires_task_categories() -> None:
    with pytest.raises(jsonschema.ValidationError):
        load_taxonomy_yaml("")


def test_load_taxonomy_yaml_rejects_non_mapping() -> None:
    with pytest.raises(ValueError, match="dictionary"):
        load_taxonomy_yaml("- Compile Module\n")


def test_load_taxonomy_file_extends_default(tmp_path: Path) -> None:
    path = tmp_path / "extra.yaml"
    path.write_text("task_categories:\n  Compile Module: scriptParseCompile\n  Layout: other\n")
    taxonomy = load_taxonomy_file(path)
    assert taxonomy["Compile Module"] is Category.SCRIPT_PARSE_COMPILE
    assert taxonomy["Layout"] is Category.OTHER
    assert taxonomy["Evaluate Script"] is Category.SCRIPTING
    assert len(taxonomy) == len(DEFAULT_TAXONOMY) + 1
    # Default table is untouched
    assert DEFAULT_TAXONOMY["Layout"] is Category.STYLE_LAYOUT
