"""Tests for the task taxonomy."""

from __future__ import annotations

import pytest

from bootup.taxonomy import (
    DEFAULT_TAXONOMY,
    Category,
    TaskTaxonomy,
    TaxonomyError,
)


def test_eleven_duration_categories() -> None:
    assert [c.value for c in Category] == [
        "loading",
        "parseHTML",
        "styleLayout",
        "compositing",
        "painting",
        "gpu",
        "scripting",
        "scriptParseCompile",
        "scriptGC",
        "other",
        "images",
    ]
    assert "url" not in {c.value for c in Category}


def test_category_labels() -> None:
    assert Category.SCRIPTING.label == "Script Evaluation"
    assert Category.SCRIPT_PARSE_COMPILE.label == "Script Parsing & Compile"
    assert Category.SCRIPT_GC.label == "Garbage collection"
    assert Category.LOADING.label == "Network request loading"


def test_category_from_string() -> None:
    assert Category.from_string("scriptGC") is Category.SCRIPT_GC
    assert Category.from_string("script_gc") is Category.SCRIPT_GC
    with pytest.raises(ValueError, match="Valid values"):
        Category.from_string("compiling")


@pytest.mark.parametrize(
    "label, category",
    [
        ("Evaluate Script", Category.SCRIPTING),
        ("Parse Script", Category.SCRIPT_PARSE_COMPILE),
        ("Compile Script", Category.SCRIPT_PARSE_COMPILE),
        ("Minor GC", Category.SCRIPT_GC),
        ("DOM GC", Category.SCRIPT_GC),
        ("Recalculate Style", Category.STYLE_LAYOUT),
        ("Parse Stylesheet", Category.PARSE_HTML),
        ("Rasterize Paint", Category.PAINTING),
        ("Paint Image", Category.IMAGES),
        ("Receive Data", Category.LOADING),
        ("Update Layer Tree", Category.COMPOSITING),
        ("GPU", Category.GPU),
        ("Task", Category.OTHER),
    ],
)
def test_default_lookup(label: str, category: Category) -> None:
    assert DEFAULT_TAXONOMY.category_for(label) is category


def test_default_table_size() -> None:
    assert len(DEFAULT_TAXONOMY) == 66


def test_unknown_label_falls_back_to_other() -> None:
    assert DEFAULT_TAXONOMY.category_for("Compile Module") is Category.OTHER


def test_unknown_label_strict_raises() -> None:
    with pytest.raises(TaxonomyError) as exc_info:
        DEFAULT_TAXONOMY.category_for("Compile Module", strict=True)
    assert "Compile Module" in str(exc_info.value)
    # Usable both as a lookup failure and as a configuration error
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, ValueError)


def test_taxonomy_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_TAXONOMY["Layout"] = Category.OTHER  # type: ignore[index]


def test_extended_returns_new_taxonomy() -> None:
    extended = DEFAULT_TAXONOMY.extended({"Compile Module": "scriptParseCompile"})
    assert extended is not DEFAULT_TAXONOMY
    assert extended["Compile Module"] is Category.SCRIPT_PARSE_COMPILE
    assert "Compile Module" not in DEFAULT_TAXONOMY


def test_taxonomy_rejects_empty_label() -> None:
    with pytest.raises(TypeError):
        TaskTaxonomy({"": Category.OTHER})
