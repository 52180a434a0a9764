"""Tests for table headings and rows."""

from __future__ import annotations

from bootup.types.dto import URL_HEADING, Heading, HeadingSet, ReportRow


def test_heading_set_starts_with_url() -> None:
    headings = HeadingSet()
    assert headings.keys() == ["url"]
    assert list(headings) == [URL_HEADING]
    assert headings.category_keys() == []


def test_heading_set_keeps_insertion_order_without_duplicates() -> None:
    headings = HeadingSet()
    assert headings.add(Heading("scriptGC", "text", "Garbage collection")) is True
    assert headings.add(Heading("scripting", "text", "Script Evaluation")) is True
    assert headings.add(Heading("scriptGC", "text", "Garbage collection")) is False
    assert headings.add(Heading("url", "text", "Other URL")) is False
    assert headings.keys() == ["url", "scriptGC", "scripting"]
    assert headings.category_keys() == ["scriptGC", "scripting"]
    assert len(headings) == 3
    assert "scripting" in headings
    assert "painting" not in headings


def test_heading_set_to_list() -> None:
    headings = HeadingSet()
    headings.add(Heading("gpu", "text", "GPU"))
    assert headings.to_list() == [
        {"key": "url", "itemType": "url", "text": "URL"},
        {"key": "gpu", "itemType": "text", "text": "GPU"},
    ]


def test_report_row_url_wins_over_cells() -> None:
    row = ReportRow(url="https://a.test/x.js", cells={"url": "0\xa0ms", "gpu": "1\xa0ms"})
    assert row.to_dict() == {"url": "https://a.test/x.js", "gpu": "1\xa0ms"}
