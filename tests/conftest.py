"""Shared fixtures: hand-built grouping trees and a small Chrome trace."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import pytest

from bootup.trace import EventStyle, TraceNode

TreeLayout = Dict[str, List[Tuple[str, Optional[float]]]]


@pytest.fixture
def build_tree() -> Callable[[TreeLayout], TraceNode]:
    """Return a factory turning ``{url: [(title, self_ms), ...]}`` into a tree.

    Each task gets its own child node (keyed by position), so repeated titles
    under one URL exercise summing in the extractor.
    """

    def _build(layout: TreeLayout) -> TraceNode:
        root = TraceNode()
        for url, tasks in layout.items():
            url_node = TraceNode()
            for i, (title, self_time) in enumerate(tasks):
                url_node.children[f"{i}:{title}"] = TraceNode(
                    self_time=self_time, event={"name": title}
                )
            root.children[url] = url_node
        return root

    return _build


@pytest.fixture
def title_classifier() -> Callable[[Optional[Mapping[str, Any]]], EventStyle]:
    """Classifier that uses the event name as the task title verbatim."""

    def _classify(event: Optional[Mapping[str, Any]]) -> EventStyle:
        return EventStyle(title=(event or {}).get("name", "Other"))

    return _classify


@pytest.fixture
def identity_engine() -> Callable[[Any], Any]:
    """Grouping engine for traces that already are grouping trees."""
    return lambda trace: trace


@pytest.fixture
def chrome_trace() -> List[Dict[str, Any]]:
    """Two threads of main-thread slices (timestamps in microseconds).

    Thread 1: a Task wrapping EvaluateScript (app.js) that calls a function and
    triggers a minor GC, then an unattributed Layout. Thread 2: a B/E ParseHTML
    for the document.
    """
    return [
        {"ph": "M", "name": "thread_name", "pid": 1, "tid": 1, "args": {"name": "CrRendererMain"}},
        {"ph": "X", "name": "Task", "pid": 1, "tid": 1, "ts": 1000, "dur": 10000},
        {
            "ph": "X",
            "name": "EvaluateScript",
            "pid": 1,
            "tid": 1,
            "ts": 1000,
            "dur": 8000,
            "args": {"data": {"url": "https://a.test/app.js#boot"}},
        },
        {"ph": "X", "name": "FunctionCall", "pid": 1, "tid": 1, "ts": 2000, "dur": 3000},
        {"ph": "X", "name": "MinorGC", "pid": 1, "tid": 1, "ts": 6000, "dur": 1000},
        {"ph": "X", "name": "Layout", "pid": 1, "tid": 1, "ts": 20000, "dur": 2000},
        {
            "ph": "B",
            "name": "ParseHTML",
            "pid": 1,
            "tid": 2,
            "ts": 0,
            "args": {"beginData": {"url": "https://a.test/"}},
        },
        {"ph": "E", "name": "ParseHTML", "pid": 1, "tid": 2, "ts": 5000},
    ]
