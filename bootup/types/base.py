"""Type aliases and collaborator protocols for the aggregation pipeline."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, Union

#: Key of the identity column that always leads the report table.
URL_HEADING_KEY = "url"

#: Task display title -> summed self time in milliseconds, for one URL.
TaskDurations = Dict[str, float]

#: URL -> task durations. Never contains ``""`` or ``"about:blank"``.
UrlTimingMap = Dict[str, TaskDurations]

#: Category key -> summed milliseconds, for one URL.
CategoryTotals = Dict[str, float]


class GroupingNode(Protocol):
    """A node of the bottom-up tree produced by a grouping engine.

    The root's ``children`` are keyed by URL; each URL node's ``children`` are
    keyed by task type. ``self_time`` is in milliseconds.
    """

    self_time: Optional[float]
    event: Optional[Mapping[str, Any]]
    children: Optional[Mapping[str, "GroupingNode"]]


class GroupingEngine(Protocol):
    """Turns a trace into a tree grouped by URL, then by task type."""

    def __call__(self, trace: Any) -> GroupingNode: ...


class EventStyleLike(Protocol):
    """Anything exposing a task display ``title``.

    Classifiers may also return a plain ``{"title": ...}`` mapping.
    """

    title: str


class EventClassifier(Protocol):
    """Maps a raw trace event onto its display style."""

    def __call__(
        self, event: Optional[Mapping[str, Any]]
    ) -> Union[EventStyleLike, Mapping[str, Any]]: ...
