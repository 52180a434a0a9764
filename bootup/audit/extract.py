"""URL timing extraction.

Flattens the bottom-up tree from a grouping engine into
``{url: {task title: milliseconds}}``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bootup.logging import get_logger
from bootup.types.base import EventClassifier, GroupingEngine, TaskDurations, UrlTimingMap
from bootup.utils.formatting import round_half_up

logger = get_logger(__name__)

#: URLs whose time is not attributable to any script resource.
IGNORED_URLS = frozenset({"", "about:blank"})


def _node_attr(node: Any, name: str, alias: str) -> Any:
    """Read a tree field from an object node or from a mapping node (camelCase alias)."""
    if isinstance(node, Mapping):
        return node.get(name, node.get(alias))
    return getattr(node, name, None)


def _children(node: Any) -> Mapping[str, Any]:
    children = _node_attr(node, "children", "children")
    return children if isinstance(children, Mapping) else {}


def get_execution_timings_by_url(
    trace: Any,
    group_by_url: GroupingEngine,
    classify: EventClassifier,
) -> UrlTimingMap:
    """Return summed self time per URL and task title.

    Args:
        trace: Trace handed unchanged to ``group_by_url``.
        group_by_url: Grouping engine; its root's children are keyed by URL.
        classify: Event classifier; the ``title`` of its result (attribute or
            mapping key) names the task.

    Returns:
        Mapping of URL to task title to milliseconds. Each task's self time is
        rounded to one decimal before summing. Empty and ``about:blank`` URLs
        are left out; a URL node without children maps to ``{}``.
    """
    tree = group_by_url(trace)
    result: UrlTimingMap = {}
    skipped = 0

    for url, per_url_node in _children(tree).items():
        if not url or url in IGNORED_URLS:
            skipped += 1
            continue

        tasks: TaskDurations = {}
        for per_task_node in _children(per_url_node).values():
            style = classify(_node_attr(per_task_node, "event", "event"))
            title = _node_attr(style, "title", "title")
            self_time: Optional[float] = _node_attr(
                per_task_node, "self_time", "selfTime"
            )
            tasks[title] = tasks.get(title, 0.0) + round_half_up(self_time or 0.0, 1)
        result[url] = tasks

    logger.debug("Extracted timings for %d URLs (%d skipped)", len(result), skipped)
    return result
