"""Bottom-up grouping of a Chrome trace by URL, then by task type.

Reference grouping engine for the audit. Main-thread slices are nested per
thread with a stack ('X' complete events and 'B'/'E' pairs), each slice's self
time is its duration minus the duration of its direct children, and the self
time is then rolled up into a two-level tree: URL -> event name.

A slice is attributed to the script URL it names itself (``args.data.url``,
``args.data.scriptName`` or the top ``stackTrace`` frame). Slices without one
inherit the URL of their enclosing slice; top-level slices without one land
under the empty URL. A "B" slice whose "E" never arrives is kept with zero
duration and does not enclose the slices that follow it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from bootup.logging import get_logger

logger = get_logger(__name__)

# Phases that describe a timed slice on a thread
_SLICE_PHASES = ("X", "B", "E")


@dataclass
class TraceNode:
    """Node of the bottom-up tree.

    Attributes:
        self_time: Summed self time in milliseconds (None when not timed).
        event: First raw trace event grouped under this node.
        children: Child nodes in first-seen order.
    """

    self_time: Optional[float] = None
    event: Optional[Mapping[str, Any]] = None
    children: Dict[str, "TraceNode"] = field(default_factory=dict)


@dataclass
class _Slice:
    event: Mapping[str, Any]
    start: float
    end: Optional[float] = None
    own_url: Optional[str] = None
    url: str = ""
    children: List["_Slice"] = field(default_factory=list)

    @property
    def duration(self) -> float:
        if self.end is None:
            return 0.0
        return max(0.0, self.end - self.start)


def trace_events(trace: Any) -> List[Mapping[str, Any]]:
    """Return the event list of a trace.

    Accepts either a bare list of events or the ``{"traceEvents": [...]}``
    container written by Chrome. ``None`` is an empty trace.

    Raises:
        TypeError: If ``trace`` has neither shape.
    """
    if trace is None:
        return []
    if isinstance(trace, Mapping):
        events = trace.get("traceEvents", [])
    else:
        events = trace
    if not isinstance(events, list):
        raise TypeError(
            f"Trace must be a list of events or a mapping with 'traceEvents', got {type(trace).__name__}"
        )
    return [e for e in events if isinstance(e, Mapping)]


def _strip_fragment(url: str) -> str:
    return url.split("#", 1)[0]


def event_url(event: Mapping[str, Any]) -> Optional[str]:
    """Return the script URL an event names itself, if any."""
    args = event.get("args")
    if not isinstance(args, Mapping):
        return None
    for container_key in ("data", "beginData"):
        data = args.get(container_key)
        if not isinstance(data, Mapping):
            continue
        for key in ("url", "scriptName"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return _strip_fragment(value)
        stack = data.get("stackTrace")
        if isinstance(stack, list) and stack and isinstance(stack[0], Mapping):
            value = stack[0].get("url")
            if isinstance(value, str) and value:
                return _strip_fragment(value)
    return None


def _is_slice(event: Mapping[str, Any]) -> bool:
    return (
        event.get("ph") in _SLICE_PHASES
        and isinstance(event.get("name"), str)
        and isinstance(event.get("ts"), (int, float))
    )


def _lift_unclosed(slices: List[_Slice]) -> List[_Slice]:
    """Move the children of never-closed 'B' slices up to the slice's own level.

    A 'B' without its 'E' (truncated trace) has no known extent, so it is kept
    as a zero-length slice that encloses nothing.
    """
    result: List[_Slice] = []
    for s in slices:
        s.children = _lift_unclosed(s.children)
        result.append(s)
        if s.end is None:
            result.extend(s.children)
            s.children = []
    result.sort(key=lambda s: s.start)
    return result


def _assign_urls(slices: Iterable[_Slice], parent_url: str) -> None:
    for s in slices:
        s.url = s.own_url or parent_url
        _assign_urls(s.children, s.url)


def _build_slices(events: Iterable[Mapping[str, Any]]) -> List[_Slice]:
    """Nest slices per thread and return the top-level ones, in start order."""
    by_thread: Dict[Tuple[Any, Any], List[Mapping[str, Any]]] = {}
    for event in events:
        if _is_slice(event):
            by_thread.setdefault((event.get("pid"), event.get("tid")), []).append(event)

    roots: List[_Slice] = []
    for thread_events in by_thread.values():
        # Stable sort keeps file order for equal timestamps; longer 'X'
        # slices first so parents open before their children
        thread_events = sorted(
            thread_events, key=lambda e: (e["ts"], -float(e.get("dur") or 0))
        )
        thread_roots: List[_Slice] = []
        stack: List[_Slice] = []
        for event in thread_events:
            ts = float(event["ts"])
            # Drop the outermost slice that ended before this one starts,
            # together with everything opened inside it
            for idx, s in enumerate(stack):
                if s.end is not None and s.end <= ts:
                    del stack[idx:]
                    break

            if event["ph"] == "E":
                closing = next(
                    (
                        s
                        for s in reversed(stack)
                        if s.end is None and s.event.get("name") == event["name"]
                    ),
                    None,
                )
                if closing is not None:
                    closing.end = ts
                    del stack[stack.index(closing) :]
                continue

            parent = stack[-1] if stack else None
            current = _Slice(
                event=event,
                start=ts,
                end=ts + float(event.get("dur") or 0) if event["ph"] == "X" else None,
                own_url=event_url(event),
            )
            if parent is not None:
                parent.children.append(current)
            else:
                thread_roots.append(current)
            stack.append(current)

        unclosed = sum(1 for s in _walk(thread_roots) if s.end is None)
        if unclosed:
            logger.debug(
                "%d unclosed B slices on thread %s",
                unclosed,
                thread_events[0].get("tid"),
            )
        roots.extend(_lift_unclosed(thread_roots))

    roots.sort(key=lambda s: s.start)
    _assign_urls(roots, "")
    return roots


def _walk(slices: Iterable[_Slice]) -> Iterable[_Slice]:
    for s in slices:
        yield s
        yield from _walk(s.children)


def bottom_up_group_by_url(trace: Any) -> TraceNode:
    """Group a trace bottom-up by URL, then by event name.

    Args:
        trace: Chrome trace as a list of events or ``{"traceEvents": [...]}``.

    Returns:
        Root node whose children are keyed by URL; each URL node's children
        are keyed by event name and carry summed self time in milliseconds.
    """
    events = trace_events(trace)
    root = TraceNode()
    slice_count = 0
    for s in _walk(_build_slices(events)):
        slice_count += 1
        child_time = sum(c.duration for c in s.children)
        self_ms = max(0.0, s.duration - child_time) / 1000.0

        url_node = root.children.setdefault(s.url, TraceNode(self_time=0.0))
        url_node.self_time = (url_node.self_time or 0.0) + self_ms

        name = s.event["name"]
        task_node = url_node.children.get(name)
        if task_node is None:
            url_node.children[name] = TraceNode(self_time=self_ms, event=s.event)
        else:
            task_node.self_time = (task_node.self_time or 0.0) + self_ms

    logger.debug(
        "Grouped %d slices from %d events into %d URLs",
        slice_count,
        len(events),
        len(root.children),
    )
    return root
