"""Reference trace collaborators for the audit.

The aggregation pipeline only needs two callables: a grouping engine that
turns a trace into a URL -> task tree, and a classifier that styles raw
events. This package ships implementations of both for Chrome traces:

- ``bottom_up_group_by_url``: grouping engine returning a ``TraceNode`` tree.
- ``event_style``: classifier returning an ``EventStyle``.
"""

from bootup.trace.styles import EVENT_STYLES, EventStyle, event_style
from bootup.trace.tree import TraceNode, bottom_up_group_by_url, trace_events

__all__ = [
    "TraceNode",
    "bottom_up_group_by_url",
    "trace_events",
    "EventStyle",
    "EVENT_STYLES",
    "event_style",
]
