"""Display styles for raw trace events.

Maps Chrome trace event names onto the task titles DevTools shows in its
timeline ("EvaluateScript" -> "Evaluate Script"), together with the DevTools
timeline category. The title is what the audit's taxonomy is keyed on.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class EventStyle:
    """Display style of a trace event.

    Attributes:
        title: Task title, e.g. ``"Evaluate Script"``.
        category: DevTools timeline category (``"scripting"``, ``"rendering"``,
            ``"painting"``, ``"loading"``, ``"gpu"``, ``"other"``).
    """

    title: str
    category: str = "other"


OTHER_STYLE = EventStyle("Other", "other")

EVENT_STYLES: Mapping[str, EventStyle] = MappingProxyType(
    {
        "Task": EventStyle("Task", "other"),
        "Program": OTHER_STYLE,
        "Animation": EventStyle("Animation", "rendering"),
        "EventDispatch": EventStyle("Event", "scripting"),
        "RequestMainThreadFrame": EventStyle("Request Main Thread Frame", "rendering"),
        "BeginFrame": EventStyle("Frame Start", "rendering"),
        "BeginMainThreadFrame": EventStyle("Frame Start (main thread)", "rendering"),
        "DrawFrame": EventStyle("Draw Frame", "rendering"),
        "HitTest": EventStyle("Hit Test", "rendering"),
        "ScheduleStyleRecalculation": EventStyle(
            "Schedule Style Recalculation", "rendering"
        ),
        "RecalculateStyles": EventStyle("Recalculate Style", "rendering"),
        "UpdateLayoutTree": EventStyle("Recalculate Style", "rendering"),
        "InvalidateLayout": EventStyle("Invalidate Layout", "rendering"),
        "Layout": EventStyle("Layout", "rendering"),
        "PaintSetup": EventStyle("Paint Setup", "painting"),
        "PaintImage": EventStyle("Paint Image", "painting"),
        "UpdateLayer": EventStyle("Update Layer", "painting"),
        "UpdateLayerTree": EventStyle("Update Layer Tree", "rendering"),
        "Paint": EventStyle("Paint", "painting"),
        "RasterTask": EventStyle("Rasterize Paint", "painting"),
        "ScrollLayer": EventStyle("Scroll", "rendering"),
        "CompositeLayers": EventStyle("Composite Layers", "painting"),
        "ParseHTML": EventStyle("Parse HTML", "loading"),
        "ParseAuthorStyleSheet": EventStyle("Parse Stylesheet", "loading"),
        "TimerInstall": EventStyle("Install Timer", "scripting"),
        "TimerRemove": EventStyle("Remove Timer", "scripting"),
        "TimerFire": EventStyle("Timer Fired", "scripting"),
        "XHRReadyStateChange": EventStyle("XHR Ready State Change", "scripting"),
        "XHRLoad": EventStyle("XHR Load", "scripting"),
        "v8.compile": EventStyle("Compile Script", "scripting"),
        "CompileScript": EventStyle("Compile Script", "scripting"),
        "EvaluateScript": EventStyle("Evaluate Script", "scripting"),
        "v8.parseOnBackground": EventStyle("Parse Script", "scripting"),
        "ParseScriptOnBackground": EventStyle("Parse Script", "scripting"),
        "MarkLoad": EventStyle("Load event", "scripting"),
        "MarkDOMContent": EventStyle("DOMContentLoaded event", "scripting"),
        "MarkFirstPaint": EventStyle("First paint", "painting"),
        "firstMeaningfulPaint": EventStyle("FMP", "painting"),
        "firstMeaningfulPaintCandidate": EventStyle("FMP candidate", "painting"),
        "TimeStamp": EventStyle("Timestamp", "scripting"),
        "ConsoleTime": EventStyle("Console Time", "scripting"),
        "UserTiming": EventStyle("User Timing", "scripting"),
        "ResourceSendRequest": EventStyle("Send Request", "loading"),
        "ResourceReceiveResponse": EventStyle("Receive Response", "loading"),
        "ResourceFinish": EventStyle("Finish Loading", "loading"),
        "ResourceReceivedData": EventStyle("Receive Data", "loading"),
        "RunMicrotasks": EventStyle("Run Microtasks", "scripting"),
        "FunctionCall": EventStyle("Function Call", "scripting"),
        "GCEvent": EventStyle("GC Event", "scripting"),
        "MajorGC": EventStyle("Major GC", "scripting"),
        "MinorGC": EventStyle("Minor GC", "scripting"),
        "BlinkGCMarking": EventStyle("DOM GC", "scripting"),
        "JSFrame": EventStyle("JS Frame", "scripting"),
        "RequestAnimationFrame": EventStyle("Request Animation Frame", "scripting"),
        "CancelAnimationFrame": EventStyle("Cancel Animation Frame", "scripting"),
        "FireAnimationFrame": EventStyle("Animation Frame Fired", "scripting"),
        "RequestIdleCallback": EventStyle("Request Idle Callback", "scripting"),
        "CancelIdleCallback": EventStyle("Cancel Idle Callback", "scripting"),
        "FireIdleCallback": EventStyle("Fire Idle Callback", "scripting"),
        "WebSocketCreate": EventStyle("Create WebSocket", "scripting"),
        "WebSocketSendHandshakeRequest": EventStyle(
            "Send WebSocket Handshake", "scripting"
        ),
        "WebSocketReceiveHandshakeResponse": EventStyle(
            "Receive WebSocket Handshake", "scripting"
        ),
        "WebSocketDestroy": EventStyle("Destroy WebSocket", "scripting"),
        "EmbedderCallback": EventStyle("Embedder Callback", "scripting"),
        "Decode Image": EventStyle("Image Decode", "painting"),
        "Resize Image": EventStyle("Image Resize", "painting"),
        "GPUTask": EventStyle("GPU", "gpu"),
        "LatencyInfo": EventStyle("Input Latency", "scripting"),
        "AsyncTask": EventStyle("Async Task", "other"),
    }
)


def event_style(event: Optional[Mapping[str, Any]]) -> EventStyle:
    """Return the display style of a raw trace event.

    Unknown event names keep their raw name as title. A missing event (or
    one without a name) is styled as ``Other``.
    """
    if not event:
        return OTHER_STYLE
    name = event.get("name")
    if not isinstance(name, str) or not name:
        return OTHER_STYLE
    return EVENT_STYLES.get(name) or EventStyle(name, "other")
