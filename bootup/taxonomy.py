"""Task-type to work-category taxonomy.

DevTools labels every main-thread task with a display title ("Evaluate
Script", "Minor GC", "Layout", ...). The audit reports time per coarse work
category instead, so each title maps onto exactly one :class:`Category`.

The default table covers the titles produced by
:func:`bootup.trace.styles.event_style`. Titles outside the table are folded
into :attr:`Category.OTHER`, or rejected with
:class:`TaxonomyError` when lookups run in strict mode.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from bootup.logging import get_logger

logger = get_logger(__name__)


class Category(str, Enum):
    """Coarse work category used as a report column."""

    LOADING = "loading"
    PARSE_HTML = "parseHTML"
    STYLE_LAYOUT = "styleLayout"
    COMPOSITING = "compositing"
    PAINTING = "painting"
    GPU = "gpu"
    SCRIPTING = "scripting"
    SCRIPT_PARSE_COMPILE = "scriptParseCompile"
    SCRIPT_GC = "scriptGC"
    OTHER = "other"
    IMAGES = "images"

    @property
    def label(self) -> str:
        """Human-readable column title."""
        return _CATEGORY_LABELS[self]

    @classmethod
    def from_string(cls, value: str) -> "Category":
        """Parse a category key (``"scripting"``) or member name (``"SCRIPTING"``).

        Raises:
            ValueError: If the string names no category.
        """
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(
                f"Invalid category '{value}'. Valid values are: {valid}"
            ) from None


_CATEGORY_LABELS: Dict[Category, str] = {
    Category.LOADING: "Network request loading",
    Category.PARSE_HTML: "Parsing DOM",
    Category.STYLE_LAYOUT: "Style & Layout",
    Category.COMPOSITING: "Compositing",
    Category.PAINTING: "Paint",
    Category.GPU: "GPU",
    Category.SCRIPTING: "Script Evaluation",
    Category.SCRIPT_PARSE_COMPILE: "Script Parsing & Compile",
    Category.SCRIPT_GC: "Garbage collection",
    Category.OTHER: "Other",
    Category.IMAGES: "Images",
}

DEFAULT_TASK_CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        "Animation": Category.PAINTING,
        "Async Task": Category.OTHER,
        "Frame Start": Category.PAINTING,
        "Frame Start (main thread)": Category.PAINTING,
        "Cancel Animation Frame": Category.SCRIPTING,
        "Cancel Idle Callback": Category.SCRIPTING,
        "Compile Script": Category.SCRIPT_PARSE_COMPILE,
        "Composite Layers": Category.COMPOSITING,
        "Console Time": Category.SCRIPTING,
        "Image Decode": Category.IMAGES,
        "Draw Frame": Category.PAINTING,
        "Embedder Callback": Category.SCRIPTING,
        "Evaluate Script": Category.SCRIPTING,
        "Event": Category.SCRIPTING,
        "Animation Frame Fired": Category.SCRIPTING,
        "Fire Idle Callback": Category.SCRIPTING,
        "Function Call": Category.SCRIPTING,
        "DOM GC": Category.SCRIPT_GC,
        "GC Event": Category.SCRIPT_GC,
        "GPU": Category.GPU,
        "Hit Test": Category.COMPOSITING,
        "Invalidate Layout": Category.STYLE_LAYOUT,
        "JS Frame": Category.SCRIPTING,
        "Input Latency": Category.SCRIPTING,
        "Layout": Category.STYLE_LAYOUT,
        "Major GC": Category.SCRIPT_GC,
        "DOMContentLoaded event": Category.SCRIPTING,
        "First paint": Category.PAINTING,
        "FMP": Category.PAINTING,
        "FMP candidate": Category.PAINTING,
        "Load event": Category.SCRIPTING,
        "Minor GC": Category.SCRIPT_GC,
        "Paint": Category.PAINTING,
        "Paint Image": Category.IMAGES,
        "Paint Setup": Category.PAINTING,
        "Parse Stylesheet": Category.PARSE_HTML,
        "Parse HTML": Category.PARSE_HTML,
        "Parse Script": Category.SCRIPT_PARSE_COMPILE,
        "Other": Category.OTHER,
        "Rasterize Paint": Category.PAINTING,
        "Recalculate Style": Category.STYLE_LAYOUT,
        "Request Animation Frame": Category.SCRIPTING,
        "Request Idle Callback": Category.SCRIPTING,
        "Request Main Thread Frame": Category.PAINTING,
        "Image Resize": Category.IMAGES,
        "Finish Loading": Category.LOADING,
        "Receive Data": Category.LOADING,
        "Receive Response": Category.LOADING,
        "Send Request": Category.LOADING,
        "Run Microtasks": Category.SCRIPTING,
        "Schedule Style Recalculation": Category.STYLE_LAYOUT,
        "Scroll": Category.COMPOSITING,
        "Task": Category.OTHER,
        "Timer Fired": Category.SCRIPTING,
        "Install Timer": Category.SCRIPTING,
        "Remove Timer": Category.SCRIPTING,
        "Timestamp": Category.SCRIPTING,
        "Update Layer": Category.COMPOSITING,
        "Update Layer Tree": Category.COMPOSITING,
        "User Timing": Category.SCRIPTING,
        "Create WebSocket": Category.SCRIPTING,
        "Destroy WebSocket": Category.SCRIPTING,
        "Receive WebSocket Handshake": Category.SCRIPTING,
        "Send WebSocket Handshake": Category.SCRIPTING,
        "XHR Load": Category.SCRIPTING,
        "XHR Ready State Change": Category.SCRIPTING,
    }
)


class TaxonomyError(KeyError, ValueError):
    """Raised in strict mode when a task label has no category."""

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"Task label '{self.label}' is not mapped to any category"


class TaskTaxonomy(Mapping[str, Category]):
    """Immutable task-label to category mapping.

    Args:
        mapping: Task label to category. Values may be :class:`Category`
            members or category keys such as ``"scripting"``.
    """

    def __init__(self, mapping: Mapping[str, Category | str]) -> None:
        table: Dict[str, Category] = {}
        for label, category in mapping.items():
            if not isinstance(label, str) or not label:
                logger.error("Task label must be a non-empty string: %r", label)
                raise TypeError("Task label must be a non-empty string")
            table[label] = (
                category
                if isinstance(category, Category)
                else Category.from_string(category)
            )
        self._table: Mapping[str, Category] = MappingProxyType(table)

    def __getitem__(self, label: str) -> Category:
        return self._table[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"TaskTaxonomy({len(self._table)} labels)"

    def category_for(self, label: str, strict: bool = False) -> Category:
        """Return the category for a task label.

        Args:
            label: Task display title.
            strict: Raise instead of falling back to ``Category.OTHER``.

        Raises:
            TaxonomyError: In strict mode, when ``label`` is unmapped.
        """
        category = self._table.get(label)
        if category is not None:
            return category
        if strict:
            logger.error("Unmapped task label in strict mode: %r", label)
            raise TaxonomyError(label)
        return Category.OTHER

    def extended(self, mapping: Mapping[str, Category | str]) -> "TaskTaxonomy":
        """Return a new taxonomy with ``mapping`` layered over this one."""
        merged: Dict[str, Category | str] = dict(self._table)
        merged.update(mapping)
        return TaskTaxonomy(merged)


DEFAULT_TAXONOMY = TaskTaxonomy(DEFAULT_TASK_CATEGORIES)
