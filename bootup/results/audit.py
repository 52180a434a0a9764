"""Result container of the boot-up time audit.

``AuditResult.to_dict()`` returns JSON-safe primitives in the shape report
renderers consume: camelCase keys, a ``details`` table and the raw per-URL
task timings under ``extendedInfo``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from bootup.config import AuditMeta
from bootup.logging import get_logger
from bootup.types.base import CategoryTotals, UrlTimingMap
from bootup.types.dto import HeadingSet, ReportRow

logger = get_logger(__name__)


@dataclass
class AuditResult:
    """Outcome of one audit run.

    Args:
        score: True when total boot-up time is under the threshold.
        raw_value: Total boot-up time in milliseconds.
        display_value: ``raw_value`` formatted for display.
        headings: Table columns, ``url`` first.
        rows: One row per URL, in URL order.
        extended_info: Raw per-URL task timings, for diagnostics.
        category_totals: Unformatted per-URL category totals behind ``rows``.
        meta: Audit metadata echoed into the serialized result.
    """

    score: bool
    raw_value: float
    display_value: str
    headings: HeadingSet = field(default_factory=HeadingSet)
    rows: List[ReportRow] = field(default_factory=list)
    extended_info: UrlTimingMap = field(default_factory=dict)
    category_totals: Dict[str, CategoryTotals] = field(default_factory=dict)
    meta: AuditMeta = field(default_factory=AuditMeta)

    def __post_init__(self) -> None:
        """Validate basic invariants.

        Raises:
            TypeError: If ``score`` is not a bool or ``raw_value`` not numeric.
            ValueError: If ``raw_value`` is negative or not finite.
        """
        if not isinstance(self.score, bool):
            logger.error("AuditResult.score must be a bool: %r", self.score)
            raise TypeError("AuditResult.score must be a bool")
        if isinstance(self.raw_value, bool) or not isinstance(
            self.raw_value, (int, float)
        ):
            logger.error("AuditResult.raw_value must be numeric: %r", self.raw_value)
            raise TypeError("AuditResult.raw_value must be numeric")
        if not math.isfinite(float(self.raw_value)):
            logger.error("AuditResult.raw_value must be finite: %r", self.raw_value)
            raise ValueError("AuditResult.raw_value must be finite")
        if float(self.raw_value) < 0.0:
            logger.error("AuditResult.raw_value must be non-negative: %r", self.raw_value)
            raise ValueError("AuditResult.raw_value must be non-negative")

    @property
    def description(self) -> str:
        """Audit description matching the score."""
        return self.meta.description if self.score else self.meta.failure_description

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "name": self.meta.name,
            "description": self.description,
            "helpText": self.meta.help_text,
            "score": self.score,
            "rawValue": self.raw_value,
            "displayValue": self.display_value,
            "details": {
                "type": "table",
                "headings": self.headings.to_list(),
                "items": [row.to_dict() for row in self.rows],
            },
            "extendedInfo": {
                "value": {url: dict(tasks) for url, tasks in self.extended_info.items()}
            },
        }
