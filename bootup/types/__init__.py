"""Shared typing constructs for the boot-up time audit.

This package defines the type aliases and protocols that describe the
collaborators of the aggregation pipeline (grouping engine, event classifier)
and the small table containers the report is built from.
"""

from bootup.types.base import (
    URL_HEADING_KEY,
    CategoryTotals,
    EventClassifier,
    EventStyleLike,
    GroupingEngine,
    GroupingNode,
    TaskDurations,
    UrlTimingMap,
)
from bootup.types.dto import Heading, HeadingSet, ReportRow

__all__ = [
    # Type aliases and constants
    "URL_HEADING_KEY",
    "TaskDurations",
    "UrlTimingMap",
    "CategoryTotals",
    # Collaborator protocols
    "GroupingNode",
    "GroupingEngine",
    "EventStyleLike",
    "EventClassifier",
    # DTOs
    "Heading",
    "HeadingSet",
    "ReportRow",
]
