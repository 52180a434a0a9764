"""Regrouping of task durations into work categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set

from bootup.logging import get_logger
from bootup.taxonomy import DEFAULT_TAXONOMY, TaskTaxonomy
from bootup.types.base import CategoryTotals, UrlTimingMap
from bootup.types.dto import Heading, HeadingSet

logger = get_logger(__name__)


@dataclass
class CategoryAggregation:
    """Per-URL category totals plus what was seen across all URLs.

    Attributes:
        per_url: URL -> category key -> milliseconds, in URL order. Only
            categories that received time are present.
        total_ms: Sum of every task duration of every URL.
        headings: ``url`` followed by category headings in first-seen order.
        unmapped_labels: Task titles the taxonomy did not know.
    """

    per_url: Dict[str, CategoryTotals] = field(default_factory=dict)
    total_ms: float = 0.0
    headings: HeadingSet = field(default_factory=HeadingSet)
    unmapped_labels: Set[str] = field(default_factory=set)


def aggregate_categories(
    timings: UrlTimingMap,
    taxonomy: TaskTaxonomy = DEFAULT_TAXONOMY,
    strict: bool = False,
) -> CategoryAggregation:
    """Sum task durations per category for every URL.

    URLs are visited in ``timings`` order and tasks in each URL's order; a
    category heading is appended the first time the category receives time.

    Args:
        timings: Output of the URL timing extractor.
        taxonomy: Task title to category mapping.
        strict: Raise on titles missing from ``taxonomy`` instead of
            counting them as ``other``.

    Raises:
        TaxonomyError: In strict mode, for the first unmapped title.
    """
    aggregation = CategoryAggregation()

    for url, durations in timings.items():
        groups: CategoryTotals = {}
        for task, duration in durations.items():
            aggregation.total_ms += duration

            if task not in taxonomy and task not in aggregation.unmapped_labels:
                aggregation.unmapped_labels.add(task)
                if not strict:
                    logger.warning(
                        "Task label %r is not in the taxonomy; counting it as 'other'",
                        task,
                    )
            category = taxonomy.category_for(task, strict=strict)

            groups[category.value] = groups.get(category.value, 0.0) + duration
            if aggregation.headings.add(
                Heading(key=category.value, item_type="text", text=category.label)
            ):
                logger.debug("Discovered category column '%s'", category.value)

        aggregation.per_url[url] = groups

    return aggregation
