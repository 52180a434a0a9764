"""Table and score construction for the audit result."""

from __future__ import annotations

from bootup.audit.aggregate import CategoryAggregation
from bootup.config import DEFAULT_CONFIG, BootupConfig
from bootup.logging import get_logger
from bootup.results.audit import AuditResult
from bootup.types.base import UrlTimingMap
from bootup.types.dto import ReportRow
from bootup.utils.formatting import format_milliseconds

logger = get_logger(__name__)


def build_rows(aggregation: CategoryAggregation, granularity_ms: float) -> list[ReportRow]:
    """Return one row per URL with a formatted cell per category heading.

    Categories a URL has no time in render as a formatted zero.
    """
    rows = []
    category_keys = aggregation.headings.category_keys()
    for url, groups in aggregation.per_url.items():
        cells = {
            key: format_milliseconds(groups.get(key, 0.0), granularity_ms)
            for key in category_keys
        }
        rows.append(ReportRow(url=url, cells=cells))
    return rows


def build_audit_result(
    timings: UrlTimingMap,
    aggregation: CategoryAggregation,
    config: BootupConfig = DEFAULT_CONFIG,
) -> AuditResult:
    """Assemble the table, score and display value for an aggregation.

    Args:
        timings: Per-URL task timings the aggregation was built from; kept as
            extended diagnostics.
        aggregation: Category totals, grand total and headings.
        config: Threshold and formatting settings.
    """
    total = aggregation.total_ms
    score = config.passes(total)
    logger.debug(
        "Boot-up time %.1f ms across %d URLs (threshold %.0f ms): %s",
        total,
        len(aggregation.per_url),
        config.threshold_ms,
        "pass" if score else "fail",
    )
    return AuditResult(
        score=score,
        raw_value=total,
        display_value=format_milliseconds(total, config.display_granularity_ms),
        headings=aggregation.headings,
        rows=build_rows(aggregation, config.row_granularity_ms),
        extended_info={url: dict(tasks) for url, tasks in timings.items()},
        category_totals={url: dict(g) for url, g in aggregation.per_url.items()},
        meta=config.meta,
    )
