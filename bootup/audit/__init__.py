"""Boot-up time aggregation pipeline.

Stages, in order:

- ``get_execution_timings_by_url``: trace -> ``{url: {task title: ms}}``.
- ``aggregate_categories``: task timings -> per-URL category totals, grand
  total and table headings.
- ``build_audit_result``: aggregation -> table rows, score, display value.

``BootupTimeAudit`` wires the stages together for one artifacts bundle.
"""

from bootup.audit.aggregate import CategoryAggregation, aggregate_categories
from bootup.audit.bootup_time import BootupTimeAudit
from bootup.audit.extract import IGNORED_URLS, get_execution_timings_by_url
from bootup.audit.report import build_audit_result, build_rows

__all__ = [
    "BootupTimeAudit",
    "CategoryAggregation",
    "IGNORED_URLS",
    "aggregate_categories",
    "build_audit_result",
    "build_rows",
    "get_execution_timings_by_url",
]
