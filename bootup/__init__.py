"""bootup: JavaScript boot-up time from browser performance traces.

Aggregates the CPU self time a page's scripts consume, per originating URL and
per work category (script evaluation, parsing, layout, painting, garbage
collection, ...), into a pass/fail score and a report table.

Primary API:
    BootupTimeAudit - Runs the audit on an artifacts bundle
    BootupConfig, AuditMeta - Scoring settings and metadata
    TaskTaxonomy, Category - Task title to work category mapping
    AuditResult - Audit outcome with ``to_dict()`` for report renderers

Example:
    from bootup import BootupTimeAudit

    result = BootupTimeAudit().audit({"traces": {"defaultPass": trace_events}})
    print(result.score, result.display_value)
"""

from __future__ import annotations

from bootup import cli, logging
from bootup._version import __version__
from bootup.audit import (
    BootupTimeAudit,
    CategoryAggregation,
    aggregate_categories,
    build_audit_result,
    get_execution_timings_by_url,
)
from bootup.config import DEFAULT_CONFIG, AuditMeta, BootupConfig, load_taxonomy_file
from bootup.results import AuditResult
from bootup.taxonomy import DEFAULT_TAXONOMY, Category, TaskTaxonomy, TaxonomyError
from bootup.trace import EventStyle, TraceNode, bottom_up_group_by_url, event_style
from bootup.types import Heading, HeadingSet, ReportRow

__all__ = [
    # Version
    "__version__",
    # Audit (primary API)
    "BootupTimeAudit",
    "AuditResult",
    # Pipeline stages
    "get_execution_timings_by_url",
    "aggregate_categories",
    "build_audit_result",
    "CategoryAggregation",
    # Configuration
    "BootupConfig",
    "AuditMeta",
    "DEFAULT_CONFIG",
    "load_taxonomy_file",
    # Taxonomy
    "Category",
    "TaskTaxonomy",
    "TaxonomyError",
    "DEFAULT_TAXONOMY",
    # Trace collaborators
    "TraceNode",
    "EventStyle",
    "bottom_up_group_by_url",
    "event_style",
    # Table types
    "Heading",
    "HeadingSet",
    "ReportRow",
    # Utilities
    "cli",
    "logging",
]
