"""The boot-up time audit.

Reads the default-pass trace from the artifacts, extracts per-URL task
timings through the injected grouping engine and classifier, regroups them
by work category and scores the total against the configured threshold.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bootup.audit.aggregate import aggregate_categories
from bootup.audit.extract import get_execution_timings_by_url
from bootup.audit.report import build_audit_result
from bootup.config import DEFAULT_CONFIG, AuditMeta, BootupConfig
from bootup.logging import get_logger
from bootup.results.audit import AuditResult
from bootup.taxonomy import DEFAULT_TAXONOMY, TaskTaxonomy
from bootup.trace.styles import event_style
from bootup.trace.tree import bottom_up_group_by_url
from bootup.types.base import EventClassifier, GroupingEngine, UrlTimingMap

logger = get_logger(__name__)


class BootupTimeAudit:
    """Computes JavaScript boot-up time from a page trace.

    Instances hold no per-run state, so one audit can serve any number of
    runs, including concurrent ones.
    """

    def __init__(
        self,
        config: BootupConfig = DEFAULT_CONFIG,
        taxonomy: TaskTaxonomy = DEFAULT_TAXONOMY,
        group_by_url: GroupingEngine = bottom_up_group_by_url,
        classify: EventClassifier = event_style,
    ) -> None:
        """Initialize the audit.

        Args:
            config: Threshold, trace pass and formatting settings.
            taxonomy: Task title to category mapping.
            group_by_url: Grouping engine turning a trace into a URL -> task tree.
            classify: Classifier giving each grouped event its task title.
        """
        self.config = config
        self.taxonomy = taxonomy
        self.group_by_url = group_by_url
        self.classify = classify

    @property
    def meta(self) -> AuditMeta:
        return self.config.meta

    def get_execution_timings_by_url(self, trace: Any) -> UrlTimingMap:
        """Return ``{url: {task title: ms}}`` for one trace."""
        return get_execution_timings_by_url(trace, self.group_by_url, self.classify)

    def audit(self, artifacts: Mapping[str, Any]) -> AuditResult:
        """Run the audit on a set of gathered artifacts.

        Args:
            artifacts: Mapping with a ``"traces"`` mapping keyed by pass name.
                A missing default-pass trace is audited as an empty trace.

        Raises:
            ValueError: If ``artifacts`` lacks a ``"traces"`` mapping.
            TaxonomyError: In strict mode, for task titles with no category.
        """
        for required in self.meta.required_artifacts:
            if required not in artifacts:
                logger.error("Missing required artifact: %s", required)
                raise ValueError(f"Required artifact '{required}' is missing")
        traces = artifacts["traces"]
        if not isinstance(traces, Mapping):
            logger.error("Artifact 'traces' must be a mapping: %r", type(traces))
            raise ValueError("Artifact 'traces' must be a mapping of pass name to trace")

        trace: Optional[Any] = traces.get(self.config.default_pass)
        if trace is None:
            logger.warning(
                "No trace for pass '%s'; auditing an empty trace",
                self.config.default_pass,
            )

        timings = self.get_execution_timings_by_url(trace)
        aggregation = aggregate_categories(
            timings, self.taxonomy, strict=self.config.strict_taxonomy
        )
        return build_audit_result(timings, aggregation, self.config)
