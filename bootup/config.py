"""Configuration for the boot-up time audit.

Holds the audit metadata and scoring constants as immutable dataclasses, and
loads optional taxonomy extensions from YAML. Nothing here reads global state:
callers build a :class:`BootupConfig` (or use :data:`DEFAULT_CONFIG`) and pass
it explicitly to the audit.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Tuple

import jsonschema
import yaml

from bootup.logging import get_logger
from bootup.taxonomy import DEFAULT_TAXONOMY, Category, TaskTaxonomy
from bootup.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuditMeta:
    """Descriptive metadata reported alongside the audit result."""

    category: str = "Performance"
    name: str = "bootup-time"
    description: str = "JavaScript boot-up time is high (> 4s)"
    failure_description: str = "JavaScript boot-up time is too high"
    help_text: str = (
        "Consider reducing the time spent parsing, compiling and executing JS. "
        "You may find delivering smaller JS payloads helps with this."
    )
    required_artifacts: Tuple[str, ...] = ("traces",)


@dataclass(frozen=True)
class BootupConfig:
    """Scoring and presentation settings for one audit run."""

    # Pass/fail cutoff; a run passes when total boot-up time is strictly below it
    threshold_ms: float = 4000.0

    # Trace pass read from the artifacts
    default_pass: str = "defaultPass"

    # Rounding applied to table cells and to the headline value
    row_granularity_ms: float = 1.0
    display_granularity_ms: float = 10.0

    # Fail on task labels missing from the taxonomy instead of counting them as 'other'
    strict_taxonomy: bool = False

    meta: AuditMeta = field(default_factory=AuditMeta)

    def __post_init__(self) -> None:
        for name in ("threshold_ms", "row_granularity_ms", "display_granularity_ms"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                logger.error("BootupConfig.%s must be a finite number: %r", name, value)
                raise ValueError(f"BootupConfig.{name} must be a finite number")
            if value <= 0:
                logger.error("BootupConfig.%s must be positive: %r", name, value)
                raise ValueError(f"BootupConfig.{name} must be positive")
        if not self.default_pass:
            logger.error("BootupConfig.default_pass must be a non-empty string")
            raise ValueError("BootupConfig.default_pass must be a non-empty string")

    def passes(self, total_ms: float) -> bool:
        """Return whether ``total_ms`` scores as a pass."""
        return total_ms < self.threshold_ms


#: Configuration used when none is supplied.
DEFAULT_CONFIG = BootupConfig()


def _load_taxonomy_schema() -> Dict[str, Any]:
    with (
        resources.files("bootup.schemas")
        .joinpath("taxonomy.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_taxonomy_yaml(yaml_str: str) -> Dict[str, Category]:
    """Parse and validate a taxonomy extension document.

    The document maps extra task labels onto category keys::

        task_categories:
          Compile Module: scriptParseCompile
          Streaming Compile: scriptParseCompile

    Returns:
        Task label to :class:`Category` for every entry in the document.

    Raises:
        ValueError: If the YAML does not map to a dictionary.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.error("Taxonomy YAML must map to a dictionary, got %s", type(data).__name__)
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    if isinstance(data.get("task_categories"), dict):
        data["task_categories"] = normalize_yaml_dict_keys(data["task_categories"])

    jsonschema.validate(data, _load_taxonomy_schema())

    return {
        label: Category.from_string(key)
        for label, key in data["task_categories"].items()
    }


def load_taxonomy_file(
    path: Path, base: TaskTaxonomy = DEFAULT_TAXONOMY
) -> TaskTaxonomy:
    """Load a taxonomy extension file and layer it over ``base``."""
    logger.info(f"Loading taxonomy extension from: {path}")
    extra = load_taxonomy_yaml(Path(path).read_text(encoding="utf-8"))
    logger.debug("Taxonomy extension adds or overrides %d labels", len(extra))
    return base.extended(extra)
