"""Utilities for building CLI artifact output paths.

Paths are built from an optional output directory, a prefix derived from the
trace file name, and a per-artifact suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

#: Suffix of the JSON audit result written next to a trace.
RESULTS_SUFFIX = ".bootup.json"


def trace_prefix_from_path(trace_path: Path) -> str:
    """Return the trace filename with all extensions removed.

    Examples:
        ``runs/page.trace.json`` -> ``page``.
    """
    name = trace_path.name
    return name.split(".", 1)[0] if "." in name else name


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def build_artifact_path(output_dir: Optional[Path], prefix: str, suffix: str) -> Path:
    """Compose an artifact path as output_dir / (prefix + suffix).

    If ``output_dir`` is None, the path is relative to the current working
    directory.
    """
    base = output_dir if output_dir is not None else Path.cwd()
    return base / f"{prefix}{suffix}"


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an override path with respect to an optional output directory.

    Absolute override paths are returned as-is. Relative ones are taken
    relative to ``output_dir`` when provided, otherwise left relative to the
    current working directory.
    """
    if override is None:
        return None
    if override.is_absolute() or output_dir is None:
        return override
    return output_dir / override


def results_path_for_run(
    trace_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Path:
    """Return the path the audit result JSON should be written to."""
    resolved = resolve_override_path(results_override, output_dir)
    if resolved is not None:
        return resolved
    return build_artifact_path(
        output_dir, trace_prefix_from_path(trace_path), RESULTS_SUFFIX
    )
