"""Command-line interface for the boot-up time audit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Mapping, Optional

from bootup.audit.bootup_time import BootupTimeAudit
from bootup.config import BootupConfig, load_taxonomy_file
from bootup.logging import get_logger, set_global_log_level
from bootup.results.audit import AuditResult
from bootup.taxonomy import DEFAULT_TAXONOMY
from bootup.utils.output_paths import ensure_parent_dir, results_path_for_run

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this with an ASCII ellipsis

    Returns:
        Formatted table string, empty when there are no rows
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = []
    lines.append(format_row(clipped_headers))
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _load_artifacts(path: Path, default_pass: str) -> Dict[str, Any]:
    """Read a trace or artifacts JSON file into an artifacts mapping.

    Files holding ``{"traces": {...}}`` are used as-is. Anything else is taken
    as a raw trace and placed under ``default_pass``.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, Mapping) and isinstance(data.get("traces"), Mapping):
        return dict(data)
    return {"traces": {default_pass: data}}


def _print_result(result: AuditResult) -> None:
    headings = list(result.headings)
    headers = [h.text for h in headings]
    rows = []
    for row in result.rows:
        cells = row.to_dict()
        rows.append([cells.get(h.key, "") for h in headings])

    table = _format_table(headers, rows, max_col_width=80)
    if table:
        print(table)
    else:
        print("   (no script URLs in trace)")

    status = "✅ PASS" if result.score else "❌ FAIL"
    print(f"\n{status}: {result.description} - total {result.display_value}")


def _run_audit(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    taxonomy_path: Optional[Path] = None,
    strict: bool = False,
    output_dir: Optional[Path] = None,
) -> None:
    """Audit a trace file and export the result as JSON by default.

    Args:
        path: Trace or artifacts JSON file.
        results_override: Optional explicit result path. When ``None``,
            defaults to ``<trace stem>.bootup.json`` in the current directory,
            or under ``output_dir`` if provided.
        no_results: Whether to disable result file generation.
        stdout: Whether to also print the result JSON to stdout.
        taxonomy_path: Optional YAML file extending the task taxonomy.
        strict: Fail on task titles missing from the taxonomy.
        output_dir: Directory for generated artifacts.
    """
    logger.info(f"Loading trace from: {path}")
    _start_time = perf_counter()

    try:
        config = BootupConfig(strict_taxonomy=strict)
        taxonomy = (
            load_taxonomy_file(taxonomy_path)
            if taxonomy_path is not None
            else DEFAULT_TAXONOMY
        )
        artifacts = _load_artifacts(path, config.default_pass)

        logger.info("Starting boot-up time audit")
        result = BootupTimeAudit(config=config, taxonomy=taxonomy).audit(artifacts)
        logger.info("Audit completed successfully")

        _print_result(result)

        json_str = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if not no_results:
            effective_output = results_path_for_run(
                trace_path=path,
                output_dir=output_dir,
                results_override=results_override,
            )
            ensure_parent_dir(effective_output)
            logger.info(f"Writing results to: {effective_output}")
            effective_output.write_text(json_str, encoding="utf-8")
            print(f"✅ Results written to: {effective_output}")

        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(f"Audit run completed in {_format_duration(_elapsed)}")

    except FileNotFoundError as e:
        missing = e.filename or path
        logger.error(f"File not found: {missing}")
        print(f"❌ ERROR: File not found: {missing}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to run audit: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run audit: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``bootup`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="bootup",
        description="Measure JavaScript boot-up time from a browser trace.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors (results are still printed)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Audit a trace file")
    run_parser.add_argument(
        "trace",
        type=Path,
        help="Path to a trace JSON file or an artifacts JSON with 'traces'",
    )
    run_parser.add_argument(
        "--taxonomy",
        "-t",
        type=Path,
        default=None,
        help="YAML file mapping extra task titles to categories",
    )
    run_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a task title has no category instead of counting it as 'other'",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help=(
            "Export results to JSON file (default: <trace_name>.bootup.json;"
            " placed under --output when provided)"
        ),
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for generated artifacts",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_audit(
            path=args.trace,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            taxonomy_path=args.taxonomy,
            strict=args.strict,
            output_dir=args.output,
        )


if __name__ == "__main__":
    main()
