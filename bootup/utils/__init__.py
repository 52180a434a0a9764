"""Utility helpers used across the audit.

This package contains small, self-contained utilities that do not depend on
project internals. Keep modules minimal and focused.
"""

from bootup.utils.formatting import format_milliseconds, round_half_up

__all__ = [
    "format_milliseconds",
    "round_half_up",
]
