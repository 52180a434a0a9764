"""Number rounding and millisecond formatting helpers.

Rounding goes through ``Decimal`` so that values such as ``0.05`` round the
way a reader expects (half away from zero) instead of following binary
floating-point artifacts.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

#: Separator between a formatted number and its unit (U+00A0 NO-BREAK SPACE).
NBSP = "\xa0"


def round_half_up(value: float, places: int = 1) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Examples:
        1500.45 -> 1500.5; 0.04 -> 0.0; 2.25 (places=1) -> 2.3.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_milliseconds(ms: float, granularity: float = 10.0) -> str:
    """Return ``ms`` rounded to ``granularity`` as a display string.

    Uses thousands separators and a no-break space before the unit. Decimal
    places follow the granularity: whole milliseconds for ``granularity >= 1``.

    Examples:
        1500.4 (granularity=1) -> "1,500 ms"; 1704.5 -> "1,700 ms";
        12.34 (granularity=0.1) -> "12.3 ms".

    Raises:
        ValueError: If ``granularity`` is not a positive finite number.
    """
    if not math.isfinite(granularity) or granularity <= 0:
        raise ValueError(f"granularity must be positive and finite: {granularity!r}")

    step = Decimal(repr(float(granularity)))
    steps = (Decimal(repr(float(ms))) / step).quantize(
        Decimal(1), rounding=ROUND_HALF_UP
    )
    coarse = steps * step
    places = max(0, -step.normalize().as_tuple().exponent)
    text = f"{coarse:,.{places}f}"
    if text.startswith("-") and coarse == 0:
        text = text[1:]
    return f"{text}{NBSP}ms"
