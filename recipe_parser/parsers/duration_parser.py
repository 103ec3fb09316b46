"""
ISO 8601 duration parsing.

Converts schema.org duration strings ("PT15M", "PT1H30M", "P1DT2H30M") into
whole minutes and reconciles prep / cook / total times.
"""

import math
import re
from typing import Any, Dict, Optional


# P[n]DT[n]H[n]M[n]S - every component optional, years/months are not used by recipes
DURATION_PATTERN = re.compile(
    r'P(?:(?P<days>\d+)D)?T?(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?',
    re.IGNORECASE
)


def parse_duration(duration: Any) -> Optional[int]:
    """
    Parse an ISO 8601 duration string into minutes.

    Examples:
        PT15M => 15
        PT1H30M => 90
        P1DT2H30M => 1590
        PT45S => 1 (seconds round up)

    Args:
        duration: Duration string such as "PT1H30M"

    Returns:
        Number of minutes, or None if nothing was recognized or the total is zero
    """
    if not duration or not isinstance(duration, str):
        return None

    match = DURATION_PATTERN.search(duration.strip())
    if not match:
        return None

    days, hours, minutes, seconds = (
        int(match.group(name) or 0) for name in ('days', 'hours', 'minutes', 'seconds')
    )
    total_minutes = days * 24 * 60 + hours * 60 + minutes + math.ceil(seconds / 60)

    return total_minutes if total_minutes > 0 else None


def reconcile_times(
    prep_time: Optional[str] = None,
    cook_time: Optional[str] = None,
    total_time: Optional[str] = None
) -> Dict[str, Optional[int]]:
    """
    Normalize prep, cook and total durations into prep/cook minutes.

    When the total and exactly one of prep/cook are known, the missing one is
    total minus the known one. The difference is not clamped, so a sub-time
    larger than the total yields a negative value.

    Returns:
        Dict with 'prep_minutes' and 'cook_minutes' (either may be None)
    """
    prep_minutes = parse_duration(prep_time)
    cook_minutes = parse_duration(cook_time)
    total_minutes = parse_duration(total_time)

    if total_minutes is not None:
        if prep_minutes is not None and cook_minutes is None:
            cook_minutes = total_minutes - prep_minutes
        elif cook_minutes is not None and prep_minutes is None:
            prep_minutes = total_minutes - cook_minutes

    return {
        'prep_minutes': prep_minutes,
        'cook_minutes': cook_minutes
    }
