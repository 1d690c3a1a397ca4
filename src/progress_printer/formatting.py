"""Text formatting helpers for progress lines."""
from typing import Any

DURATION_UNITS = (
    ('d', 86400),
    ('h', 3600),
    ('m', 60),
    ('s', 1),
)


def format_duration(seconds: float) -> str:
    """Format a number of seconds as a compact duration.

    Seconds are truncated to a whole number first. Zero components are
    omitted, so 90 becomes '1m30s' and 3600 becomes '1h'.

    Args:
        seconds: Number of seconds; negative values count as zero

    Returns:
        str: Duration such as '2h30m30s', or '0s' when everything is zero
    """
    # Clock steps backwards can produce negative input
    remaining = max(0, int(seconds))
    parts = []

    for suffix, size in DURATION_UNITS:
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{suffix}")

    return ''.join(parts) or '0s'


def left_pad(value: Any, width: int) -> str:
    """Pad a value with leading spaces up to width.

    Values already at least as wide are returned unchanged.
    """
    return str(value).rjust(width)


def format_percent(fraction: float) -> str:
    """Format a fraction in [0, 1] as a truncated whole percentage.

    Args:
        fraction: Completed fraction

    Returns:
        str: Percentage with a trailing '%', e.g. '40%'
    """
    return f"{int(fraction * 100)}%"
