"""General utility helpers shared across modules."""

from __future__ import annotations

_PERIODS = (
    (7 * 24 * 3600, "week", "weeks"),
    (24 * 3600, "day", "days"),
    (3600, "hour", "hours"),
    (60, "minute", "minutes"),
    (1, "second", "seconds"),
)


def format_duration(seconds: int) -> str:
    """Format a period as ``"1 hour, 2 minutes, 5 seconds"``.

    Only non-zero components are listed. The sign is ignored so a period
    before and after a reference point read the same.
    """

    remaining = abs(int(seconds))
    if remaining == 0:
        return "0 seconds"

    parts = []
    for unit_seconds, singular, plural in _PERIODS:
        count, remaining = divmod(remaining, unit_seconds)
        if count:
            parts.append(f"{count} {singular if count == 1 else plural}")
    return ", ".join(parts)


__all__ = ["format_duration"]
