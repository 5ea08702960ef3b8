"""Integer interpolation of fixes and their accuracy radii.

All arithmetic stays in integers so results are reproducible: products are
formed before dividing and quotients truncate toward zero.
"""

from __future__ import annotations

from .models import Fix

_MAX_ACCURACY_M = 0xFFFF


def div_trunc(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (``//`` floors instead)."""

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def interpolate_accuracy(timestamp_ms: int, before: Fix, after: Fix) -> int:
    """Estimate the accuracy radius (metres) of a point between two fixes.

    Scales linearly from the nearer fix's accuracy towards half the distance
    between the fixes, which is reached at the temporal midpoint. When that
    half distance is below both fix accuracies it is ignored and the two
    accuracies are blended instead.

    The distance is truncated to whole kilometres before conversion to metres.
    The result is clamped to the unsigned 16-bit range.
    """

    time_offset = timestamp_ms - before.timestamp_ms
    time_span = after.timestamp_ms - before.timestamp_ms

    distance_km = before.coordinates.distance_in_km(after.coordinates)
    half_distance = int(distance_km) * 1000 // 2
    before_accuracy = before.accuracy
    after_accuracy = after.accuracy

    if half_distance < before_accuracy and half_distance < after_accuracy:
        accuracy = before_accuracy + div_trunc(
            (after_accuracy - before_accuracy) * time_offset, time_span
        )
    elif time_offset <= time_span // 2:
        accuracy = before_accuracy + div_trunc(
            (half_distance - before_accuracy) * time_offset * 2, time_span
        )
    else:
        accuracy = half_distance + div_trunc(
            (after_accuracy - half_distance) * (time_offset * 2 - time_span),
            time_span,
        )

    return min(max(accuracy, 0), _MAX_ACCURACY_M)


def interpolate_fix(timestamp_ms: int, before: Fix, after: Fix) -> Fix:
    """Linearly interpolate a fix at ``timestamp_ms`` between two fixes.

    Interpolation is linear in E7 degrees and ignores the Earth's curvature,
    which is inaccurate over large gaps. Such gaps rarely belong to the same
    journey anyway.
    """

    time_span = after.timestamp_ms - before.timestamp_ms
    time_offset = timestamp_ms - before.timestamp_ms

    latitude_e7 = before.latitude_e7 + div_trunc(
        (after.latitude_e7 - before.latitude_e7) * time_offset, time_span
    )
    longitude_e7 = before.longitude_e7 + div_trunc(
        (after.longitude_e7 - before.longitude_e7) * time_offset, time_span
    )

    return Fix(
        timestamp_ms=timestamp_ms,
        latitude_e7=latitude_e7,
        longitude_e7=longitude_e7,
        accuracy=interpolate_accuracy(timestamp_ms, before, after),
    )


__all__ = ["div_trunc", "interpolate_accuracy", "interpolate_fix"]
