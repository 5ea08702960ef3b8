"""Time-ordered location history with nearest and interpolated lookups."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .interpolation import interpolate_fix
from .models import (
    BetweenMatch,
    ExactMatch,
    FirstMatch,
    Fix,
    LastMatch,
    LocationMatch,
)

_LOG = logging.getLogger(__name__)


class LocationHistory:
    """Read-only index of fixes keyed by millisecond timestamp.

    Built once from decoded fixes; when several fixes share a timestamp the
    last one supplied wins. Keys live in a sorted ``int64`` array so the
    predecessor/successor lookups are binary searches. Instances are never
    mutated after construction and may be shared freely between threads.
    """

    __slots__ = ("_keys", "_fixes")

    def __init__(self, fixes: Iterable[Fix] = ()) -> None:
        supplied = 0
        by_timestamp: dict[int, Fix] = {}
        for fix in fixes:
            supplied += 1
            by_timestamp[fix.timestamp_ms] = fix

        ordered = sorted(by_timestamp.items())
        keys: NDArray[np.int64] = np.fromiter(
            (timestamp_ms for timestamp_ms, _ in ordered),
            dtype=np.int64,
            count=len(ordered),
        )
        keys.setflags(write=False)
        self._keys = keys
        self._fixes: Tuple[Fix, ...] = tuple(fix for _, fix in ordered)

        _LOG.debug(
            "Indexed %d fixes (%d duplicate timestamps collapsed)",
            len(self._fixes),
            supplied - len(self._fixes),
        )

    def __len__(self) -> int:
        return len(self._fixes)

    def __iter__(self) -> Iterator[Fix]:
        return iter(self._fixes)

    @property
    def fixes(self) -> Tuple[Fix, ...]:
        """All fixes in ascending timestamp order."""

        return self._fixes

    def contains(self, timestamp: int) -> bool:
        """Return True when ``timestamp`` (seconds) lies within the recorded range.

        Both ends of the range are inclusive. An empty history contains nothing.
        """

        if not self._fixes:
            return False
        timestamp_ms = timestamp * 1000
        return int(self._keys[0]) <= timestamp_ms <= int(self._keys[-1])

    def locate(self, timestamp: int) -> Optional[LocationMatch]:
        """Classify ``timestamp`` (seconds) against the recorded fixes.

        Returns ``None`` for an empty history, otherwise one of
        ``ExactMatch``, ``FirstMatch`` (query before all data), ``LastMatch``
        (query after all data) or ``BetweenMatch``.
        """

        count = len(self._fixes)
        if count == 0:
            return None

        timestamp_ms = timestamp * 1000
        # First index whose key is >= the query; the predecessor sits just before it.
        after_idx = int(np.searchsorted(self._keys, timestamp_ms, side="left"))
        if after_idx < count and int(self._keys[after_idx]) == timestamp_ms:
            return ExactMatch(self._fixes[after_idx])
        if after_idx == 0:
            return FirstMatch(self._fixes[0])
        if after_idx == count:
            return LastMatch(self._fixes[-1])
        return BetweenMatch(self._fixes[after_idx - 1], self._fixes[after_idx])

    def get_most_likely_location(self, timestamp: int) -> Optional[Fix]:
        """Return the recorded fix temporally closest to ``timestamp`` (seconds).

        Only exact or bracketed queries produce a result: a query before the
        first or after the last fix yields ``None``. A query exactly halfway
        between two fixes resolves to the earlier one.
        """

        match = self.locate(timestamp)
        if isinstance(match, ExactMatch):
            return match.fix
        if isinstance(match, BetweenMatch):
            timestamp_ms = timestamp * 1000
            since_before = timestamp_ms - match.before.timestamp_ms
            until_after = match.after.timestamp_ms - timestamp_ms
            if since_before > until_after:
                return match.after
            return match.before
        return None

    def interpolate_location(self, timestamp: int) -> Optional[Fix]:
        """Return a fix at ``timestamp`` (seconds), interpolating when needed.

        An exact match is returned unchanged. Between two fixes a new fix is
        synthesised at the query's millisecond timestamp. Queries outside the
        recorded range are never extrapolated and yield ``None``.
        """

        match = self.locate(timestamp)
        if isinstance(match, ExactMatch):
            return match.fix
        if isinstance(match, BetweenMatch):
            return interpolate_fix(timestamp * 1000, match.before, match.after)
        return None

    def __repr__(self) -> str:
        if not self._fixes:
            return "LocationHistory(empty)"
        return (
            f"LocationHistory(fixes={len(self._fixes)}, "
            f"first_ms={int(self._keys[0])}, last_ms={int(self._keys[-1])})"
        )


__all__ = ["LocationHistory"]
