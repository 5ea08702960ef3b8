"""Dataclasses describing location-history fixes and lookup outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..coordinates import Coordinates

_E7 = 1e7


@dataclass(frozen=True, slots=True)
class Fix:
    """A single recorded location-history entry.

    Attributes:
        timestamp_ms: Unix epoch milliseconds.
        latitude_e7: Latitude in degrees multiplied by 1e7.
        longitude_e7: Longitude in degrees multiplied by 1e7.
        accuracy: Reported confidence radius in metres.
    """

    timestamp_ms: int
    latitude_e7: int
    longitude_e7: int
    accuracy: int

    @property
    def coordinates(self) -> Coordinates:
        """Latitude/longitude in decimal degrees."""

        return Coordinates(self.latitude_e7 / _E7, self.longitude_e7 / _E7)

    @property
    def timestamp(self) -> int:
        """Unix epoch seconds, sub-second precision discarded."""

        return self.timestamp_ms // 1000


@dataclass(frozen=True, slots=True)
class ExactMatch:
    """A fix was recorded at exactly the queried millisecond."""

    fix: Fix


@dataclass(frozen=True, slots=True)
class FirstMatch:
    """The query precedes all data; ``fix`` is the earliest fix."""

    fix: Fix


@dataclass(frozen=True, slots=True)
class LastMatch:
    """The query follows all data; ``fix`` is the latest fix."""

    fix: Fix


@dataclass(frozen=True, slots=True)
class BetweenMatch:
    """The two fixes immediately bracketing the query."""

    before: Fix
    after: Fix


LocationMatch = Union[ExactMatch, FirstMatch, LastMatch, BetweenMatch]


__all__ = [
    "BetweenMatch",
    "ExactMatch",
    "FirstMatch",
    "Fix",
    "LastMatch",
    "LocationMatch",
]
