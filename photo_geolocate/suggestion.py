"""Turn a photo timestamp into a location suggestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from . import config
from .coordinates import Coordinates
from .history.index import LocationHistory
from .utils import format_duration


@dataclass(frozen=True, slots=True)
class SuggestionAccuracy:
    """How far a suggestion may be off, in space and in time.

    Attributes:
        space: Accuracy radius in metres of the fix used.
        time: Seconds between the fix used and the photo (fix minus photo).
    """

    space: int
    time: int

    def __str__(self) -> str:
        return f"{self.space} metres, {format_duration(self.time)}"


@dataclass(frozen=True, slots=True)
class ExistingLocation:
    """The photo already carries GPS coordinates."""

    coordinates: Coordinates


@dataclass(frozen=True, slots=True)
class SuggestedLocation:
    """A location derived from the history for a photo without one."""

    coordinates: Coordinates
    accuracy: SuggestionAccuracy


PhotoLocation = Union[ExistingLocation, SuggestedLocation]


def get_location_suggestion(
    photo_timestamp: int,
    history: LocationHistory,
    *,
    existing: Coordinates | None = None,
    interpolate: bool | None = None,
) -> Optional[PhotoLocation]:
    """Suggest a location for a photo taken at ``photo_timestamp`` (seconds).

    Args:
        photo_timestamp: Capture time from the photo metadata, epoch seconds.
        history: Location history snapshot to consult.
        existing: Coordinates already present on the photo, if any. When set
            the history is not consulted.
        interpolate: Interpolate between bracketing fixes instead of picking
            the nearest one. Defaults to ``config.INTERPOLATE_SUGGESTIONS``.

    Returns:
        ``ExistingLocation``, ``SuggestedLocation`` or ``None`` when the history
        has nothing to offer for that time.
    """

    if existing is not None:
        return ExistingLocation(existing)

    if interpolate is None:
        interpolate = config.INTERPOLATE_SUGGESTIONS

    if interpolate:
        fix = history.interpolate_location(photo_timestamp)
    else:
        fix = history.get_most_likely_location(photo_timestamp)
    if fix is None:
        return None

    accuracy = SuggestionAccuracy(
        space=fix.accuracy,
        time=fix.timestamp - photo_timestamp,
    )
    return SuggestedLocation(fix.coordinates, accuracy)


__all__ = [
    "ExistingLocation",
    "PhotoLocation",
    "SuggestedLocation",
    "SuggestionAccuracy",
    "get_location_suggestion",
]
