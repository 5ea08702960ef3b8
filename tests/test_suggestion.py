"""Tests for photo location suggestions and their accuracy formatting."""

from __future__ import annotations

import pytest

from photo_geolocate import config
from photo_geolocate.coordinates import Coordinates
from photo_geolocate.history import LocationHistory
from photo_geolocate.suggestion import (
    ExistingLocation,
    SuggestedLocation,
    SuggestionAccuracy,
    get_location_suggestion,
)

PHOTO_TIMESTAMP = 1473158321


@pytest.mark.parametrize(
    "space, time, expected",
    [
        (18, 0, "18 metres, 0 seconds"),
        (18, 3600, "18 metres, 1 hour"),
        (18, 90, "18 metres, 1 minute, 30 seconds"),
        (
            18,
            20499642,
            "18 metres, 33 weeks, 6 days, 6 hours, 20 minutes, 42 seconds",
        ),
    ],
)
def test_suggestion_accuracy_str(space: int, time: int, expected: str) -> None:
    assert str(SuggestionAccuracy(space, time)) == expected


def test_existing_coordinates_short_circuit_the_history(fix_factory) -> None:
    existing = Coordinates(38.76544, -9.094802222222222)
    history = LocationHistory([fix_factory(PHOTO_TIMESTAMP * 1000)])

    location = get_location_suggestion(PHOTO_TIMESTAMP, history, existing=existing)

    assert location == ExistingLocation(existing)


def test_no_suggestion_from_an_empty_history(empty_history: LocationHistory) -> None:
    assert get_location_suggestion(PHOTO_TIMESTAMP, empty_history) is None
    assert (
        get_location_suggestion(PHOTO_TIMESTAMP, empty_history, interpolate=True)
        is None
    )


def test_no_suggestion_outside_the_recorded_range(fix_factory) -> None:
    history = LocationHistory([fix_factory(1_500_000_000_000)])

    assert get_location_suggestion(PHOTO_TIMESTAMP, history) is None


def test_nearest_suggestion_reports_time_offset(fix_factory) -> None:
    history = LocationHistory(
        [
            fix_factory(1_400_000_000_000),
            fix_factory(1493657963571, 520567467, 11485831, 18),
        ]
    )

    location = get_location_suggestion(PHOTO_TIMESTAMP, history, interpolate=False)

    assert location == SuggestedLocation(
        Coordinates(52.0567467, 1.1485831),
        SuggestionAccuracy(18, 20499642),
    )


def test_interpolated_suggestion_has_no_time_offset(ipswich_history: LocationHistory) -> None:
    location = get_location_suggestion(4, ipswich_history, interpolate=True)

    assert location == SuggestedLocation(
        Coordinates(52.0720311, 1.1805831),
        SuggestionAccuracy(1339, 0),
    )


def test_policy_defaults_to_configuration(
    monkeypatch: pytest.MonkeyPatch, ipswich_history: LocationHistory
) -> None:
    monkeypatch.setattr(config, "INTERPOLATE_SUGGESTIONS", False, raising=False)
    nearest = get_location_suggestion(4, ipswich_history)

    monkeypatch.setattr(config, "INTERPOLATE_SUGGESTIONS", True, raising=False)
    interpolated = get_location_suggestion(4, ipswich_history)

    assert isinstance(nearest, SuggestedLocation)
    assert nearest.coordinates == Coordinates(52.0796733, 1.1965831)
    assert nearest.accuracy == SuggestionAccuracy(18, -1)
    assert isinstance(interpolated, SuggestedLocation)
    assert interpolated.accuracy.space == 1339
