"""Suggest photo locations from a recorded location history."""

from .coordinates import Coordinates, distance_in_km
from .history import Fix, HistoryStore, LocationHistory
from .suggestion import (
    ExistingLocation,
    PhotoLocation,
    SuggestedLocation,
    SuggestionAccuracy,
    get_location_suggestion,
)

__all__ = [
    "Coordinates",
    "ExistingLocation",
    "Fix",
    "HistoryStore",
    "LocationHistory",
    "PhotoLocation",
    "SuggestedLocation",
    "SuggestionAccuracy",
    "distance_in_km",
    "get_location_suggestion",
]
