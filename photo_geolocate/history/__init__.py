"""Location history index with nearest-fix and interpolated lookups."""

from .index import LocationHistory
from .interpolation import interpolate_accuracy, interpolate_fix
from .models import (
    BetweenMatch,
    ExactMatch,
    FirstMatch,
    Fix,
    LastMatch,
    LocationMatch,
)
from .store import HistoryStore

__all__ = [
    "BetweenMatch",
    "ExactMatch",
    "FirstMatch",
    "Fix",
    "HistoryStore",
    "LastMatch",
    "LocationHistory",
    "LocationMatch",
    "interpolate_accuracy",
    "interpolate_fix",
]
