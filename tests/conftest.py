"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable fixes and histories shared
by the index, interpolation and suggestion tests.
"""
from __future__ import annotations

import os
import sys
from typing import Callable, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from photo_geolocate.history import Fix, LocationHistory

FixFactory = Callable[..., Fix]


# --- Factory helpers -------------------------------------------------
def make_fix(
    timestamp_ms: int,
    latitude_e7: int = 520796733,
    longitude_e7: int = 11965831,
    accuracy: int = 18,
) -> Fix:
    return Fix(
        timestamp_ms=timestamp_ms,
        latitude_e7=latitude_e7,
        longitude_e7=longitude_e7,
        accuracy=accuracy,
    )


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def fix_factory() -> FixFactory:
    return make_fix


@pytest.fixture
def history_factory() -> Callable[..., LocationHistory]:
    def _build(*timestamps_ms: int) -> LocationHistory:
        return LocationHistory(make_fix(ts) for ts in timestamps_ms)

    return _build


@pytest.fixture
def empty_history() -> LocationHistory:
    return LocationHistory()


@pytest.fixture
def ipswich_fixes() -> Tuple[Fix, Fix]:
    """Two fixes three seconds apart, roughly 4 km from each other."""

    before = make_fix(3000, 520796733, 11965831, 18)
    after = make_fix(6000, 520567467, 11485831, 20)
    return before, after


@pytest.fixture
def ipswich_history(ipswich_fixes: Tuple[Fix, Fix]) -> LocationHistory:
    return LocationHistory(ipswich_fixes)
