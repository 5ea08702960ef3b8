"""Central configuration for photo location suggestions.

All values are constants imported by the rest of the package. Overrides are
read from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------
# Map link used when displaying a suggested location. ``{latitude}`` and
# ``{longitude}`` receive decimal degrees.
MAP_URL_TEMPLATE = os.getenv(
    "PHOTO_GEOLOCATE_MAP_URL_TEMPLATE",
    "https://www.google.co.uk/maps/place/{latitude}%2C{longitude}",
)


# ---------------------------------------------------------------------------
# Suggestion policy
# ---------------------------------------------------------------------------
# Interpolate between the two bracketing fixes instead of picking the
# temporally nearest one.
INTERPOLATE_SUGGESTIONS = _env_bool("PHOTO_GEOLOCATE_INTERPOLATE", False)


# ---------------------------------------------------------------------------
# Benchmark defaults
# ---------------------------------------------------------------------------
BENCHMARK_DEFAULT_FIXES = _env_int("PHOTO_GEOLOCATE_BENCHMARK_FIXES", 50_000)
BENCHMARK_DEFAULT_QUERIES = _env_int("PHOTO_GEOLOCATE_BENCHMARK_QUERIES", 2_000)
