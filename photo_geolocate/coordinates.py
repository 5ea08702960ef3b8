"""Latitude/longitude value type and great-circle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import config

_EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True, slots=True)
class Coordinates:
    """A point on Earth in decimal degrees.

    Signs follow ISO 6709: positive latitude is at or north of the equator,
    positive longitude is at or east of the prime meridian. Values are not
    range checked.
    """

    latitude: float
    longitude: float

    def distance_in_km(self, other: Coordinates) -> float:
        """Return the haversine great-circle distance to ``other``."""

        return distance_in_km(self, other)

    def map_url(self, template: str | None = None) -> str:
        """Return a link to this point on an external map service."""

        url_template = template if template is not None else config.MAP_URL_TEMPLATE
        return url_template.format(latitude=self.latitude, longitude=self.longitude)

    @property
    def latitude_ref(self) -> str:
        """EXIF hemisphere reference for the latitude (``N`` or ``S``)."""

        return "N" if self.latitude >= 0.0 else "S"

    @property
    def longitude_ref(self) -> str:
        """EXIF hemisphere reference for the longitude (``E`` or ``W``)."""

        return "E" if self.longitude >= 0.0 else "W"

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


def distance_in_km(first: Coordinates, second: Coordinates) -> float:
    """Great-circle distance in kilometres between two points.

    Uses the haversine formula with a mean Earth radius of 6371 km.
    """

    lat1_rad = math.radians(first.latitude)
    lat2_rad = math.radians(second.latitude)
    delta_lat = abs(lat1_rad - lat2_rad)
    delta_lon = abs(math.radians(first.longitude) - math.radians(second.longitude))

    h = _haversine(delta_lat) + math.cos(lat1_rad) * math.cos(lat2_rad) * _haversine(
        delta_lon
    )
    return 2.0 * _EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def _haversine(angle_rad: float) -> float:
    return (1.0 - math.cos(angle_rad)) / 2.0


__all__ = ["Coordinates", "distance_in_km"]
