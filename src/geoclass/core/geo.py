"""
Geospatial points and spherical distance math.

We keep the whole geometry layer here: a named point stored in both degrees and
radians, great-circle distance on a sphere with Earth's mean radius, the signed
north-south / west-east component distances and an 8-point compass bearing.
No ellipsoid, no projections.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Mapping

from geoclass.core.angles import hemisphere_dms, parse_dms
from geoclass.core.errors import EmptyInputError, InvalidFormatError
from geoclass.core.rdf import format_number, rdf_document, rdf_point_entry
from geoclass.core.strings import DEFAULT_FORM, DEFAULT_LANGUAGE, directions
from geoclass.core.units import Unit, earth_radius, unit_label


def _clamp_unit(x: float) -> float:
    # Rounding can push a cosine slightly past +/-1, where acos() is undefined.
    return max(-1.0, min(1.0, x))


def _coerce(value: float | str) -> float:
    try:
        return float(value)
    except ValueError:
        if isinstance(value, str):
            raise InvalidFormatError(value) from None
        raise


class GeoPoint:
    """A named location on the sphere.

    Coordinates are fixed at construction and always held in both degrees and
    radians. `attributes` is an open bag for whatever produced the point
    (row values, computed `distance`, ...); it is the only mutable part.

    Coordinate interpretation, in this order:
    1. both inputs are strings containing a space -> DMS text, parsed to degrees;
    2. `degree` is false but either magnitude exceeds pi -> degrees anyway;
    3. otherwise `degree` decides between degrees and radians.
    """

    __slots__ = ("_name", "_lat", "_lon", "_lat_rad", "_lon_rad", "attributes")

    def __init__(
        self,
        name: str = "",
        latitude: float | str = 0.0,
        longitude: float | str = 0.0,
        degree: bool = False,
        attributes: Mapping[str, Any] | None = None,
        *,
        language: str = DEFAULT_LANGUAGE,
    ):
        if isinstance(latitude, str) and isinstance(longitude, str) and " " in latitude and " " in longitude:
            lat = parse_dms(latitude, language)
            lon = parse_dms(longitude, language)
            degree = True
        else:
            lat = _coerce(latitude)
            lon = _coerce(longitude)
            if abs(lat) > math.pi or abs(lon) > math.pi:
                degree = True

        if degree:
            lat_rad, lon_rad = math.radians(lat), math.radians(lon)
        else:
            lat_rad, lon_rad = lat, lon
            lat, lon = math.degrees(lat_rad), math.degrees(lon_rad)

        self._name = str(name)
        self._lat = lat
        self._lon = lon
        self._lat_rad = lat_rad
        self._lon_rad = lon_rad
        self.attributes: dict[str, Any] = dict(attributes or {})

    @classmethod
    def from_degrees(cls, name: str, latitude: float, longitude: float, **attributes: Any) -> GeoPoint:
        return cls(name, latitude, longitude, degree=True, attributes=attributes)

    @classmethod
    def from_radians(cls, name: str, latitude: float, longitude: float, **attributes: Any) -> GeoPoint:
        """Build from radians. Magnitudes above pi are still read as degrees."""
        return cls(name, latitude, longitude, degree=False, attributes=attributes)

    @classmethod
    def from_dms(cls, name: str, latitude: str, longitude: str, *, language: str = DEFAULT_LANGUAGE) -> GeoPoint:
        return cls(name, parse_dms(latitude, language), parse_dms(longitude, language), degree=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def latitude(self) -> float:
        return self._lat

    @property
    def longitude(self) -> float:
        return self._lon

    @property
    def latitude_rad(self) -> float:
        return self._lat_rad

    @property
    def longitude_rad(self) -> float:
        return self._lon_rad

    @property
    def latitude_dms(self) -> str:
        short = directions("short", DEFAULT_LANGUAGE)
        return hemisphere_dms(self._lat, positive=short[0], negative=short[4])

    @property
    def longitude_dms(self) -> str:
        short = directions("short", DEFAULT_LANGUAGE)
        return hemisphere_dms(self._lon, positive=short[2], negative=short[6])

    def annotated(self, **values: Any) -> GeoPoint:
        """Return a copy whose attributes are this point's plus `values`."""
        clone = object.__new__(GeoPoint)
        clone._name = self._name
        clone._lat = self._lat
        clone._lon = self._lon
        clone._lat_rad = self._lat_rad
        clone._lon_rad = self._lon_rad
        clone.attributes = {**self.attributes, **values}
        return clone

    # Distances

    def distance_to(self, other: GeoPoint, unit: Unit | Any = Unit.KILOMETER) -> float:
        """Great-circle distance (spherical law of cosines) in `unit`."""
        cos_angle = math.sin(self._lat_rad) * math.sin(other._lat_rad) + math.cos(self._lat_rad) * math.cos(
            other._lat_rad
        ) * math.cos(self._lon_rad - other._lon_rad)
        return math.acos(_clamp_unit(cos_angle)) * earth_radius(unit)

    def distance_string(self, other: GeoPoint, unit: Unit | Any = Unit.KILOMETER) -> str:
        """Distance rounded to two decimals followed by the unit label, e.g. `878.26 km`."""
        return f"{format_number(round(self.distance_to(other, unit), 2))} {unit_label(unit)}"

    def north_south_distance(self, other: GeoPoint, unit: Unit | Any = Unit.KILOMETER) -> float:
        """Signed meridian distance to `other` (negative when `other` lies south)."""
        direction = -1 if self._lat > other._lat else 1
        cos_angle = math.sin(self._lat_rad) * math.sin(other._lat_rad) + math.cos(self._lat_rad) * math.cos(
            other._lat_rad
        )
        return direction * math.acos(_clamp_unit(cos_angle)) * earth_radius(unit)

    def west_east_distance(self, other: GeoPoint, unit: Unit | Any = Unit.KILOMETER) -> float:
        """Signed distance along this point's parallel (negative when `other` lies west).

        Uses `sin²(lat) + cos²(lat)·cos(Δlon)`, the chord-projected small-circle
        identity; bearings are calibrated against it.
        """
        direction = -1 if self._lon > other._lon else 1
        cos_angle = math.sin(self._lat_rad) ** 2 + math.cos(self._lat_rad) ** 2 * math.cos(
            self._lon_rad - other._lon_rad
        )
        return direction * math.acos(_clamp_unit(cos_angle)) * earth_radius(unit)

    def bearing_angle(self, other: GeoPoint) -> float:
        """Angle in degrees of `other` seen from here, 0 = east, 90 = north."""
        x = self.west_east_distance(other)
        y = self.north_south_distance(other)
        return math.degrees(math.atan2(y, x))

    def bearing_to(
        self,
        other: GeoPoint,
        form: str = DEFAULT_FORM,
        language: str = DEFAULT_LANGUAGE,
    ) -> str:
        """Compass direction of `other`, like "SW" or "south west".

        Unknown `form` / `language` fall back to short / English.
        """
        return orientation_for_angle(self.bearing_angle(other), form, language)

    # Presentation

    def info(self) -> str:
        return f"{self._name} ({format_number(self._lat)}/{format_number(self._lon)})"

    def rdf_point_entry(self, indent: int = 0) -> str:
        return rdf_point_entry(self, indent)

    def rdf_document(self) -> str:
        return rdf_document([self])

    def name_sort_key(self) -> str:
        return self._name.lower()

    def distance_sort_key(self) -> tuple[bool, float]:
        """Sort by `attributes["distance"]`; points without one go last."""
        distance = self.attributes.get("distance")
        if distance is None:
            return (True, 0.0)
        return (False, float(distance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return (self._name, self._lat, self._lon) == (other._name, other._lat, other._lon)

    def __hash__(self) -> int:
        return hash((self._name, self._lat, self._lon))

    def __repr__(self) -> str:
        return f"GeoPoint(name={self._name!r}, latitude={self._lat!r}, longitude={self._lon!r})"


# Sector tests, one per compass index (N, NE, E, SE, S, SW, W, NW). Each range is
# open at the lower and closed at the upper end; W wraps around +/-180.
SECTOR_TESTS: tuple[Callable[[float], bool], ...] = (
    lambda a: 67.5 < a <= 112.5,
    lambda a: 22.5 < a <= 67.5,
    lambda a: -22.5 < a <= 22.5,
    lambda a: -67.5 < a <= -22.5,
    lambda a: -112.5 < a <= -67.5,
    lambda a: -157.5 < a <= -112.5,
    lambda a: a > 157.5 or a <= -157.5,
    lambda a: 112.5 < a <= 157.5,
)


def sector_index(angle: float) -> int | None:
    """Compass index 0..7 for an atan2 angle in degrees (None for NaN)."""
    for index, test in enumerate(SECTOR_TESTS):
        if test(angle):
            return index
    return None


def orientation_for_angle(angle: float, form: str = DEFAULT_FORM, language: str = DEFAULT_LANGUAGE) -> str:
    index = sector_index(angle)
    if index is None:
        return ""
    return directions(form, language)[index]


def barycenter(points: Iterable[GeoPoint], name: str = "Barycenter") -> GeoPoint:
    """Arithmetic mean of latitudes and longitudes.

    This is not a spherical centroid; it is fine for small, clustered point
    sets and wrong across the antimeridian.

    Raises:
        EmptyInputError: If `points` is empty.
    """
    pts = list(points)
    if not pts:
        raise EmptyInputError("barycenter needs at least one point")
    lat = sum(p.latitude for p in pts) / len(pts)
    lon = sum(p.longitude for p in pts) / len(pts)
    return GeoPoint(name, lat, lon, degree=True)
