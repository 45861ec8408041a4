"""
Distance units.

All distances are computed on a sphere with Earth's mean radius (6371 km) and
scaled to the requested unit. Each unit stores how many kilometers one unit is.

Two lookups with deliberately different strictness:
- `earth_radius()` is permissive: anything it cannot resolve falls back to kilometers.
- `unit_label()` fails fast with `UnknownUnitError`, there is no sensible default label.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any

from geoclass.core.errors import UnknownUnitError

# Mean radius, not the WGS84 equatorial radius (6378.137 km).
EARTH_RADIUS_KM = 6371.0

KM_PER_METER = 0.001


class Unit(Enum):
    """Supported distance units; the value is kilometers per unit."""

    KILOMETER = 1.0
    MILE = 1.609343994
    INCH = 0.0000254
    NAUTICAL_MILE = 1.852
    FOOT = 0.0003048
    YARD = 0.0009144

    @property
    def km_per_unit(self) -> float:
        return float(self.value)

    @property
    def units_per_km(self) -> float:
        return 1 / float(self.value)

    @property
    def label(self) -> str:
        return unit_label(self)

    @classmethod
    def parse(cls, value: Any) -> "Unit":
        """Resolve a `Unit` from an enum member, name, label or legacy numeric code."""
        if isinstance(value, Unit):
            return value
        if isinstance(value, bool):
            raise UnknownUnitError(value)
        if isinstance(value, int):
            unit = _LEGACY_CODES.get(value)
            if unit is None:
                raise UnknownUnitError(value)
            return unit
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            unit = _ALIASES.get(key)
            if unit is None:
                raise UnknownUnitError(value)
            return unit
        raise UnknownUnitError(value)


_LABELS: MappingProxyType[Unit, str] = MappingProxyType(
    {
        Unit.KILOMETER: "km",
        Unit.MILE: "miles",
        Unit.INCH: "inch",
        Unit.NAUTICAL_MILE: "sm",
        Unit.FOOT: "ft",
        Unit.YARD: "yd",
    }
)

# Numeric codes used by older integrations (1=km, 2=mi, 3=in, 4=sm, 11=ft, 12=yd).
_LEGACY_CODES: MappingProxyType[int, Unit] = MappingProxyType(
    {
        1: Unit.KILOMETER,
        2: Unit.MILE,
        3: Unit.INCH,
        4: Unit.NAUTICAL_MILE,
        11: Unit.FOOT,
        12: Unit.YARD,
    }
)

_ALIASES: dict[str, Unit] = {}
for _unit in Unit:
    _ALIASES[_unit.name.lower()] = _unit
    _ALIASES[_LABELS[_unit]] = _unit
_ALIASES.update({"kilometers": Unit.KILOMETER, "mi": Unit.MILE, "nm": Unit.NAUTICAL_MILE, "feet": Unit.FOOT})


def earth_radius(unit: Any = Unit.KILOMETER) -> float:
    """Return Earth's mean radius in `unit`.

    Unresolvable units fall back to kilometers instead of raising.
    """
    try:
        resolved = Unit.parse(unit)
    except UnknownUnitError:
        return EARTH_RADIUS_KM
    return EARTH_RADIUS_KM * resolved.units_per_km


def unit_label(unit: Any) -> str:
    """Return the short display label of `unit` ("km", "miles", ...).

    Raises:
        UnknownUnitError: If `unit` cannot be resolved.
    """
    return _LABELS[Unit.parse(unit)]


def convert(value: float, from_unit: Any, to_unit: Any) -> float:
    """Convert a distance between two units."""
    src = Unit.parse(from_unit)
    dst = Unit.parse(to_unit)
    return float(value) * src.km_per_unit / dst.km_per_unit
