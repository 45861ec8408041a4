"""
Domain models (Pydantic).

These types are the validated "contract" at the edges of geoclass:
- catalog files (`CatalogEntry`), turned into `GeoPoint`s by the catalog source,
- relational source options (`FieldMap`, `DBOptions`).

`GeoPoint` itself is a plain class in `geoclass.core.geo`; it needs exact control
over how its coordinates are interpreted, which a model would obscure.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from geoclass.core.geo import GeoPoint
from geoclass.core.units import Unit


class CatalogEntry(BaseModel):
    """One point of a JSON catalog file.

    Coordinates may be numbers or strings (decimal or DMS text); they go through
    the same interpretation rules as `GeoPoint(...)`.
    """

    name: str = Field(..., min_length=1)
    latitude: float | str
    longitude: float | str
    degree: bool = True
    attributes: dict[str, Any] = Field(default_factory=dict)

    def to_point(self, *, language: str = "en") -> GeoPoint:
        return GeoPoint(
            self.name,
            self.latitude,
            self.longitude,
            degree=self.degree,
            attributes=self.attributes,
            language=language,
        )


class FieldMap(BaseModel):
    """Column names holding the name and coordinates of a location."""

    name: str = "name"
    latitude: str = "latitude"
    longitude: str = "longitude"


class DBOptions(BaseModel):
    """Options of a relational source.

    `table` is inserted verbatim and may list several aliased tables; `joins`
    are the join conditions ANDed in front of every WHERE clause.
    """

    table: str = "geo"
    fields: FieldMap = Field(default_factory=FieldMap)
    joins: list[str] = Field(default_factory=list)
    order: str = "name"
    # True when the coordinate columns hold degrees, False for radians.
    degree: bool = True
    unit: Unit = Unit.KILOMETER
    paramstyle: Literal["qmark", "format"] = "qmark"

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> Unit:
        return Unit.parse(value)

    @property
    def placeholder(self) -> str:
        return "?" if self.paramstyle == "qmark" else "%s"


RELATIONAL_DEFAULTS: dict[str, Any] = {
    "table": "coordinates co, further_information fi",
    "joins": ["co.id = fi.id"],
    "fields": {"name": "name", "latitude": "lat", "longitude": "lon"},
    "order": "name",
}
