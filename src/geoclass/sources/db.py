"""
Relational source over any DB-API 2.0 connection.

Searches run in the database: proximity queries embed the great-circle distance
as a SQL expression (`distance_formula`) in both the selected `distance` column
and the radius predicate. The reference point's radians and the Earth radius are
interpolated as full-precision literals; user-supplied values (name patterns,
condition values, radius, limit) are always bound parameters.

Table / column names and raw condition fragments come from trusted options and
are inserted verbatim.
"""

from __future__ import annotations

import logging
import math
import sqlite3
from typing import Any, Mapping, Sequence

from geoclass.core.geo import GeoPoint
from geoclass.core.units import Unit, earth_radius
from geoclass.domain.models import RELATIONAL_DEFAULTS, DBOptions, FieldMap

logger = logging.getLogger(__name__)


def distance_formula(point: GeoPoint, fields: FieldMap, unit: Unit = Unit.KILOMETER, *, degree: bool = True) -> str:
    """SQL expression for the distance between `point` and each row, in `unit`.

    NULL (e.g. acos of a value rounded past 1) is reported as 0.
    """
    lat_col = f"RADIANS({fields.latitude})" if degree else fields.latitude
    lon_col = f"RADIANS({fields.longitude})" if degree else fields.longitude
    lat = repr(float(point.latitude_rad))
    lon = repr(float(point.longitude_rad))
    return (
        "COALESCE("
        f"(ACOS((SIN({lat})*SIN({lat_col})) + "
        f"(COS({lat})*COS({lat_col})*COS({lon_col}-({lon})))) * "
        f"{earth_radius(unit)!r})"
        ",0)"
    )


def _sql_acos(x: float | None) -> float | None:
    if x is None:
        return None
    return math.acos(max(-1.0, min(1.0, x)))


def _sql_unary(fn):
    return lambda x: None if x is None else fn(x)


def register_sqlite_functions(connection: sqlite3.Connection) -> None:
    """Provide ACOS / SIN / COS / RADIANS on SQLite builds that lack math functions."""
    connection.create_function("ACOS", 1, _sql_acos, deterministic=True)
    connection.create_function("SIN", 1, _sql_unary(math.sin), deterministic=True)
    connection.create_function("COS", 1, _sql_unary(math.cos), deterministic=True)
    connection.create_function("RADIANS", 1, _sql_unary(math.radians), deterministic=True)


class DBSource:
    """Locations stored in a table (or joined tables) of a relational database."""

    def __init__(self, connection: Any, options: DBOptions | Mapping[str, Any] | None = None):
        self._conn = connection
        self.options = options if isinstance(options, DBOptions) else DBOptions.model_validate(dict(options or {}))
        self.unit = self.options.unit
        if isinstance(connection, sqlite3.Connection):
            register_sqlite_functions(connection)

    def _where(self, conditions: Any) -> tuple[list[str], list[Any]]:
        ph = self.options.placeholder
        clauses = list(self.options.joins)
        params: list[Any] = []
        if conditions is None:
            conditions = "%"
        if isinstance(conditions, str):
            clauses.append(f"{self.options.fields.name} LIKE {ph}")
            params.append(conditions)
        elif isinstance(conditions, Mapping):
            for column, value in conditions.items():
                clauses.append(f"{column} = {ph}")
                params.append(value)
        elif isinstance(conditions, Sequence):
            clauses.extend(str(c) for c in conditions)
        else:
            raise TypeError(f"Unsupported search conditions: {type(conditions).__name__}")
        return clauses, params

    def find(self, conditions: Any = "%") -> list[GeoPoint]:
        """Points matching `conditions`.

        - str: SQL LIKE pattern on the name column (`"Ber%"`)
        - mapping: `column = value` pairs, values bound as parameters
        - sequence: raw SQL fragments
        All clauses (and the configured joins) are ANDed.
        """
        clauses, params = self._where(conditions)
        where = " AND ".join(clauses) if clauses else "1 = 1"
        query = f"SELECT * FROM {self.options.table} WHERE {where} ORDER BY {self.options.order}"
        return self._perform_query(query, params)

    def find_near(self, point: GeoPoint, max_radius: float = 100, max_hits: int | None = 50) -> list[GeoPoint]:
        """Points within `max_radius` (source unit) of `point`, nearest first."""
        ph = self.options.placeholder
        formula = distance_formula(point, self.options.fields, self.unit, degree=self.options.degree)
        clauses = [*self.options.joins, f"{formula} < {ph}"]
        params: list[Any] = [float(max_radius)]
        query = (
            f"SELECT *, {formula} AS distance FROM {self.options.table} "
            f"WHERE {' AND '.join(clauses)} ORDER BY distance ASC"
        )
        if max_hits is not None and int(max_hits) > 0:
            query += f" LIMIT {ph}"
            params.append(int(max_hits))
        return [p.annotated(distance_to=point.name) for p in self._perform_query(query, params)]

    def _perform_query(self, query: str, params: list[Any]) -> list[GeoPoint]:
        logger.debug("geoclass query: %s params=%s", query, params)
        cursor = self._conn.cursor()
        try:
            cursor.execute(query, params)
            columns = [d[0] for d in cursor.description]
            rows = [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()
        return [self._to_point(row) for row in rows]

    def _to_point(self, row: dict[str, Any]) -> GeoPoint:
        fields = self.options.fields
        return GeoPoint(
            row[fields.name],
            float(row[fields.latitude]),
            float(row[fields.longitude]),
            degree=self.options.degree,
            attributes=row,
        )


def relational_source(connection: Any, options: Mapping[str, Any] | None = None) -> DBSource:
    """A `DBSource` for schemas that split coordinates and details into joined tables."""
    merged = {**RELATIONAL_DEFAULTS, **dict(options or {})}
    return DBSource(connection, merged)
