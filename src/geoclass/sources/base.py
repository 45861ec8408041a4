"""
Source capability shared by every backend.

A source answers two questions about the locations it knows:
- `find(conditions)`: which points match a name query,
- `find_near(point, max_radius, max_hits)`: which points lie within a radius.

Proximity results are annotated copies carrying `distance` (in the source unit)
and `distance_to` (the reference point's name), nearest first.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from geoclass.core.geo import GeoPoint
from geoclass.core.units import Unit


@runtime_checkable
class GeoSource(Protocol):
    unit: Unit

    def find(self, conditions: Any = None) -> list[GeoPoint]: ...

    def find_near(self, point: GeoPoint, max_radius: float = 100, max_hits: int | None = 50) -> list[GeoPoint]: ...


def rank_by_distance(
    reference: GeoPoint,
    candidates: Iterable[GeoPoint],
    *,
    max_radius: float,
    max_hits: int | None,
    unit: Unit,
) -> list[GeoPoint]:
    """Annotate candidates within `max_radius`, sort nearest first and cap at `max_hits`.

    `max_hits` of None, 0 or a negative number means no cap.
    """
    hits: list[GeoPoint] = []
    for candidate in candidates:
        distance = reference.distance_to(candidate, unit)
        if distance > max_radius:
            continue
        hits.append(candidate.annotated(distance=distance, distance_to=reference.name))

    hits.sort(key=GeoPoint.distance_sort_key)
    if max_hits is not None and int(max_hits) > 0:
        hits = hits[: int(max_hits)]
    return hits
