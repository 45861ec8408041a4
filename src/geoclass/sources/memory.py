"""
In-memory source: a fixed list of points, searched locally.

RDF documents and JSON catalogs both load into this.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from geoclass.core.geo import GeoPoint
from geoclass.core.spatial_index import SpatialGridIndex
from geoclass.core.units import Unit
from geoclass.sources.base import rank_by_distance

logger = logging.getLogger(__name__)


class MemorySource:
    """Points held in memory with a grid index for proximity queries."""

    def __init__(self, points: Iterable[GeoPoint], *, unit: Unit = Unit.KILOMETER, cell_size_deg: float = 1.0):
        self.unit = Unit.parse(unit)
        self._points = list(points)
        self._index: SpatialGridIndex[GeoPoint] = SpatialGridIndex(
            self._points,
            get_latlon=lambda p: (p.latitude, p.longitude),
            cell_size_deg=cell_size_deg,
        )

    @property
    def points(self) -> list[GeoPoint]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def find(self, conditions: str | re.Pattern[str] | None = None) -> list[GeoPoint]:
        """Points whose name matches the regular expression `conditions` (all when None)."""
        if conditions is None:
            return list(self._points)
        pattern = conditions if isinstance(conditions, re.Pattern) else re.compile(conditions)
        return [p for p in self._points if pattern.search(p.name)]

    def find_near(self, point: GeoPoint, max_radius: float = 100, max_hits: int | None = 50) -> list[GeoPoint]:
        radius_km = float(max_radius) * self.unit.km_per_unit
        candidates = self._index.query_candidates(lat=point.latitude, lon=point.longitude, radius_km=radius_km)
        logger.debug(
            "find_near %s: %d of %d points pass the grid prefilter", point.name, len(candidates), len(self._points)
        )
        return rank_by_distance(point, candidates, max_radius=float(max_radius), max_hits=max_hits, unit=self.unit)
