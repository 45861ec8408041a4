"""
Lightweight spatial indexing (lat/lon grid buckets) for in-memory point sets.

Used by in-memory sources to avoid computing a great-circle distance to every
point on each proximity query. The index only returns candidates: callers still
check the exact distance. Candidates are chosen with the spherical bounding box
of the search circle, so the prefilter never drops a point that is inside it,
including near the poles and across the antimeridian.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from geoclass.core.units import EARTH_RADIUS_KM

T = TypeVar("T")


def _normalize_lon(lon: float) -> float:
    return ((float(lon) + 180.0) % 360.0) - 180.0


@dataclass(frozen=True)
class _Entry(Generic[T]):
    item: T
    lat: float
    lon: float
    seq: int


class SpatialGridIndex(Generic[T]):
    def __init__(
        self,
        items: list[T],
        *,
        get_latlon: Callable[[T], tuple[float, float]],
        cell_size_deg: float = 1.0,
    ):
        if float(cell_size_deg) <= 0:
            raise ValueError("cell_size_deg must be > 0")
        self._lat_cell = float(cell_size_deg)
        # Longitude cells must tile 360° exactly so wrapped indices line up.
        self._lon_cells = max(1, round(360.0 / self._lat_cell))
        self._lon_cell = 360.0 / self._lon_cells
        self._cells: dict[tuple[int, int], list[_Entry[T]]] = {}
        self._entries: list[_Entry[T]] = []
        # Latitudes outside [-90, 90] are not validated upstream; always offer them.
        self._unbucketed: list[_Entry[T]] = []

        for seq, it in enumerate(items):
            lat, lon = get_latlon(it)
            e = _Entry(item=it, lat=float(lat), lon=_normalize_lon(lon), seq=seq)
            self._entries.append(e)
            if -90.0 <= e.lat <= 90.0:
                self._cells.setdefault(self._cell_key(e.lat, e.lon), []).append(e)
            else:
                self._unbucketed.append(e)

    def __len__(self) -> int:
        return len(self._entries)

    def _lat_index(self, lat: float) -> int:
        return int(math.floor(lat / self._lat_cell))

    def _lon_index(self, lon: float) -> int:
        return int(math.floor((lon + 180.0) / self._lon_cell)) % self._lon_cells

    def _cell_key(self, lat: float, lon: float) -> tuple[int, int]:
        return (self._lat_index(lat), self._lon_index(lon))

    def query_candidates(self, *, lat: float, lon: float, radius_km: float) -> list[T]:
        """Items that may lie within `radius_km` of (lat, lon), in insertion order."""
        r = float(radius_km)
        if r < 0:
            return []
        # Angular radius, padded against rounding at the box edges.
        ang = r / EARTH_RADIUS_KM * (1 + 1e-9) + 1e-12
        # Centers off the sphere's latitude range have no meaningful box.
        if ang >= math.pi or not -90.0 <= float(lat) <= 90.0:
            return [e.item for e in self._entries]

        lat_r = math.radians(float(lat))
        lat_min = lat_r - ang
        lat_max = lat_r + ang
        if lat_min > -math.pi / 2 and lat_max < math.pi / 2:
            dlon = math.degrees(math.asin(min(1.0, math.sin(ang) / math.cos(lat_r))))
            full_lon = False
        else:
            # The circle contains a pole: every longitude is reachable.
            lat_min = max(lat_min, -math.pi / 2)
            lat_max = min(lat_max, math.pi / 2)
            dlon = 180.0
            full_lon = True

        lat_lo = self._lat_index(math.degrees(lat_min))
        lat_hi = self._lat_index(math.degrees(lat_max))
        center = _normalize_lon(lon)
        if full_lon or 2 * dlon >= 360.0 - self._lon_cell:
            lon_indices = set(range(self._lon_cells))
        else:
            lo = int(math.floor((center - dlon + 180.0) / self._lon_cell))
            hi = int(math.floor((center + dlon + 180.0) / self._lon_cell))
            lon_indices = {k % self._lon_cells for k in range(lo, hi + 1)}

        hits: list[_Entry[T]] = list(self._unbucketed)
        for (lat_i, lon_i), cell in self._cells.items():
            if lat_lo <= lat_i <= lat_hi and lon_i in lon_indices:
                hits.extend(cell)
        hits.sort(key=lambda e: e.seq)
        return [e.item for e in hits]
