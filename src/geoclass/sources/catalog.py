"""
JSON catalog source.

The catalog is a local JSON file holding a list of points:

    [{"name": "Berlin", "latitude": 52.52, "longitude": 13.405, "attributes": {"country": "DE"}}]

We validate it into typed Pydantic models so a malformed file fails at load time
with a precise error instead of producing half-built points.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from geoclass.config.settings import Settings, get_settings
from geoclass.core.env import resolve_project_path
from geoclass.core.geo import GeoPoint
from geoclass.domain.models import CatalogEntry
from geoclass.sources.memory import MemorySource


_CATALOG_ADAPTER = TypeAdapter(list[CatalogEntry])


def load_catalog(path: str | Path, *, language: str = "en") -> list[GeoPoint]:
    """Load and validate a catalog JSON file."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    entries = _CATALOG_ADAPTER.validate_python(payload)
    return [e.to_point(language=language) for e in entries]


def catalog_source(path: str | Path, *, settings: Settings | None = None, **options) -> MemorySource:
    """Load a catalog file into a searchable in-memory source."""
    settings = settings or get_settings()
    points = load_catalog(path, language=options.get("language", settings.app.language))
    return MemorySource(
        points,
        unit=options.get("unit", settings.units.default),
        cell_size_deg=options.get("cell_size_deg", settings.search.cell_size_deg),
    )
