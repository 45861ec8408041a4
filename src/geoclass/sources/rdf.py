"""
RDF source (W3C Basic Geo vocabulary).

Extracts `<geo:Point>` blocks from an RDF/XML document:

    <geo:Point>
        <rdfs:label>Los Angeles</rdfs:label>
        <geo:lat>34.05</geo:lat>
        <geo:long>-118.25</geo:long>
    </geo:Point>

This is deliberately a text scan, not an RDF parser: documents in the wild often
are not well-formed and only these three elements matter. Points without a
label get the localized "unknown" name; points without lat or long are skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from xml.sax.saxutils import unescape

from geoclass.config.settings import Settings, get_settings
from geoclass.core.env import resolve_project_path
from geoclass.core.geo import GeoPoint
from geoclass.core.http import get_text
from geoclass.core.strings import error_label
from geoclass.sources.memory import MemorySource

logger = logging.getLogger(__name__)

_POINT_RE = re.compile(r"<geo:Point>(.*?)</geo:Point>", re.IGNORECASE | re.DOTALL)
_LABEL_RE = re.compile(r"<rdfs:label>(.*?)</rdfs:label>", re.IGNORECASE | re.DOTALL)
_LAT_RE = re.compile(r"<geo:lat>(.*?)</geo:lat>", re.IGNORECASE | re.DOTALL)
_LONG_RE = re.compile(r"<geo:long>(.*?)</geo:long>", re.IGNORECASE | re.DOTALL)


def extract_points(rdf_content: str, *, language: str = "en") -> list[GeoPoint]:
    """Return every usable `geo:Point` of `rdf_content` as a `GeoPoint`."""
    flat = rdf_content.replace("\r", "").replace("\n", "")
    points: list[GeoPoint] = []
    for block in _POINT_RE.findall(flat):
        label = _LABEL_RE.search(block)
        name = unescape(label.group(1).strip()) if label else error_label("noname", language)

        lat = _LAT_RE.search(block)
        lon = _LONG_RE.search(block)
        if lat is None or lon is None:
            logger.debug("Skipping geo:Point without lat/long (%s)", name)
            continue

        try:
            points.append(GeoPoint(name, lat.group(1).strip(), lon.group(1).strip(), language=language))
        except ValueError as exc:
            logger.warning("Skipping geo:Point %r with unreadable coordinates: %s", name, exc)
    return points


def read_rdf(target: str | Path, *, settings: Settings | None = None) -> str:
    """Return RDF text from an http(s) URL, a file path, or the text itself."""
    settings = settings or get_settings()
    if isinstance(target, str):
        if target.startswith(("http://", "https://")):
            logger.info("Fetching RDF document from %s", target)
            return get_text(
                target,
                timeout_seconds=settings.http.timeout_seconds,
                user_agent=settings.http.user_agent,
            )
        if "<" in target:
            return target
    return resolve_project_path(target).read_text(encoding="utf-8")


def rdf_source(target: str | Path, *, settings: Settings | None = None, **options) -> MemorySource:
    """Load an RDF document into a searchable in-memory source.

    Options: `language`, `unit`, `cell_size_deg` (defaults from settings).
    """
    settings = settings or get_settings()
    language = options.get("language", settings.app.language)
    points = extract_points(read_rdf(target, settings=settings), language=language)
    logger.info("Loaded %d points from RDF", len(points))
    return MemorySource(
        points,
        unit=options.get("unit", settings.units.default),
        cell_size_deg=options.get("cell_size_deg", settings.search.cell_size_deg),
    )
