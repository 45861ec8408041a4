"""
Source registry.

Maps the closed set of backend kinds to their constructors. Each constructor
takes the backend target (RDF text / path / URL, catalog path, or a DB-API
connection) plus keyword options.
"""

from __future__ import annotations

from typing import Any, Callable

from geoclass.core.errors import UnknownSourceError
from geoclass.sources.base import GeoSource
from geoclass.sources.catalog import catalog_source
from geoclass.sources.db import DBSource, relational_source
from geoclass.sources.rdf import rdf_source


def _db(connection: Any, **options: Any) -> DBSource:
    return DBSource(connection, options)


def _relational(connection: Any, **options: Any) -> DBSource:
    return relational_source(connection, options)


SOURCES: dict[str, Callable[..., GeoSource]] = {
    "rdf": rdf_source,
    "catalog": catalog_source,
    "db": _db,
    "relational": _relational,
}


def setup_source(kind: str, target: Any, **options: Any) -> GeoSource:
    """Create a source of `kind` ("rdf", "catalog", "db", "relational").

    Raises:
        UnknownSourceError: If `kind` is not registered.
    """
    factory = SOURCES.get(kind.strip().lower())
    if factory is None:
        raise UnknownSourceError(kind, sorted(SOURCES))
    return factory(target, **options)
