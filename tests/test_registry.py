import sqlite3

import pytest

from geoclass.core.errors import UnknownSourceError
from geoclass.core.units import Unit
from geoclass.sources.db import DBSource
from geoclass.sources.memory import MemorySource
from geoclass.sources.registry import SOURCES, setup_source

RDF = "<rdf:RDF><geo:Point><rdfs:label>A</rdfs:label><geo:lat>10.5</geo:lat><geo:long>20.5</geo:long></geo:Point></rdf:RDF>"


def test_registry_knows_every_backend():
    assert sorted(SOURCES) == ["catalog", "db", "rdf", "relational"]


def test_setup_rdf_source_passes_options():
    source = setup_source("RDF", RDF, unit="miles")
    assert isinstance(source, MemorySource)
    assert source.unit is Unit.MILE
    assert [p.name for p in source.find()] == ["A"]


def test_setup_db_sources():
    conn = sqlite3.connect(":memory:")
    try:
        db = setup_source("db", conn, table="places", unit=2)
        assert isinstance(db, DBSource)
        assert db.options.table == "places"
        assert db.unit is Unit.MILE

        relational = setup_source("relational", conn)
        assert relational.options.joins == ["co.id = fi.id"]
        assert relational.options.fields.latitude == "lat"
    finally:
        conn.close()


def test_unknown_kind_lists_known_kinds():
    with pytest.raises(UnknownSourceError, match="soap") as info:
        setup_source("soap", "http://example.test")
    assert "relational" in str(info.value)
    assert isinstance(info.value, ValueError)
