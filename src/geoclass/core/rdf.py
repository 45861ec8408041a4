"""
W3C Basic Geo (WGS84 lat/long) RDF export.

Produces `geo:Point` entries in the shape used by http://www.w3.org/2003/01/geo/:

    <geo:Point>
        <rdfs:label>Berlin</rdfs:label>
        <geo:lat>52.52</geo:lat>
        <geo:long>13.405</geo:long>
    </geo:Point>
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from geoclass.core.geo import GeoPoint

RDF_HEADER = (
    '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"\n'
    '\txmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"\n'
    '\txmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#">\n\n'
)
RDF_FOOTER = "</rdf:RDF>"


def format_number(value: float) -> str:
    """Render a float the short way (`13` instead of `13.0`, `52.52` as is)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def rdf_point_entry(point: GeoPoint, indent: int = 0) -> str:
    pad = "\t" * max(int(indent), 0)
    return (
        f"{pad}<geo:Point>\n"
        f"{pad}\t<rdfs:label>{escape(point.name)}</rdfs:label>\n"
        f"{pad}\t<geo:lat>{format_number(point.latitude)}</geo:lat>\n"
        f"{pad}\t<geo:long>{format_number(point.longitude)}</geo:long>\n"
        f"{pad}</geo:Point>\n"
    )


def rdf_document(points: Iterable[GeoPoint]) -> str:
    """Wrap the entries of `points` in an `rdf:RDF` document."""
    body = "".join(rdf_point_entry(p, 1) + "\n" for p in points)
    return RDF_HEADER + body + RDF_FOOTER
