"""
geoclass CLI entrypoint.

This CLI is intended for quick lookups and debugging: distances, bearings,
DMS conversion and proximity searches over local RDF / catalog files. All the
math lives in `geoclass.core`; this module only parses arguments and prints.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from geoclass.config.settings import get_settings
from geoclass.core.angles import format_dms, hemisphere_dms, parse_dms
from geoclass.core.errors import GeoError
from geoclass.core.geo import GeoPoint
from geoclass.core.logging import configure_logging
from geoclass.core.strings import directions
from geoclass.core.units import Unit, unit_label
from geoclass.sources.registry import setup_source


def _point(name: str, coords: list[str], *, radians: bool) -> GeoPoint:
    """Build a point from two CLI strings (decimal or quoted DMS text)."""
    lat, lon = coords
    return GeoPoint(name, lat, lon, degree=not radians, language=get_settings().app.language)


def _unit(args: argparse.Namespace) -> Unit:
    return Unit.parse(args.unit) if args.unit else get_settings().units.default


def _cmd_distance(args: argparse.Namespace) -> int:
    a = _point("from", args.origin, radians=args.radians)
    b = _point("to", args.target, radians=args.radians)
    unit = _unit(args)
    distance = a.distance_to(b, unit)

    if args.json:
        payload = {
            "distance": distance,
            "unit": unit_label(unit),
            "north_south": a.north_south_distance(b, unit),
            "west_east": a.west_east_distance(b, unit),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(a.distance_string(b, unit))
    return 0


def _cmd_bearing(args: argparse.Namespace) -> int:
    settings = get_settings()
    a = _point("from", args.origin, radians=args.radians)
    b = _point("to", args.target, radians=args.radians)
    print(a.bearing_to(b, args.form or settings.app.orientation_form, args.language or settings.app.language))
    return 0


def _cmd_dms2deg(args: argparse.Namespace) -> int:
    print(parse_dms(args.text, args.language or get_settings().app.language))
    return 0


def _cmd_deg2dms(args: argparse.Namespace) -> int:
    if args.axis is None:
        print(format_dms(args.value, args.places))
        return 0
    short = directions("short", args.language or get_settings().app.language)
    if args.axis == "lat":
        print(hemisphere_dms(args.value, positive=short[0], negative=short[4], decimal_places=args.places))
    else:
        print(hemisphere_dms(args.value, positive=short[2], negative=short[6], decimal_places=args.places))
    return 0


def _cmd_near(args: argparse.Namespace) -> int:
    settings = get_settings()
    unit = _unit(args)
    source = setup_source(args.kind, args.source, unit=unit)
    origin = _point(args.name, args.origin, radians=args.radians)

    radius = args.radius if args.radius is not None else settings.search.max_radius
    max_hits = args.max_hits if args.max_hits is not None else settings.search.max_hits
    hits = source.find_near(origin, max_radius=radius, max_hits=max_hits)

    if args.json:
        payload: list[dict[str, Any]] = [
            {
                "name": p.name,
                "latitude": p.latitude,
                "longitude": p.longitude,
                "distance": p.attributes.get("distance"),
                "bearing": origin.bearing_to(p, settings.app.orientation_form, settings.app.language),
            }
            for p in hits
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    label = unit_label(unit)
    for i, p in enumerate(hits, start=1):
        bearing = origin.bearing_to(p, settings.app.orientation_form, settings.app.language)
        print(f"{i:>2}. {p.info()}  {p.attributes['distance']:.2f} {label} {bearing}")
    return 0


def _add_point_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--from", dest="origin", nargs=2, required=True, metavar=("LAT", "LON"))
    p.add_argument("--to", dest="target", nargs=2, required=True, metavar=("LAT", "LON"))
    p.add_argument("--radians", action="store_true", help="Inputs are radians (magnitudes > pi still mean degrees)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the geoclass CLI."""
    parser = argparse.ArgumentParser(prog="geoclass")
    sub = parser.add_subparsers(dest="command", required=True)
    unit_help = "km, miles, inch, sm, ft or yd (default from config)"

    dist = sub.add_parser("distance", help="Great-circle distance between two points.")
    _add_point_args(dist)
    dist.add_argument("--unit", type=str, default=None, help=unit_help)
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)

    bear = sub.add_parser("bearing", help="Compass direction from the first point to the second.")
    _add_point_args(bear)
    bear.add_argument("--form", choices=["short", "long"], default=None)
    bear.add_argument("--language", choices=["en", "de"], default=None)
    bear.set_defaults(func=_cmd_bearing)

    d2d = sub.add_parser("dms2deg", help="Convert a DMS string (e.g. \"51° 24' 32'' W\") to degrees.")
    d2d.add_argument("text")
    d2d.add_argument("--language", choices=["en", "de"], default=None)
    d2d.set_defaults(func=_cmd_dms2deg)

    d2s = sub.add_parser("deg2dms", help="Convert decimal degrees to DMS.")
    d2s.add_argument("value", type=float)
    d2s.add_argument("--places", type=int, default=0, help="Decimal places of the seconds")
    d2s.add_argument("--axis", choices=["lat", "lon"], default=None, help="Prefix a hemisphere letter")
    d2s.add_argument("--language", choices=["en", "de"], default=None)
    d2s.set_defaults(func=_cmd_deg2dms)

    near = sub.add_parser("near", help="Points of an RDF or catalog file within a radius.")
    near.add_argument("source", help="RDF file / URL or catalog JSON file")
    near.add_argument("--kind", choices=["rdf", "catalog"], default="rdf")
    near.add_argument("--at", dest="origin", nargs=2, required=True, metavar=("LAT", "LON"))
    near.add_argument("--name", default="origin")
    near.add_argument("--radians", action="store_true")
    near.add_argument("--radius", type=float, default=None)
    near.add_argument("--max-hits", type=int, default=None)
    near.add_argument("--unit", type=str, default=None, help=unit_help)
    near.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    near.set_defaults(func=_cmd_near)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geoclass.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except GeoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
