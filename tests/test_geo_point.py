import math

import pytest

from geoclass.core.errors import EmptyInputError, InvalidFormatError, UnknownUnitError
from geoclass.core.geo import GeoPoint, barycenter
from geoclass.core.units import Unit

BERLIN = GeoPoint("Berlin", 52.52, 13.405, degree=True)
PARIS = GeoPoint("Paris", 48.8566, 2.3522, degree=True)
SYDNEY = GeoPoint("Sydney", -33.8688, 151.2093, degree=True)
NEW_YORK = GeoPoint("New York", 40.7128, -74.0060, degree=True)


def test_degree_and_radian_fields_are_consistent():
    p = GeoPoint("Berlin", 52.52, 13.405, degree=True)
    assert p.latitude == 52.52
    assert p.longitude == 13.405
    assert p.latitude_rad == math.radians(52.52)
    assert p.longitude_rad == math.radians(13.405)


def test_radian_input_derives_degrees():
    p = GeoPoint("r", 0.5, -1.0)
    assert p.latitude_rad == 0.5
    assert p.longitude_rad == -1.0
    assert p.latitude == pytest.approx(math.degrees(0.5))
    assert p.longitude == pytest.approx(math.degrees(-1.0))


def test_magnitude_above_pi_is_read_as_degrees_even_without_flag():
    # 52.52 cannot be a latitude in radians.
    p = GeoPoint("Berlin", 52.52, 1.0)
    assert p.latitude == 52.52
    assert p.longitude == 1.0
    assert p.longitude_rad == pytest.approx(math.radians(1.0))


def test_small_values_without_flag_are_radians():
    p = GeoPoint("tiny", 1.0, 2.0)
    assert p.latitude_rad == 1.0
    assert p.latitude == pytest.approx(57.29577951308232)


def test_dms_strings_with_spaces_are_parsed_as_degrees():
    p = GeoPoint("Bern", "46° 56' 53'' N", "7° 26' 31'' E")
    assert p.latitude == pytest.approx(46 + 56 / 60 + 53 / 3600)
    assert p.longitude == pytest.approx(7 + 26 / 60 + 31 / 3600)
    assert p.latitude_rad == pytest.approx(math.radians(p.latitude))


def test_decimal_strings_follow_numeric_rules():
    # No space: coerced to float, then the pi heuristic applies.
    p = GeoPoint("s", "52.52", "13.405")
    assert p.latitude == 52.52
    q = GeoPoint("r", "0.5", "0.25")
    assert q.latitude_rad == 0.5


def test_dms_only_when_both_strings_contain_a_space():
    with pytest.raises(InvalidFormatError):
        GeoPoint("mixed", "46° 56' 53''", "7.44")
    with pytest.raises(InvalidFormatError):
        GeoPoint("mixed", "46 56 53", "7.44")


def test_non_numeric_coordinates_raise_a_typed_error():
    with pytest.raises(InvalidFormatError, match="north"):
        GeoPoint("words", "north", "east")


def test_factories():
    assert GeoPoint.from_degrees("a", 1.0, 2.0).latitude == 1.0
    assert GeoPoint.from_radians("b", 1.0, 2.0).latitude_rad == 1.0
    p = GeoPoint.from_dms("c", "51° 24' 32.123'' N", "0° 7' 39'' W")
    assert p.longitude < 0
    assert GeoPoint.from_degrees("d", 1.0, 2.0, population=5).attributes == {"population": 5}


def test_berlin_to_paris_distance_and_bearing():
    assert BERLIN.distance_to(PARIS, Unit.KILOMETER) == pytest.approx(878, abs=5)
    assert BERLIN.bearing_to(PARIS) == "SW"
    assert PARIS.bearing_to(BERLIN) == "NE"


def test_distance_is_symmetric():
    pairs = [(BERLIN, PARIS), (SYDNEY, NEW_YORK), (BERLIN, SYDNEY)]
    for a, b in pairs:
        assert a.distance_to(b) == pytest.approx(b.distance_to(a), abs=1e-9)


@pytest.mark.parametrize("p", [BERLIN, PARIS, SYDNEY, NEW_YORK, GeoPoint("pole", 90, 0, degree=True)])
def test_distance_to_self_is_zero_and_never_nan(p):
    d = p.distance_to(p)
    assert not math.isnan(d)
    assert d == pytest.approx(0.0, abs=1e-3)


def test_antipodal_distance_is_half_circumference_not_nan():
    # Regression: the cosine lands just past -1 for exact antipodes.
    a = GeoPoint("a", 52.52, 13.405, degree=True)
    b = GeoPoint("b", -52.52, 13.405 - 180, degree=True)
    d = a.distance_to(b)
    assert not math.isnan(d)
    assert d == pytest.approx(math.pi * 6371.0, rel=1e-6)


def test_distance_in_miles_scales_from_kilometers():
    km = BERLIN.distance_to(PARIS, Unit.KILOMETER)
    mi = BERLIN.distance_to(PARIS, Unit.MILE)
    assert mi == pytest.approx(km * (1 / 1.609343994), abs=1e-9)


def test_distance_with_unknown_unit_falls_back_to_kilometers():
    assert BERLIN.distance_to(PARIS, "parsec") == BERLIN.distance_to(PARIS)


def test_distance_string():
    text = BERLIN.distance_string(PARIS)
    value, label = text.split(" ")
    assert label == "km"
    assert float(value) == round(BERLIN.distance_to(PARIS), 2)
    assert BERLIN.distance_string(PARIS, Unit.MILE).endswith(" miles")
    with pytest.raises(UnknownUnitError):
        BERLIN.distance_string(PARIS, "parsec")


def test_north_south_distance_sign_and_size():
    south = BERLIN.north_south_distance(PARIS)
    assert south < 0
    # Meridian distance is the latitude difference on the sphere.
    assert abs(south) == pytest.approx(math.radians(52.52 - 48.8566) * 6371.0, rel=1e-9)
    assert PARIS.north_south_distance(BERLIN) == pytest.approx(-south)


def test_west_east_distance_sign_and_identity():
    west = BERLIN.west_east_distance(PARIS)
    assert west < 0
    lat = math.radians(52.52)
    dlon = math.radians(13.405 - 2.3522)
    expected = math.acos(math.sin(lat) ** 2 + math.cos(lat) ** 2 * math.cos(dlon)) * 6371.0
    assert abs(west) == pytest.approx(expected, rel=1e-12)
    assert PARIS.west_east_distance(BERLIN) > 0


def test_bearing_languages_and_forms():
    assert BERLIN.bearing_to(PARIS, "long", "en") == "south west"
    assert BERLIN.bearing_to(PARIS, "long", "de") == "Südwesten"
    assert PARIS.bearing_to(BERLIN, "short", "de") == "NO"


def test_bearing_falls_back_to_english_short_form():
    assert BERLIN.bearing_to(PARIS, "medium", "fr") == "SW"


def test_bearing_cardinal_directions():
    origin = GeoPoint("o", 10.0, 10.0, degree=True)
    assert origin.bearing_to(GeoPoint("n", 11.0, 10.0, degree=True)) == "N"
    assert origin.bearing_to(GeoPoint("s", 9.0, 10.0, degree=True)) == "S"
    assert origin.bearing_to(GeoPoint("e", 10.0, 11.0, degree=True)) == "E"
    assert origin.bearing_to(GeoPoint("w", 10.0, 9.0, degree=True)) == "W"


def test_latitude_and_longitude_dms_strings():
    assert BERLIN.latitude_dms == "N 52° 31' 12''"
    assert PARIS.longitude_dms == "E 2° 21' 8''"
    assert NEW_YORK.longitude_dms.startswith("W ")
    assert SYDNEY.latitude_dms.startswith("S ")


def test_info_string():
    assert BERLIN.info() == "Berlin (52.52/13.405)"
    assert GeoPoint("Null Island", 0, 0, degree=True).info() == "Null Island (0/0)"


def test_annotated_copy_does_not_touch_original():
    original = GeoPoint("a", 10.0, 20.0, degree=True, attributes={"id": 1})
    copy = original.annotated(distance=5.0, distance_to="b")
    assert copy == original
    assert copy.attributes == {"id": 1, "distance": 5.0, "distance_to": "b"}
    assert original.attributes == {"id": 1}


def test_coordinates_are_read_only():
    with pytest.raises(AttributeError):
        BERLIN.latitude = 0.0  # type: ignore[misc]


def test_sort_keys():
    points = [GeoPoint("beta", 1, 1), GeoPoint("Alpha", 1, 1), GeoPoint("gamma", 1, 1)]
    assert [p.name for p in sorted(points, key=GeoPoint.name_sort_key)] == ["Alpha", "beta", "gamma"]

    near = points[0].annotated(distance=1.0)
    far = points[1].annotated(distance=9.0)
    unknown = points[2]
    ordered = sorted([unknown, far, near], key=GeoPoint.distance_sort_key)
    assert [p.name for p in ordered] == ["beta", "Alpha", "gamma"]


def test_barycenter_of_single_point_is_that_point():
    for p in (BERLIN, SYDNEY, GeoPoint("r", 0.5, 0.25)):
        assert barycenter([p], name=p.name) == p


def test_barycenter_is_arithmetic_mean():
    center = barycenter([BERLIN, PARIS])
    assert center.name == "Barycenter"
    assert center.latitude == pytest.approx((52.52 + 48.8566) / 2)
    assert center.longitude == pytest.approx((13.405 + 2.3522) / 2)
    assert center.latitude_rad == pytest.approx(math.radians(center.latitude))


def test_barycenter_small_mean_is_still_degrees():
    # Means below pi must not be mistaken for radians.
    center = barycenter([GeoPoint("a", 1.0, 1.0, degree=True), GeoPoint("b", 2.0, 2.0, degree=True)])
    assert center.latitude == pytest.approx(1.5)


def test_barycenter_of_nothing_fails():
    with pytest.raises(EmptyInputError):
        barycenter([])
