import pytest

from geoclass.core.angles import format_dms, hemisphere_dms, parse_dms, split_dms
from geoclass.core.errors import InvalidFormatError, OutOfRangeError


def test_parse_dms_west_hemisphere_is_negative():
    assert parse_dms("51° 24' 32.123'' W") == pytest.approx(-51.4089, abs=1e-4)


def test_parse_dms_matches_sexagesimal_value():
    expected = 51 + 24 / 60 + 32.123 / 3600
    assert parse_dms("51° 24' 32.123''") == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize(
    "text,sign",
    [
        ("S 33 52 10", -1),
        ("s 33 52 10", -1),
        ("-33 52 10", -1),
        ("+33 52 10", 1),
        ("33 52 10 N", 1),
        ("33° 52' 10'' E", 1),
    ],
)
def test_parse_dms_sign_tokens(text, sign):
    assert parse_dms(text) == pytest.approx(sign * (33 + 52 / 60 + 10 / 3600))


def test_parse_dms_german_uses_localized_negative_tokens():
    # German short form still uses S and W for south / west.
    assert parse_dms("7° 26' 31'' W", language="de") < 0
    # Unknown languages fall back to English.
    assert parse_dms("7° 26' 31'' W", language="xx") < 0


def test_parse_dms_pads_compact_strings():
    # Six characters get one leading zero, five characters get two.
    assert parse_dms("512432") == pytest.approx(51 + 24 / 60 + 32 / 3600)
    assert parse_dms("12432") == pytest.approx(1 + 24 / 60 + 32 / 3600)


def test_parse_dms_comma_fraction_separator():
    assert parse_dms("10 30 15,5") == pytest.approx(10 + 30 / 60 + 15.5 / 3600)


def test_parse_dms_rejects_text_without_dms():
    with pytest.raises(InvalidFormatError):
        parse_dms("north of here")


@pytest.mark.parametrize("text", ["361 00 00", "10 60 00", "10 30 60"])
def test_parse_dms_rejects_out_of_range_components(text):
    with pytest.raises(OutOfRangeError):
        parse_dms(text)


def test_parse_dms_only_bounds_integer_seconds():
    # 59.99 seconds is accepted even though the fraction pushes it close to 60.
    parsed = split_dms("10 30 59.99")
    assert parsed.seconds == 59
    assert parsed.fraction == "99"
    assert parse_dms("10 30 59.99") == pytest.approx(10 + 30 / 60 + 59.99 / 3600)


def test_format_dms_basic():
    assert format_dms(50.1833300) == "50° 11' 0''"
    assert format_dms(7.441944) == "7° 26' 31''"


def test_format_dms_decimal_places_are_zero_padded():
    assert format_dms(45.5, 3) == "45° 30' 0.000''"
    assert format_dms(10.000125, 2) == "10° 0' 0.45''"


def test_format_dms_is_direction_agnostic():
    assert format_dms(-33.5) == format_dms(33.5)
    assert hemisphere_dms(-33.5, positive="N", negative="S") == "S 33° 30' 0''"
    assert hemisphere_dms(33.5, positive="N", negative="S") == "N 33° 30' 0''"


@pytest.mark.parametrize("value", [0.0, 45.5, -89.999, 179.999])
@pytest.mark.parametrize("places", [0, 3])
def test_format_then_parse_round_trip(value, places):
    text = hemisphere_dms(value, positive="N", negative="S", decimal_places=places)
    # One unit in the last printed seconds digit, in degrees.
    tolerance = 1 / 3600 / 10**places
    assert parse_dms(text) == pytest.approx(value, abs=tolerance)
