import pytest

from geoclass.core.geo import SECTOR_TESTS, orientation_for_angle, sector_index


def test_sectors_partition_the_circle():
    # Sweep -180..180 in 0.1° steps: every angle falls in exactly one sector.
    for tenth in range(-1800, 1801):
        angle = tenth / 10
        matches = [i for i, test in enumerate(SECTOR_TESTS) if test(angle)]
        assert len(matches) == 1, (angle, matches)


@pytest.mark.parametrize(
    "angle,expected",
    [
        # Upper bounds are inclusive, lower bounds exclusive.
        (22.5, "E"),
        (22.500001, "NE"),
        (67.5, "NE"),
        (67.500001, "N"),
        (112.5, "N"),
        (112.500001, "NW"),
        (157.5, "NW"),
        (157.500001, "W"),
        (180.0, "W"),
        (-22.5, "SE"),
        (-22.499999, "E"),
        (-67.5, "S"),
        (-67.499999, "SE"),
        (-112.5, "SW"),
        (-112.499999, "S"),
        (-157.5, "W"),
        (-157.499999, "SW"),
        (-180.0, "W"),
        (0.0, "E"),
        (90.0, "N"),
        (-90.0, "S"),
    ],
)
def test_sector_boundaries(angle, expected):
    assert orientation_for_angle(angle) == expected


def test_sector_index_order_matches_compass():
    assert [sector_index(a) for a in (90, 45, 0, -45, -90, -135, 180, 135)] == list(range(8))


def test_nan_angle_has_no_sector():
    assert sector_index(float("nan")) is None
    assert orientation_for_angle(float("nan")) == ""
