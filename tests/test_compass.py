import pytest

from navroute.core.compass import heading_from_magnetometer, compass_rotation


@pytest.mark.parametrize("x, y, expected", [
    (1.0, 0.0, 0),
    (0.0, 1.0, 90),
    (-1.0, 0.0, 180),
    (0.0, -1.0, 270),
    (1.0, 1.0, 45),
    (1.0, -1.0, 315),
])
def test_heading_cardinal_directions(x, y, expected):
    assert heading_from_magnetometer(x, y) == expected


def test_heading_rounds_to_whole_degrees():
    # atan2(0.5, 1) is about 26.57 degrees
    assert heading_from_magnetometer(1.0, 0.5) == 27


def test_heading_just_below_north_folds_to_zero():
    assert heading_from_magnetometer(1.0, -1e-9) == 0


def test_heading_always_in_range():
    for x in (-30.0, -1.0, 0.5, 12.0):
        for y in (-25.0, -0.1, 0.0, 3.0):
            assert 0 <= heading_from_magnetometer(x, y) < 360


@pytest.mark.parametrize("heading, expected", [(0, 0), (90, 270), (180, 180), (359, 1)])
def test_compass_rotation(heading, expected):
    assert compass_rotation(heading) == expected
