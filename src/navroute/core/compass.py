"""Compass heading from magnetometer readings."""

import math

# Sampling interval the heading listener is registered with
MAGNETOMETER_UPDATE_INTERVAL_MS = 100


def heading_from_magnetometer(x: float, y: float) -> int:
    """
    Convert a magnetometer sample to a whole-degree heading.

    Args:
        x: Magnetic field along the device x axis
        y: Magnetic field along the device y axis

    Returns:
        Heading in degrees, 0 <= heading < 360
    """
    angle = math.degrees(math.atan2(y, x))
    if angle < 0:
        angle += 360

    # Round half up, then fold 360 back onto north
    return int(math.floor(angle + 0.5)) % 360


def compass_rotation(heading: int) -> int:
    """Rotation in degrees to apply to a compass icon so it points north."""
    return (360 - heading) % 360
