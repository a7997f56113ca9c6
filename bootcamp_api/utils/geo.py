"""
Spherical distance helpers for radius queries.

MongoDB's $centerSphere takes its radius in radians, so a linear distance is
divided by the Earth's radius expressed in the same unit.
"""
from typing import Dict

EARTH_RADIUS: Dict[str, float] = {
    "mi": 3963.0,
    "km": 6378.0,
}
DEFAULT_UNIT = "mi"


def distance_to_radians(distance: float, unit: str = DEFAULT_UNIT) -> float:
    """
    Convert a distance along the Earth's surface to an angular radius

    Args:
        distance: Distance in `unit`
        unit: "mi" or "km"

    Returns:
        Angular radius in radians

    Raises:
        ValueError: If the unit is unknown or the distance is negative
    """
    if unit not in EARTH_RADIUS:
        raise ValueError(f"Unknown distance unit '{unit}'. Use one of: {', '.join(EARTH_RADIUS)}")
    if distance < 0:
        raise ValueError("Distance must not be negative")
    return distance / EARTH_RADIUS[unit]
