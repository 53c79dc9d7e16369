"""Data models for routes and map regions."""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


class Coordinate(NamedTuple):
    """A WGS84 point; unpacks and compares like a (lat, lon) tuple."""

    latitude: float
    longitude: float

    def as_dict(self) -> dict:
        """Return the {latitude, longitude} record expected by map overlays."""
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass
class Region:
    """Map viewport centred on a point, sized in degrees."""

    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a point lies inside the viewport."""
        return (
            abs(lat - self.latitude) <= self.latitude_delta / 2
            and abs(lon - self.longitude) <= self.longitude_delta / 2
        )


@dataclass
class DirectionsResult:
    """A route returned by the Directions API, decoded."""

    coordinates: List[Coordinate]
    encoded_polyline: str
    distance_text: str = ""
    duration_text: str = ""
    distance_meters: Optional[int] = None
    duration_seconds: Optional[int] = None
    start_address: str = ""
    end_address: str = ""
    warnings: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"DirectionsResult(points={len(self.coordinates)}, "
            f"distance='{self.distance_text}', duration='{self.duration_text}')"
        )

    @property
    def start(self) -> Optional[Coordinate]:
        return self.coordinates[0] if self.coordinates else None

    @property
    def end(self) -> Optional[Coordinate]:
        return self.coordinates[-1] if self.coordinates else None
