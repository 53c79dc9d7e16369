"""navroute - Decode and encode route polylines, fetch directions."""

__version__ = "0.1.0"

# Expose main entry points for programmatic use
from .core import (
    Config,
    Coordinate,
    DirectionsClient,
    DirectionsError,
    MalformedInputError,
    NoRouteFoundError,
    decode,
    encode,
    heading_from_magnetometer,
)

__all__ = [
    "__version__",
    "Config",
    "Coordinate",
    "DirectionsClient",
    "DirectionsError",
    "MalformedInputError",
    "NoRouteFoundError",
    "decode",
    "encode",
    "heading_from_magnetometer",
]
