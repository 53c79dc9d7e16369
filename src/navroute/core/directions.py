"""Google Directions API client."""

import logging
from typing import Dict, Optional, Tuple, Union

import requests

from .config import Config
from .models import DirectionsResult
from .polyline import DEFAULT_PRECISION, decode

logger = logging.getLogger(__name__)

# A (lat, lng) pair or a Places "details" payload with geometry.location
Location = Union[Tuple[float, float], Dict]


class DirectionsError(RuntimeError):
    """Raised when the Directions API cannot be reached or answers with an error."""


class NoRouteFoundError(DirectionsError):
    """Raised when the Directions API answers without a usable route."""

    def __init__(self, status: str, message: str = ""):
        detail = f": {message}" if message else ""
        super().__init__(f"No route found (status {status}){detail}")
        self.status = status


def location_to_param(location: Location) -> str:
    """
    Format a location as the "lat,lng" string the API expects.

    Args:
        location: (lat, lng) tuple or Places details dict

    Returns:
        "lat,lng" string
    """
    if isinstance(location, dict):
        try:
            loc = location["geometry"]["location"]
            lat, lng = loc["lat"], loc["lng"]
        except (KeyError, TypeError):
            raise ValueError(f"Place details without geometry.location: {location!r}")
    else:
        lat, lng = location
    return f"{lat},{lng}"


def parse_directions_response(data: Dict,
                              precision: int = DEFAULT_PRECISION) -> DirectionsResult:
    """
    Turn a Directions API JSON payload into a decoded route.

    Args:
        data: Parsed JSON response
        precision: Polyline precision

    Returns:
        DirectionsResult for the first route

    Raises:
        NoRouteFoundError: If the status is not OK or no route is present
        MalformedInputError: If the route polyline cannot be decoded
    """
    status = data.get("status", "OK")
    routes = data.get("routes") or []

    if status != "OK" or not routes:
        raise NoRouteFoundError(status, data.get("error_message", ""))

    route = routes[0]
    encoded = (route.get("overview_polyline") or {}).get("points") or ""
    coordinates = decode(encoded, precision=precision)

    result = DirectionsResult(
        coordinates=coordinates,
        encoded_polyline=encoded,
        warnings=list(route.get("warnings") or []),
    )

    legs = route.get("legs") or []
    if legs:
        leg = legs[0]
        distance = leg.get("distance") or {}
        duration = leg.get("duration") or {}
        result.distance_text = distance.get("text", "")
        result.distance_meters = distance.get("value")
        result.duration_text = duration.get("text", "")
        result.duration_seconds = duration.get("value")
        result.start_address = leg.get("start_address", "")
        result.end_address = leg.get("end_address", "")

    return result


class DirectionsClient:
    """Fetch driving routes from the Google Directions API."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: Optional[int] = None, session: Optional[requests.Session] = None,
                 config: Optional[Config] = None):
        """
        Initialize DirectionsClient.

        Args:
            api_key: Google Maps API key (defaults to config / environment)
            base_url: API root, without the /directions/json suffix
            timeout: Request timeout in seconds
            session: requests session to reuse (owned by the caller)
            config: Configuration object (uses defaults if None)
        """
        self.config = config or Config()
        self.api_key = api_key or self.config.require_api_key()
        self.base_url = (base_url or self.config.base_url).rstrip("/")
        self.timeout = timeout or self.config.timeout
        self.session = session or requests.Session()

    def get_directions(self, origin: Optional[Location], destination: Optional[Location],
                       mode: Optional[str] = None,
                       language: Optional[str] = None) -> DirectionsResult:
        """
        Fetch and decode the route between two locations.

        Args:
            origin: Start location
            destination: End location
            mode: Travel mode (default from config: driving)
            language: Language of distance/duration texts

        Returns:
            DirectionsResult
        """
        if not origin or not destination:
            raise ValueError("Both origin and destination are required")

        params = {
            "origin": location_to_param(origin),
            "destination": location_to_param(destination),
            "mode": mode or self.config.mode,
            "language": language or self.config.language,
            "key": self.api_key,
        }
        url = f"{self.base_url}/directions/json"

        logger.info(
            "Requesting directions %s -> %s (%s)",
            params["origin"], params["destination"], params["mode"]
        )

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error("Directions request failed: %s", e)
            raise DirectionsError(f"Directions request failed: {e}") from e
        except ValueError as e:
            raise DirectionsError(f"Directions API returned invalid JSON: {e}") from e

        result = parse_directions_response(data, precision=self.config.precision)
        logger.info(
            "Route decoded: %d points, %s, %s",
            len(result.coordinates), result.distance_text, result.duration_text
        )
        return result
