"""GPX and CSV exporters for decoded routes."""

import logging
import pandas as pd
import gpxpy.gpx
from pathlib import Path
from datetime import datetime
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def export_route_gpx(points: Sequence[Tuple[float, float]], output_file: str,
                     name: Optional[str] = None) -> str:
    """
    Export a route as a single-segment GPX track.

    Args:
        points: Route coordinates as (lat, lon) pairs
        output_file: Output GPX file path
        name: Track name (default: "Route")

    Returns:
        Path to output file
    """
    gpx = gpxpy.gpx.GPX()
    gpx.name = name or "Route"
    gpx.description = f"Decoded route - Generated {datetime.now().strftime('%Y-%m-%d')}"

    track = gpxpy.gpx.GPXTrack(name=gpx.name)
    segment = gpxpy.gpx.GPXTrackSegment()
    for lat, lon in points:
        segment.points.append(gpxpy.gpx.GPXTrackPoint(latitude=lat, longitude=lon))
    track.segments.append(segment)
    gpx.tracks.append(track)

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(gpx.to_xml())

    logger.info("Exported %d track points to %s", len(segment.points), output_path)
    return str(output_path)


def route_to_dataframe(points: Sequence[Tuple[float, float]]) -> pd.DataFrame:
    """Tabulate a route with one latitude/longitude row per point."""
    return pd.DataFrame(list(points), columns=["latitude", "longitude"])


def export_route_csv(points: Sequence[Tuple[float, float]], output_file: str) -> str:
    """
    Export a route as CSV with latitude and longitude columns.

    Args:
        points: Route coordinates as (lat, lon) pairs
        output_file: Output CSV file path

    Returns:
        Path to output file
    """
    df = route_to_dataframe(points)

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    logger.info("Exported %d points to %s", len(df), output_path)
    return str(output_path)
