"""Route exporters."""

from .route import export_route_gpx, export_route_csv, route_to_dataframe

__all__ = ["export_route_gpx", "export_route_csv", "route_to_dataframe"]
