"""Map deep-linking."""

from .launcher import MapLauncher, build_route_url

__all__ = ["MapLauncher", "build_route_url"]
