"""
Module: maps.launcher

Purpose:
    Turn a RouteRequest into a Google Maps directions URL and hand it to
    the platform browser. Fire-and-forget: nothing is returned to the quiz.

Key Functions:
    - build_route_url(): Build the directions URL

Key Classes:
    - MapLauncher: Builds and opens directions URLs

Dependencies:
    - urllib.parse (std)
    - webbrowser (std)

Used By:
    - station_quiz.gui.main_window: Route button
"""

from __future__ import annotations

import logging
import webbrowser
from typing import Callable
from urllib.parse import quote

from station_quiz.core.models import RouteRequest

logger = logging.getLogger(__name__)

MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1"
DEFAULT_STATION_SUFFIX = "駅"

UrlOpener = Callable[[str], bool]


def build_route_url(request: RouteRequest, station_suffix: str = DEFAULT_STATION_SUFFIX) -> str:
    """
    Build a Google Maps directions URL between two stations.

    Each name gets the station suffix so Maps resolves the station rather
    than a same-named district, then is percent-encoded as UTF-8.

    Example:
        >>> build_route_url(RouteRequest("新宿", "渋谷"))
        'https://www.google.com/maps/dir/?api=1&origin=%E6%96%B0%E5%AE%BF%E9%A7%85&destination=%E6%B8%8B%E8%B0%B7%E9%A7%85'
    """
    origin = quote(f"{request.origin}{station_suffix}", safe="")
    destination = quote(f"{request.destination}{station_suffix}", safe="")
    return f"{MAPS_DIRECTIONS_URL}&origin={origin}&destination={destination}"


class MapLauncher:
    """
    Opens directions for a RouteRequest.

    Args:
        opener: Callable taking a URL, returning False if nothing could open it
            (webbrowser.open by default)
        station_suffix: Qualifier appended to each station name
    """

    def __init__(
        self,
        opener: UrlOpener = webbrowser.open,
        station_suffix: str = DEFAULT_STATION_SUFFIX,
    ) -> None:
        self._opener = opener
        self.station_suffix = station_suffix

    def launch(self, request: RouteRequest) -> bool:
        """
        Open the directions URL.

        Returns:
            True if the opener accepted the URL
        """
        url = build_route_url(request, self.station_suffix)
        logger.info(f"Opening route {request.origin} -> {request.destination}")
        opened = bool(self._opener(url))
        if not opened:
            logger.warning(f"No browser available to open {url}")
        return opened
