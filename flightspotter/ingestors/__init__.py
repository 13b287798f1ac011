"""Upstream data ingestors for Flight Spotter."""

from .adsb import FeedResult, OpenSkyIngestor, bounding_box, decode_state_vector
from .photos import PhotoIngestor
from .routes import RouteIngestor
from .weather import WeatherIngestor

__all__ = [
    "FeedResult",
    "OpenSkyIngestor",
    "PhotoIngestor",
    "RouteIngestor",
    "WeatherIngestor",
    "bounding_box",
    "decode_state_vector",
]
