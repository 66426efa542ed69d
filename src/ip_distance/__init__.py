"""Geolocate IPs and hostnames and measure the distance between them."""

from ip_distance.clients.ipinfo_client import IpInfoClient
from ip_distance.errors import (
    DataError,
    HostLookupError,
    IpDistanceError,
    NetworkError,
    ParseError,
)
from ip_distance.geo import haversine_km
from ip_distance.models import LocationRecord
from ip_distance.resolver import find_distance, is_ipv4, resolve

__all__ = [
    "DataError",
    "HostLookupError",
    "IpDistanceError",
    "IpInfoClient",
    "LocationRecord",
    "NetworkError",
    "ParseError",
    "find_distance",
    "haversine_km",
    "is_ipv4",
    "resolve",
]
