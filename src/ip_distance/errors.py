"""Exceptions raised while resolving locations."""

from __future__ import annotations


class IpDistanceError(Exception):
    """Base class for every failure the CLI reports."""


class HostLookupError(IpDistanceError, LookupError):
    """Raised when a hostname cannot be resolved to an IPv4 address."""

    def __init__(self, hostname: str, reason: str):
        self.hostname = hostname
        super().__init__(f"could not resolve {hostname!r}: {reason}")


class NetworkError(IpDistanceError):
    """Raised on transport-level failures talking to the geolocation service."""


class ParseError(IpDistanceError):
    """Raised when the service response is not a JSON object."""


class DataError(IpDistanceError):
    """Raised when a location record lacks usable coordinates."""
