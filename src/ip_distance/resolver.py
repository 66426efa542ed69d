"""Resolve hostnames and IP addresses to location records."""

from __future__ import annotations

import asyncio
import logging
import re
import socket
from typing import Optional

from ip_distance.clients.ipinfo_client import IpInfoClient
from ip_distance.errors import HostLookupError
from ip_distance.geo import haversine_km
from ip_distance.models import LocationRecord

logger = logging.getLogger(__name__)

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_RE = re.compile(r"\.".join([_OCTET] * 4))


def is_ipv4(identifier: str) -> bool:
    """True if the whole string is a dotted-quad IPv4 literal (octets 0-255)."""
    return IPV4_RE.fullmatch(identifier) is not None


async def lookup_host(hostname: str) -> str:
    """Forward DNS lookup: return the first IPv4 address for ``hostname``."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(hostname, None, family=socket.AF_INET, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise HostLookupError(hostname, str(exc)) from exc
    if not infos:
        raise HostLookupError(hostname, "no IPv4 address")

    ip = infos[0][4][0]
    logger.debug("%s resolved to %s", hostname, ip)
    return ip


async def resolve(identifier: Optional[str], client: IpInfoClient) -> LocationRecord:
    """Look up location data for an IP, a hostname, or (if empty) the caller.

    Raises:
        HostLookupError: DNS lookup failed; the service is not queried.
        NetworkError: the HTTP request failed.
        ParseError: the response body is not a JSON object.
    """
    if not identifier:
        return await client.fetch()
    if is_ipv4(identifier):
        return await client.fetch(identifier)

    ip = await lookup_host(identifier)
    return await client.fetch(ip)


async def find_distance(
    loc1: Optional[str], loc2: Optional[str], client: IpInfoClient,
) -> float:
    """Distance in km between two locations (empty means the caller's own IP).

    Both lookups run concurrently. If both fail, the error for ``loc1`` wins.
    """
    results = await asyncio.gather(
        resolve(loc1, client), resolve(loc2, client), return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result

    rec1, rec2 = results
    lat1, lon1 = rec1.coordinates
    lat2, lon2 = rec2.coordinates
    return haversine_km(lat1, lon1, lat2, lon2)
