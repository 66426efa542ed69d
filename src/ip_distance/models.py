"""Data model for geolocation lookups."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from ip_distance.errors import DataError, ParseError


@dataclass
class LocationRecord:
    """Location metadata for one IP address, as returned by the service."""

    ip: Optional[str] = None
    hostname: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal: Optional[str] = None
    country: Optional[str] = None
    loc: Optional[str] = None           # "lat,lon"
    org: Optional[str] = None           # ISP / AS name

    # Everything else the service sent (timezone, readme, bogon, ...)
    extra: dict[str, Any] = field(default_factory=dict)

    # Key order of the original response, used to dump the record as received
    _order: list[str] = field(default_factory=list, repr=False, compare=False)

    @property
    def coordinates(self) -> tuple[float, float]:
        """(latitude, longitude) parsed from ``loc``."""
        if not self.loc:
            raise DataError(f"no coordinates in location record for {self.ip or 'unknown IP'}")
        parts = self.loc.split(",")
        if len(parts) != 2:
            raise DataError(f"malformed coordinates {self.loc!r}")
        try:
            return float(parts[0]), float(parts[1])
        except ValueError as exc:
            raise DataError(f"malformed coordinates {self.loc!r}") from exc

    def to_dict(self) -> dict[str, Any]:
        known = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("extra", "_order")
            and (getattr(self, f.name) is not None or f.name in self._order)
        }
        merged = {**known, **self.extra}
        order = [k for k in self._order if k in merged]
        order += [k for k in merged if k not in order]
        return {k: merged[k] for k in order}

    def to_json(self, indent: Optional[int] = 4) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LocationRecord:
        known_names = {f.name for f in fields(cls)} - {"extra", "_order"}
        known: dict[str, Optional[str]] = {}
        extra: dict[str, Any] = {}
        for key, value in d.items():
            if key in known_names:
                if value is not None and not isinstance(value, str):
                    raise ParseError(f"field {key!r} should be a string, got {type(value).__name__}")
                known[key] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra, _order=list(d))

    @classmethod
    def from_json(cls, raw: str) -> LocationRecord:
        try:
            d = json.loads(raw)
        except ValueError as exc:
            raise ParseError(f"invalid JSON from geolocation service: {exc}") from exc
        if not isinstance(d, dict):
            raise ParseError(f"expected a JSON object, got {type(d).__name__}")
        return cls.from_dict(d)
