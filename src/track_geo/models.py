"""Coordinate record shared by the distance, bearing and CLI helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict


@dataclass
class GeoPoint:
    """A single latitude/longitude fix in decimal degrees."""

    latitude: float             # WGS84, nominally [-90, 90]
    longitude: float            # WGS84, nominally [-180, 180]

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> GeoPoint:
        d = json.loads(raw)
        return cls(latitude=float(d["latitude"]), longitude=float(d["longitude"]))

    def validate(self) -> list[str]:
        """Check coordinate ranges. Returns list of error messages (empty = valid).

        Advisory only: the math helpers never call this and accept any float.
        """
        errors: list[str] = []

        if not -90 <= self.latitude <= 90:
            errors.append(f"latitude {self.latitude} out of range [-90, 90]")

        if not -180 <= self.longitude <= 180:
            errors.append(f"longitude {self.longitude} out of range [-180, 180]")

        return errors
