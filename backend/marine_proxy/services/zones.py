"""Allow-list validation for marine zone identifiers."""
from __future__ import annotations

from typing import Iterable


class ZoneValidator:
    """Check candidate zone ids against a closed catalogue of known zones."""

    def __init__(self, zones: Iterable[str]) -> None:
        self._zones = frozenset(zone.upper() for zone in zones)

    @property
    def zones(self) -> frozenset[str]:
        return self._zones

    def validate(self, candidate: object) -> bool:
        """Return True when ``candidate`` names a catalogued zone, in any case."""

        if not candidate or not isinstance(candidate, str):
            return False
        return candidate.upper() in self._zones
