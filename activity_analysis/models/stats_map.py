"""Aggregates precomputed by the activity provider; read-only here."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class StatsMap:
    """Provider aggregates feeding the toughness score. Other keys are ignored."""
    distance: Optional[float] = None
    elevation: Optional[float] = None
    avg_power: Optional[float] = None
    average_speed: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "StatsMap":
        if not data:
            return cls()

        def _get(key):
            value = data.get(key)
            return None if value is None else float(value)

        return cls(
            distance=_get("distance"),
            elevation=_get("elevation"),
            avg_power=_get("avgPower"),
            average_speed=_get("averageSpeed"),
        )
