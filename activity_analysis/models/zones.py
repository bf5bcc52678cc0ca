"""Zone boundary model and its validation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from ..core.errors import ZoneConfigurationError


@dataclass(frozen=True)
class Zone:
    """Half-open interval [lower, upper) of a channel value."""
    lower: float
    upper: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Zone":
        try:
            return cls(lower=float(data["from"]), upper=float(data["to"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ZoneConfigurationError(f"Zone needs numeric 'from' and 'to': {data!r}") from e

    def to_dict(self) -> dict:
        return {"from": self.lower, "to": self.upper}


ZoneSet = Tuple[Zone, ...]
ZoneLike = Union[Zone, Mapping[str, Any]]


def validate_zones(raw: Optional[Iterable[ZoneLike]]) -> Optional[ZoneSet]:
    """Normalize athlete-entered zones into an ascending, contiguous ZoneSet.

    Returns None when no zones are configured.
    """
    if raw is None:
        return None

    zones = tuple(z if isinstance(z, Zone) else Zone.from_dict(z) for z in raw)
    if not zones:
        return None

    for zone in zones:
        if not zone.lower < zone.upper:
            raise ZoneConfigurationError(f"Zone lower bound must be below its upper bound: {zone}")

    for previous, current in zip(zones, zones[1:]):
        if current.lower != previous.upper:
            raise ZoneConfigurationError(
                f"Zones must be ascending and contiguous: {previous} followed by {current}"
            )

    return zones
