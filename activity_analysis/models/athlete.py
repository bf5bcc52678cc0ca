"""Athlete physiological settings."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from ..core.errors import ConfigurationError
from .zones import ZoneSet, validate_zones


class Gender(str, Enum):
    MEN = "men"
    WOMEN = "women"

    @classmethod
    def parse(cls, value: Any) -> Optional["Gender"]:
        if value is None or isinstance(value, Gender):
            return value
        normalized = str(value).strip().lower()
        if normalized in ("men", "man", "male", "m"):
            return cls.MEN
        if normalized in ("women", "woman", "female", "f"):
            return cls.WOMEN
        return None


_ZONE_FIELDS = (
    "heart_rate_zones",
    "power_zones",
    "running_power_zones",
    "cadence_zones",
    "pace_zones",
    "speed_zones",
)

# Keys of the "zones" mapping in the application's user settings
_ZONE_KEYS = {
    "heartRate": "heart_rate_zones",
    "power": "power_zones",
    "runningPower": "running_power_zones",
    "cadence": "cadence_zones",
    "pace": "pace_zones",
    "speed": "speed_zones",
}


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class AthleteSettings:
    """Athlete settings; everything but weight is optional.

    Zone sets are validated on construction (see validate_zones).
    """
    weight_kg: float
    gender: Optional[Gender] = None
    rest_hr: Optional[float] = None
    max_hr: Optional[float] = None
    ftp: Optional[float] = None
    heart_rate_zones: Optional[ZoneSet] = None
    power_zones: Optional[ZoneSet] = None
    running_power_zones: Optional[ZoneSet] = None
    cadence_zones: Optional[ZoneSet] = None
    pace_zones: Optional[ZoneSet] = None
    speed_zones: Optional[ZoneSet] = None

    def __post_init__(self):
        if self.weight_kg is None or not float(self.weight_kg) > 0:
            raise ConfigurationError(f"Athlete weight must be greater than 0, got {self.weight_kg!r}")
        object.__setattr__(self, "weight_kg", float(self.weight_kg))
        object.__setattr__(self, "gender", Gender.parse(self.gender))
        for name in ("rest_hr", "max_hr", "ftp"):
            object.__setattr__(self, name, _optional_float(getattr(self, name)))
        for name in _ZONE_FIELDS:
            object.__setattr__(self, name, validate_zones(getattr(self, name)))

    @property
    def has_heart_rate_range(self) -> bool:
        return self.rest_hr is not None and self.max_hr is not None and self.max_hr > self.rest_hr

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AthleteSettings":
        """Build settings from the application's user settings mapping."""
        zones = data.get("zones") or {}
        kwargs = {field_name: zones.get(key) for key, field_name in _ZONE_KEYS.items()}
        return cls(
            weight_kg=data.get("userWeight"),
            gender=data.get("userGender"),
            rest_hr=data.get("userRestHr"),
            max_hr=data.get("userMaxHr"),
            ftp=data.get("userFTP"),
            **kwargs,
        )
