"""
Result models for the activity analysis.
Every section is frozen; AnalysisResult.to_dict() renders the consumer contract.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _serialize(value: Any) -> Any:
    if isinstance(value, _ResultSection):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_serialize(v) for v in value]
    return value


class _ResultSection:
    """Mixin rendering dataclass fields with camelCase (or explicit) keys."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            f.metadata.get("key", _camel_case(f.name)): _serialize(getattr(self, f.name))
            for f in fields(self)
        }


class PowerSource(str, Enum):
    POWER_METER = "power_meter"
    PROVIDER_ESTIMATE = "provider_estimate"
    RUNNING_ESTIMATE = "running_estimate"


class GradeProfile(str, Enum):
    FLAT = "FLAT"
    ROLLING = "ROLLING"
    HILLY = "HILLY"
    MOUNTAINOUS = "MOUNTAINOUS"

    @property
    def rank(self) -> int:
        return list(GradeProfile).index(self)


@dataclass(frozen=True)
class ZoneTime(_ResultSection):
    lower: float = field(metadata={"key": "from"})
    upper: float = field(metadata={"key": "to"})
    seconds: float
    percentage: Optional[float]


@dataclass(frozen=True)
class ZoneDistribution(_ResultSection):
    zones: Tuple[ZoneTime, ...]
    total_seconds: float
    uncovered_seconds: float


@dataclass(frozen=True)
class SpeedData(_ResultSection):
    """Speeds in km/h, pace in seconds per km."""
    genuine_avg_speed: float
    total_avg_speed: Optional[float]
    max_speed: float
    avg_pace: Optional[int]
    lower_quartile_speed: Optional[float]
    median_speed: Optional[float]
    upper_quartile_speed: Optional[float]
    variance_speed: Optional[float]
    standard_deviation_speed: Optional[float]
    speed_zones: Optional[ZoneDistribution] = None


@dataclass(frozen=True)
class PaceData(_ResultSection):
    """Paces in seconds per km."""
    avg_pace: Optional[int]
    lower_quartile_pace: Optional[float]
    median_pace: Optional[float]
    upper_quartile_pace: Optional[float]
    variance_pace: Optional[float]
    pace_zones: Optional[ZoneDistribution] = None


@dataclass(frozen=True)
class PowerData(_ResultSection):
    has_power_meter: bool
    power_source: PowerSource
    avg_watts: float
    avg_watts_per_kg: float
    max_watts: float
    weighted_power: float
    variability_index: Optional[float]
    punch_factor: Optional[float]
    weighted_watts_per_kg: float
    lower_quartile_watts: Optional[float]
    median_watts: Optional[float]
    upper_quartile_watts: Optional[float]
    power_zones: Optional[ZoneDistribution] = None


@dataclass(frozen=True)
class HeartRateData(_ResultSection):
    trimp: Optional[float] = field(metadata={"key": "TRIMP"})
    trimp_per_hour: Optional[float] = field(metadata={"key": "TRIMPPerHour"})
    average_heart_rate: float
    max_heart_rate: float
    lower_quartile_heart_rate: Optional[float]
    median_heart_rate: Optional[float]
    upper_quartile_heart_rate: Optional[float]
    activity_heart_rate_reserve: Optional[float]
    activity_heart_rate_reserve_max: Optional[float]
    heart_rate_zones: Optional[ZoneDistribution] = None


@dataclass(frozen=True)
class CadenceData(_ResultSection):
    cadence_percentage_moving: Optional[float]
    cadence_time_moving: float
    average_cadence_moving: Optional[float]
    variance_cadence: Optional[float]
    standard_deviation_cadence: Optional[float]
    crank_revolutions: float
    lower_quartile_cadence: Optional[float]
    median_cadence: Optional[float]
    upper_quartile_cadence: Optional[float]
    cadence_zones: Optional[ZoneDistribution] = None


@dataclass(frozen=True)
class UpFlatDown(_ResultSection):
    up: Optional[float]
    flat: Optional[float]
    down: Optional[float]
    total: Optional[float]


@dataclass(frozen=True)
class GradeData(_ResultSection):
    """Grades in %, seconds for time buckets, km for distance, km/h for move data."""
    avg_grade: float
    avg_absolute_grade: float
    lower_quartile_grade: Optional[float]
    median_grade: Optional[float]
    upper_quartile_grade: Optional[float]
    variance_grade: Optional[float]
    standard_deviation_grade: Optional[float]
    grade_profile: GradeProfile
    up_flat_down_in_seconds: UpFlatDown
    up_flat_down_move_data: Optional[UpFlatDown]
    up_flat_down_distance_data: Optional[UpFlatDown]


@dataclass(frozen=True)
class ElevationData(_ResultSection):
    avg_elevation: float
    min_elevation: float
    max_elevation: float
    lower_quartile_elevation: Optional[float]
    median_elevation: Optional[float]
    upper_quartile_elevation: Optional[float]
    accumulated_elevation_ascent: float
    accumulated_elevation_descent: float


@dataclass(frozen=True)
class AnalysisResult(_ResultSection):
    """One computation's output; each section is None when its channel is absent."""
    move_ratio: Optional[float] = None
    toughness_score: Optional[float] = None
    speed_data: Optional[SpeedData] = None
    pace_data: Optional[PaceData] = None
    power_data: Optional[PowerData] = None
    heart_rate_data: Optional[HeartRateData] = None
    cadence_data: Optional[CadenceData] = None
    grade_data: Optional[GradeData] = None
    elevation_data: Optional[ElevationData] = None
