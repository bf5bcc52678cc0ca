"""Input and result models of the analysis core."""

from .stream import ActivityStream
from .athlete import AthleteSettings, Gender
from .stats_map import StatsMap
from .zones import Zone, ZoneSet, validate_zones
from .results import (
    AnalysisResult,
    SpeedData,
    PaceData,
    PowerData,
    PowerSource,
    HeartRateData,
    CadenceData,
    GradeData,
    GradeProfile,
    UpFlatDown,
    ElevationData,
    ZoneTime,
    ZoneDistribution,
)

__all__ = [
    # Inputs
    "ActivityStream",
    "AthleteSettings",
    "Gender",
    "StatsMap",
    "Zone",
    "ZoneSet",
    "validate_zones",

    # Results
    "AnalysisResult",
    "SpeedData",
    "PaceData",
    "PowerData",
    "PowerSource",
    "HeartRateData",
    "CadenceData",
    "GradeData",
    "GradeProfile",
    "UpFlatDown",
    "ElevationData",
    "ZoneTime",
    "ZoneDistribution",
]
