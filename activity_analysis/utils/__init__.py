"""Configuration constants for the analysis core."""

from .config import (
    AnalysisConfig,
    ProcessingSettings,
    ElevationSettings,
    GradeSettings,
    PowerSettings,
    HeartRateSettings,
    RunningPowerSettings,
    CadenceSettings,
    get_config,
)

__all__ = [
    "AnalysisConfig",
    "ProcessingSettings",
    "ElevationSettings",
    "GradeSettings",
    "PowerSettings",
    "HeartRateSettings",
    "RunningPowerSettings",
    "CadenceSettings",
    "get_config",
]
