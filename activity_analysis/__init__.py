"""
Activity Analysis - statistical analysis of fitness activity streams.

Turns a recorded sensor stream (speed, heart rate, power, cadence, altitude,
grade) plus athlete settings into speed/pace, power, heart-rate load,
cadence, terrain and elevation sections, estimating running power when no
power meter is present.
"""

from .core.errors import (
    ActivityAnalysisError,
    InvalidBoundsError,
    InvalidStreamError,
    ZoneConfigurationError,
    ConfigurationError,
)
from .main import ActivityComputer, compute_activity
from .metrics.running_power import estimate_running_power, create_running_power_estimation_stream
from .models import (
    ActivityStream,
    AthleteSettings,
    Gender,
    StatsMap,
    Zone,
    AnalysisResult,
    PowerSource,
    GradeProfile,
)
from .utils.config import AnalysisConfig, get_config

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "ActivityComputer",
    "compute_activity",
    "estimate_running_power",
    "create_running_power_estimation_stream",

    # Models
    "ActivityStream",
    "AthleteSettings",
    "Gender",
    "StatsMap",
    "Zone",
    "AnalysisResult",
    "PowerSource",
    "GradeProfile",

    # Errors
    "ActivityAnalysisError",
    "InvalidBoundsError",
    "InvalidStreamError",
    "ZoneConfigurationError",
    "ConfigurationError",

    # Configuration
    "AnalysisConfig",
    "get_config",
]
