"""
Configuration module for the activity analysis core.
Model coefficients and thresholds shared read-only by every computation.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcessingSettings:
    """Moving/paused classification."""
    moving_speed_threshold_mps: float = 0.1  # Samples at or below are stopped
    max_sample_gap_s: float = 60.0  # Larger time deltas are recording pauses


@dataclass(frozen=True)
class ElevationSettings:
    """Altitude denoising."""
    noise_threshold_m: float = 0.5  # Altitude changes smaller than this are jitter


@dataclass(frozen=True)
class GradeSettings:
    """Terrain classification thresholds (grade in %)."""
    climbing_limit: float = 1.6
    downhill_limit: float = -1.6
    flat_max_avg_abs_grade: float = 1.0
    flat_max_variance: float = 2.0
    rolling_max_avg_abs_grade: float = 1.5
    rolling_max_variance: float = 5.0
    mountainous_min_avg_abs_grade: float = 4.0
    mountainous_min_variance: float = 16.0


@dataclass(frozen=True)
class PowerSettings:
    """Weighted power computation."""
    rolling_window_s: int = 30


@dataclass(frozen=True)
class HeartRateSettings:
    """Banister TRIMP constants."""
    trimp_base: float = 0.64
    trimp_factor_men: float = 1.92
    trimp_factor_women: float = 1.67


@dataclass(frozen=True)
class RunningPowerSettings:
    """Cost-of-running model used when no power meter is present."""
    cost_of_running_j_per_kg_m: float = 4.184  # 1 kcal/kg/km
    mechanical_efficiency: float = 0.225


@dataclass(frozen=True)
class CadenceSettings:
    """Cadence activity detection."""
    active_threshold_rpm: float = 35.0


@dataclass(frozen=True)
class AnalysisConfig:
    """Main configuration container for the analysis core."""
    processing: ProcessingSettings = field(default_factory=ProcessingSettings)
    elevation: ElevationSettings = field(default_factory=ElevationSettings)
    grade: GradeSettings = field(default_factory=GradeSettings)
    power: PowerSettings = field(default_factory=PowerSettings)
    heart_rate: HeartRateSettings = field(default_factory=HeartRateSettings)
    running_power: RunningPowerSettings = field(default_factory=RunningPowerSettings)
    cadence: CadenceSettings = field(default_factory=CadenceSettings)

    @property
    def running_power_coefficient(self) -> float:
        """Watts per (kg * m/s) produced by the running model."""
        return self.running_power.cost_of_running_j_per_kg_m * self.running_power.mechanical_efficiency


# Global configuration instance
config = AnalysisConfig()


def get_config() -> AnalysisConfig:
    """Get the global configuration instance."""
    return config
