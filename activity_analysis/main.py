"""
Main module for the activity analysis core.
Provides the high-level interface turning a raw stream and athlete settings
into one AnalysisResult.
"""
import logging
import math
from typing import List, Optional, Sequence

from .core.processing import PreparedStream, preprocess_stream
from .metrics.cadence import compute_cadence_data
from .metrics.elevation import compute_elevation_data
from .metrics.grade import compute_grade_data
from .metrics.heart_rate import compute_heart_rate_data
from .metrics.movement import compute_movement_data
from .metrics.power import compute_power_data, is_running_activity, resolve_power_channel
from .metrics import running_power
from .models.athlete import AthleteSettings
from .models.results import AnalysisResult
from .models.stats_map import StatsMap
from .models.stream import ActivityStream
from .utils.config import AnalysisConfig, get_config

logger = logging.getLogger(__name__)


def toughness_score(stats_map: StatsMap, move_ratio: Optional[float]) -> Optional[float]:
    """Provider-aggregate toughness: fourth root of elevation, power, speed and distance, halved."""
    inputs = (stats_map.elevation, stats_map.avg_power, stats_map.average_speed, stats_map.distance, move_ratio)
    if any(value is None for value in inputs):
        return None
    product = (
        stats_map.elevation ** 2
        * stats_map.avg_power
        * stats_map.average_speed ** 2
        * stats_map.distance ** 2
        * move_ratio
    )
    if product < 0:
        return None
    return math.sqrt(math.sqrt(product)) / 2


class ActivityComputer:
    """
    Orchestrates the per-channel analyzers for one activity.
    """

    def __init__(self, activity_type: str, is_trainer: bool, athlete_settings: AthleteSettings,
                 athlete_weight: Optional[float], has_power_meter: bool, stats_map: Optional[StatsMap],
                 stream: ActivityStream, bounds: Optional[Sequence[int]] = None, return_zones: bool = False,
                 config: Optional[AnalysisConfig] = None):
        self.activity_type = activity_type
        self.is_trainer = bool(is_trainer)
        self.athlete_settings = athlete_settings
        self.athlete_weight = float(athlete_weight) if athlete_weight else athlete_settings.weight_kg
        self.has_power_meter = bool(has_power_meter)
        self.stats_map = stats_map or StatsMap()
        self.stream = stream
        self.bounds = bounds
        self.return_zones = bool(return_zones)
        self.config = config or get_config()

    @staticmethod
    def estimate_running_power(weight_kg: float, total_meters: float, total_seconds: float) -> int:
        return running_power.estimate_running_power(weight_kg, total_meters, total_seconds)

    @staticmethod
    def create_running_power_estimation_stream(weight_kg: float, grade_adjusted_distance: Sequence[float],
                                               time: Sequence[float]) -> List[float]:
        return running_power.create_running_power_estimation_stream(weight_kg, grade_adjusted_distance, time)

    def _zones(self, name: str):
        return getattr(self.athlete_settings, name) if self.return_zones else None

    def _power_zones(self):
        if not self.return_zones:
            return None
        if is_running_activity(self.activity_type) and self.athlete_settings.running_power_zones:
            return self.athlete_settings.running_power_zones
        return self.athlete_settings.power_zones

    def compute(self) -> AnalysisResult:
        """
        Run every section and assemble the result.

        Returns:
            AnalysisResult with None for each section whose channel is absent

        Raises:
            InvalidBoundsError: bounds are malformed or inverted after clamping
        """
        # 1. Bound the stream and classify moving samples
        prepared: PreparedStream = preprocess_stream(self.stream, self.bounds, self.is_trainer, self.config)

        # 2. Real, provider-estimated or synthesized running power
        power_channel = resolve_power_channel(
            prepared, self.activity_type, self.has_power_meter, self.athlete_weight, self.config
        )

        # 3. Independent sections
        speed_data, pace_data = compute_movement_data(
            prepared, self._zones("speed_zones"), self._zones("pace_zones")
        )
        power_data = compute_power_data(
            power_channel, prepared, self.athlete_weight, self.athlete_settings.ftp,
            self._power_zones(), self.config
        )
        heart_rate_data = compute_heart_rate_data(
            prepared, self.athlete_settings, self._zones("heart_rate_zones"), self.config
        )
        cadence_data = compute_cadence_data(prepared, self._zones("cadence_zones"), self.config)
        grade_data = compute_grade_data(prepared, self.is_trainer, self.config)
        elevation_data = compute_elevation_data(prepared, self.config)

        result = AnalysisResult(
            move_ratio=prepared.move_ratio,
            toughness_score=toughness_score(self.stats_map, prepared.move_ratio),
            speed_data=speed_data,
            pace_data=pace_data,
            power_data=power_data,
            heart_rate_data=heart_rate_data,
            cadence_data=cadence_data,
            grade_data=grade_data,
            elevation_data=elevation_data,
        )

        computed = [name for name, section in (
            ("speed", speed_data), ("pace", pace_data), ("power", power_data),
            ("heart_rate", heart_rate_data), ("cadence", cadence_data),
            ("grade", grade_data), ("elevation", elevation_data),
        ) if section is not None]
        logger.info(
            f"Computed {self.activity_type} analysis over samples "
            f"{prepared.start_index}..{prepared.end_index}: {', '.join(computed) or 'no sections'}"
        )

        return result


def compute_activity(activity_type: str, athlete_settings: AthleteSettings, stream: ActivityStream,
                     is_trainer: bool = False, has_power_meter: bool = False,
                     stats_map: Optional[StatsMap] = None, bounds: Optional[Sequence[int]] = None,
                     return_zones: bool = False, athlete_weight: Optional[float] = None,
                     config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """
    Convenience function to analyze one activity.

    Args:
        activity_type: Free-form activity type, e.g. "Ride" or "Run"
        athlete_settings: AthleteSettings of the activity owner
        stream: ActivityStream of the activity
        is_trainer: Indoor session; every recorded sample counts as moving
        has_power_meter: Whether the watts channel comes from a power meter
        stats_map: Provider aggregates
        bounds: Optional inclusive [start, end] sample indices
        return_zones: Attach time-in-zone distributions
        athlete_weight: Overrides athlete_settings.weight_kg

    Returns:
        AnalysisResult
    """
    computer = ActivityComputer(
        activity_type, is_trainer, athlete_settings, athlete_weight, has_power_meter,
        stats_map, stream, bounds, return_zones, config,
    )
    return computer.compute()
