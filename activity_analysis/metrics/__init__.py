"""Per-channel analyzers of a prepared activity stream."""

from .statistics import DistributionSummary, summarize, time_weighted_mean
from .zones import distribute_in_zones
from .elevation import accumulate_elevation, compute_elevation_data
from .grade import classify_grade_profile, compute_grade_data
from .running_power import create_running_power_estimation_stream, estimate_running_power
from .power import PowerChannel, compute_power_data, is_running_activity, resolve_power_channel, weighted_power
from .heart_rate import compute_heart_rate_data, heart_rate_reserve, training_impulse
from .movement import compute_movement_data, convert_speed_to_pace
from .cadence import compute_cadence_data, crank_revolutions

__all__ = [
    "DistributionSummary",
    "summarize",
    "time_weighted_mean",
    "distribute_in_zones",
    "accumulate_elevation",
    "compute_elevation_data",
    "classify_grade_profile",
    "compute_grade_data",
    "create_running_power_estimation_stream",
    "estimate_running_power",
    "PowerChannel",
    "compute_power_data",
    "is_running_activity",
    "resolve_power_channel",
    "weighted_power",
    "compute_heart_rate_data",
    "heart_rate_reserve",
    "training_impulse",
    "compute_movement_data",
    "convert_speed_to_pace",
    "compute_cadence_data",
    "crank_revolutions",
]
