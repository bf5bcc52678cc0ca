"""Speed and pace sections computed from the moving samples."""
from __future__ import annotations

from typing import Optional, Tuple

from ..core.processing import PreparedStream
from ..models.results import PaceData, SpeedData
from ..models.zones import ZoneSet
from .statistics import summarize, time_weighted_mean
from .zones import distribute_in_zones

MPS_TO_KPH = 3.6


def convert_speed_to_pace(speed_kph: Optional[float]) -> Optional[float]:
    """Seconds per km for a speed in km/h; None when not moving."""
    if speed_kph is None or speed_kph <= 0:
        return None
    return 3600.0 / speed_kph


def compute_movement_data(prepared: PreparedStream, speed_zones: Optional[ZoneSet] = None,
                          pace_zones: Optional[ZoneSet] = None) -> Tuple[Optional[SpeedData], Optional[PaceData]]:
    """Return (speed_data, pace_data), both None without moving speed samples."""
    if not prepared.has("velocity_smooth") or not prepared.has_time:
        return None, None

    moving = prepared.moving & prepared.frame["velocity_smooth"].notna()
    if not moving.any():
        return None, None

    speed_kph = prepared.frame.loc[moving, "velocity_smooth"] * MPS_TO_KPH
    durations = prepared.durations[moving]

    genuine_avg_speed = time_weighted_mean(speed_kph, durations)
    summary = summarize(speed_kph)
    pace = convert_speed_to_pace(genuine_avg_speed)
    avg_pace = int(round(pace)) if pace is not None else None

    speed_distribution = None
    pace_distribution = None
    if speed_zones:
        speed_distribution = distribute_in_zones(speed_kph, durations, speed_zones)
    if pace_zones:
        # Stopped trainer samples have no pace
        in_motion = speed_kph > 0
        pace_distribution = distribute_in_zones(3600.0 / speed_kph[in_motion], durations[in_motion], pace_zones)

    total_avg_speed = None
    if prepared.move_ratio is not None:
        total_avg_speed = genuine_avg_speed * prepared.move_ratio

    speed_data = SpeedData(
        genuine_avg_speed=genuine_avg_speed,
        total_avg_speed=total_avg_speed,
        max_speed=float(speed_kph.max()),
        avg_pace=avg_pace,
        lower_quartile_speed=summary.lower_quartile,
        median_speed=summary.median,
        upper_quartile_speed=summary.upper_quartile,
        variance_speed=summary.variance,
        standard_deviation_speed=summary.standard_deviation,
        speed_zones=speed_distribution,
    )

    # Lower quartile pace is the pace of the lower quartile speed (the slower one)
    pace_data = PaceData(
        avg_pace=avg_pace,
        lower_quartile_pace=convert_speed_to_pace(summary.lower_quartile),
        median_pace=convert_speed_to_pace(summary.median),
        upper_quartile_pace=convert_speed_to_pace(summary.upper_quartile),
        variance_pace=convert_speed_to_pace(summary.variance),
        pace_zones=pace_distribution,
    )

    return speed_data, pace_data
