"""Cadence section: pedalling/stepping share, averages and crank revolutions."""
from __future__ import annotations

from typing import Optional

from ..core.processing import PreparedStream, recorded_durations
from ..models.results import CadenceData
from ..models.zones import ZoneSet
from ..utils.config import AnalysisConfig, get_config
from .statistics import summarize, time_weighted_mean
from .zones import distribute_in_zones


def crank_revolutions(prepared: PreparedStream, config: Optional[AnalysisConfig] = None) -> float:
    """Trapezoidal integral of cadence (rpm) over recorded time, pauses excluded."""
    cadence = prepared.frame["cadence"].fillna(0.0)
    per_second = (cadence + cadence.shift(1).fillna(cadence)) / 2.0 / 60.0
    return float((per_second * recorded_durations(prepared, config)).sum())


def compute_cadence_data(prepared: PreparedStream, zones: Optional[ZoneSet] = None,
                         config: Optional[AnalysisConfig] = None) -> Optional[CadenceData]:
    config = config or get_config()
    if not prepared.has("cadence") or not prepared.has_time:
        return None

    cadence = prepared.frame["cadence"]
    moving = prepared.moving
    active = moving & (cadence > config.cadence.active_threshold_rpm)

    moving_count = int(moving.sum())
    active_cadence = cadence[active]
    active_durations = prepared.durations[active]
    summary = summarize(active_cadence)

    cadence_zones = None
    if zones:
        cadence_zones = distribute_in_zones(active_cadence, active_durations, zones)

    return CadenceData(
        cadence_percentage_moving=(int(active.sum()) / moving_count * 100.0) if moving_count else None,
        cadence_time_moving=float(active_durations.sum()),
        average_cadence_moving=time_weighted_mean(active_cadence, active_durations),
        variance_cadence=summary.variance,
        standard_deviation_cadence=summary.standard_deviation,
        crank_revolutions=crank_revolutions(prepared, config),
        lower_quartile_cadence=summary.lower_quartile,
        median_cadence=summary.median,
        upper_quartile_cadence=summary.upper_quartile,
        cadence_zones=cadence_zones,
    )
