"""Terrain profile and up/flat/down split of moving time and distance."""
from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from ..core.processing import PreparedStream
from ..models.results import GradeData, GradeProfile, UpFlatDown
from ..utils.config import AnalysisConfig, GradeSettings, get_config
from .statistics import summarize

logger = logging.getLogger(__name__)


def classify_grade_profile(avg_absolute_grade: float, variance: float, settings: GradeSettings) -> GradeProfile:
    """Map average |grade| and grade variance onto FLAT < ROLLING < HILLY < MOUNTAINOUS."""
    if avg_absolute_grade < settings.flat_max_avg_abs_grade and variance < settings.flat_max_variance:
        return GradeProfile.FLAT
    if avg_absolute_grade < settings.rolling_max_avg_abs_grade and variance < settings.rolling_max_variance:
        return GradeProfile.ROLLING
    if (avg_absolute_grade >= settings.mountainous_min_avg_abs_grade
            and variance >= settings.mountainous_min_variance):
        return GradeProfile.MOUNTAINOUS
    return GradeProfile.HILLY


def _split(values: pd.Series, up: pd.Series, down: pd.Series) -> UpFlatDown:
    flat = ~(up | down)
    return UpFlatDown(
        up=float(values[up].sum()),
        flat=float(values[flat].sum()),
        down=float(values[down].sum()),
        total=float(values.sum()),
    )


def _avg_speed_kph(distance_km: Optional[float], seconds: Optional[float]) -> Optional[float]:
    if distance_km is None or not seconds:
        return None
    return distance_km / seconds * 3600.0


def compute_grade_data(prepared: PreparedStream, is_trainer: bool = False,
                       config: Optional[AnalysisConfig] = None) -> Optional[GradeData]:
    config = config or get_config()
    settings = config.grade

    if is_trainer or not prepared.has("grade_smooth") or not prepared.has_time:
        return None

    moving = prepared.moving
    if not (moving & prepared.frame["grade_smooth"].notna()).any():
        return None

    grade = prepared.frame.loc[moving, "grade_smooth"]
    durations = prepared.durations[moving]

    # Statistics skip missing grades; the split counts them as flat
    summary = summarize(grade)
    avg_absolute_grade = float(grade.abs().mean())
    profile = classify_grade_profile(avg_absolute_grade, summary.variance, settings)

    up = grade > settings.climbing_limit
    down = grade < settings.downhill_limit
    seconds = _split(durations, up, down)

    distance_data = None
    move_data = None
    if prepared.has("distance"):
        distance_km = prepared.frame["distance"].diff().fillna(0.0)[moving] / 1000.0
        distance_data = _split(distance_km, up, down)
        move_data = UpFlatDown(
            up=_avg_speed_kph(distance_data.up, seconds.up),
            flat=_avg_speed_kph(distance_data.flat, seconds.flat),
            down=_avg_speed_kph(distance_data.down, seconds.down),
            total=_avg_speed_kph(distance_data.total, seconds.total),
        )

    logger.debug(f"Grade profile {profile.value}: up {seconds.up:.0f}s, flat {seconds.flat:.0f}s, down {seconds.down:.0f}s")

    return GradeData(
        avg_grade=summary.mean,
        avg_absolute_grade=avg_absolute_grade,
        lower_quartile_grade=summary.lower_quartile,
        median_grade=summary.median,
        upper_quartile_grade=summary.upper_quartile,
        variance_grade=summary.variance,
        standard_deviation_grade=summary.standard_deviation,
        grade_profile=profile,
        up_flat_down_in_seconds=seconds,
        up_flat_down_move_data=move_data,
        up_flat_down_distance_data=distance_data,
    )
