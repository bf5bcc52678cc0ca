"""Heart-rate statistics and Banister TRIMP training load."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..core.processing import PreparedStream
from ..models.athlete import AthleteSettings, Gender
from ..models.results import HeartRateData
from ..models.zones import ZoneSet
from ..utils.config import AnalysisConfig, HeartRateSettings, get_config
from .statistics import summarize
from .zones import distribute_in_zones

logger = logging.getLogger(__name__)


def heart_rate_reserve(heart_rate, rest_hr: float, max_hr: float):
    """Fraction of heart-rate reserve in use, clamped to [0, 1]."""
    return np.clip((heart_rate - rest_hr) / (max_hr - rest_hr), 0.0, 1.0)


def trimp_factor(gender: Optional[Gender], settings: HeartRateSettings) -> float:
    return settings.trimp_factor_men if gender is Gender.MEN else settings.trimp_factor_women


def training_impulse(hrr: pd.Series, durations: pd.Series, factor: float, base: float = 0.64) -> float:
    """Sum of minutes x HRR x base x e^(factor x HRR) over samples."""
    minutes = durations / 60.0
    return float((minutes * hrr * base * np.exp(factor * hrr)).sum())


def compute_heart_rate_data(prepared: PreparedStream, settings: AthleteSettings,
                            zones: Optional[ZoneSet] = None,
                            config: Optional[AnalysisConfig] = None) -> Optional[HeartRateData]:
    config = config or get_config()
    if not prepared.has("heart_rate") or not prepared.has_time:
        return None

    heart_rate = prepared.frame["heart_rate"]
    moving = prepared.moving & heart_rate.notna()
    if not moving.any():
        return None

    hr_moving = heart_rate[moving]
    durations = prepared.durations[moving]
    summary = summarize(hr_moving)
    if summary.mean < 1:
        # Sensor reported zeros only
        return None

    trimp = None
    trimp_per_hour = None
    reserve = None
    reserve_max = None
    if settings.has_heart_rate_range:
        # HR averaged with the previous sample over each sample's duration
        paired_hr = ((heart_rate + heart_rate.shift(1).fillna(heart_rate)) / 2.0)[moving]
        paired_hrr = heart_rate_reserve(paired_hr, settings.rest_hr, settings.max_hr)
        trimp = training_impulse(
            paired_hrr, durations,
            factor=trimp_factor(settings.gender, config.heart_rate),
            base=config.heart_rate.trimp_base,
        )
        moving_hours = float(durations.sum()) / 3600.0
        trimp_per_hour = trimp / moving_hours if moving_hours > 0 else None

        hrr_summary = summarize(heart_rate_reserve(hr_moving, settings.rest_hr, settings.max_hr))
        reserve = hrr_summary.mean * 100.0
        reserve_max = float(heart_rate_reserve(hr_moving.max(), settings.rest_hr, settings.max_hr)) * 100.0
    else:
        logger.debug("Rest/max heart rate not configured; TRIMP skipped")

    heart_rate_zones = None
    if zones:
        heart_rate_zones = distribute_in_zones(hr_moving, durations, zones)

    return HeartRateData(
        trimp=trimp,
        trimp_per_hour=trimp_per_hour,
        average_heart_rate=summary.mean,
        max_heart_rate=float(hr_moving.max()),
        lower_quartile_heart_rate=summary.lower_quartile,
        median_heart_rate=summary.median,
        upper_quartile_heart_rate=summary.upper_quartile,
        activity_heart_rate_reserve=reserve,
        activity_heart_rate_reserve_max=reserve_max,
        heart_rate_zones=heart_rate_zones,
    )
