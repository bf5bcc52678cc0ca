"""Elevation profile and accumulated ascent/descent."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from ..core.processing import PreparedStream
from ..models.results import ElevationData
from ..utils.config import AnalysisConfig, get_config
from .statistics import summarize

logger = logging.getLogger(__name__)


def accumulate_elevation(altitude: Iterable[float], noise_threshold_m: float) -> Tuple[float, float]:
    """Return (ascent, descent) in meters.

    Changes between consecutive samples smaller than the noise threshold are
    treated as jitter and not counted.
    """
    deltas = pd.Series(np.asarray(altitude, dtype=float)).dropna().diff().dropna()
    counted = deltas[deltas.abs() >= noise_threshold_m]
    ascent = counted[counted > 0].sum()
    descent = counted[counted < 0].abs().sum()
    return float(ascent), float(descent)


def compute_elevation_data(prepared: PreparedStream, config: Optional[AnalysisConfig] = None) -> Optional[ElevationData]:
    config = config or get_config()
    if not prepared.has("altitude"):
        return None

    altitude = prepared.frame["altitude"].dropna()
    if altitude.empty:
        return None

    summary = summarize(altitude)
    ascent, descent = accumulate_elevation(altitude, config.elevation.noise_threshold_m)
    logger.debug(f"Elevation: +{ascent:.1f}m / -{descent:.1f}m")

    return ElevationData(
        avg_elevation=summary.mean,
        min_elevation=float(altitude.min()),
        max_elevation=float(altitude.max()),
        lower_quartile_elevation=summary.lower_quartile,
        median_elevation=summary.median,
        upper_quartile_elevation=summary.upper_quartile,
        accumulated_elevation_ascent=ascent,
        accumulated_elevation_descent=descent,
    )
