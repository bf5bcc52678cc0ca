"""
Running power estimation for runs recorded without a power meter.

Power is modelled as body mass x speed x energy cost of running x mechanical
efficiency. Grade-adjusted distance already folds the slope cost into speed;
wind and surface are not modelled.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from ..utils.config import AnalysisConfig, get_config


def _running_watts(weight_kg, speed_mps, config: AnalysisConfig):
    return weight_kg * speed_mps * config.running_power_coefficient


def estimate_running_power(weight_kg: float, total_meters: float, total_seconds: float,
                           config: Optional[AnalysisConfig] = None) -> int:
    """Average running power (W, rounded) from body mass and average speed."""
    config = config or get_config()
    if total_seconds <= 0 or total_meters <= 0:
        return 0
    speed = total_meters / total_seconds
    return int(round(_running_watts(weight_kg, speed, config)))


def create_running_power_estimation_stream(weight_kg: float, grade_adjusted_distance: Sequence[float],
                                           time: Sequence[float],
                                           config: Optional[AnalysisConfig] = None) -> List[float]:
    """Per-sample running power (W) from grade-adjusted distance and time.

    Samples without a positive time delta repeat the previous estimate; the
    first sample takes the first computable estimate, or 0 if there is none.
    """
    config = config or get_config()

    distance = pd.Series(np.asarray(grade_adjusted_distance, dtype=float))
    seconds = pd.Series(np.asarray(time, dtype=float))
    if len(distance) != len(seconds):
        raise ValueError(
            f"Grade adjusted distance and time differ in length: {len(distance)} vs {len(seconds)}"
        )
    if distance.empty:
        return []

    dt = seconds.diff()
    speed = (distance.diff() / dt.where(dt > 0)).clip(lower=0.0)
    speed = speed.ffill().bfill().fillna(0.0)

    return _running_watts(weight_kg, speed, config).astype(float).tolist()
