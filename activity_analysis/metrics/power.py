"""Power metrics: weighted power, variability index, intensity and W/kg."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from ..core.processing import PreparedStream
from ..models.results import PowerData, PowerSource
from ..models.zones import ZoneSet
from ..utils.config import AnalysisConfig, get_config
from .running_power import create_running_power_estimation_stream
from .statistics import summarize
from .zones import distribute_in_zones

logger = logging.getLogger(__name__)

RUNNING_ACTIVITY_TYPES = frozenset({"run", "running", "trailrun", "virtualrun"})


def is_running_activity(activity_type: Optional[str]) -> bool:
    return activity_type is not None and activity_type.replace(" ", "").lower() in RUNNING_ACTIVITY_TYPES


@dataclass(frozen=True)
class PowerChannel:
    """Power samples aligned with the prepared frame, tagged with their origin."""
    watts: pd.Series
    source: PowerSource

    @property
    def has_power_meter(self) -> bool:
        return self.source is PowerSource.POWER_METER

    @property
    def is_estimated(self) -> bool:
        return not self.has_power_meter


def resolve_power_channel(prepared: PreparedStream, activity_type: Optional[str], has_power_meter: bool,
                          weight_kg: float, config: Optional[AnalysisConfig] = None) -> Optional[PowerChannel]:
    """Pick the power samples to analyze, synthesizing them for meterless runs."""
    config = config or get_config()
    frame = prepared.frame

    if (not has_power_meter and is_running_activity(activity_type)
            and prepared.has("grade_adjusted_distance") and prepared.has_time):
        estimated = create_running_power_estimation_stream(
            weight_kg, frame["grade_adjusted_distance"], frame["time"], config
        )
        logger.debug(f"Estimated running power for {len(estimated)} samples")
        return PowerChannel(pd.Series(estimated, index=frame.index, dtype=float), PowerSource.RUNNING_ESTIMATE)

    if prepared.has("watts"):
        source = PowerSource.POWER_METER if has_power_meter else PowerSource.PROVIDER_ESTIMATE
        return PowerChannel(frame["watts"], source)

    if prepared.has("watts_calc"):
        return PowerChannel(frame["watts_calc"], PowerSource.PROVIDER_ESTIMATE)

    return None


def weighted_power(watts: pd.Series, time: pd.Series, window_s: int = 30) -> Optional[float]:
    """Normalized Power using a time-based rolling average of power^4.

    - The trailing window spans ``window_s`` seconds and advances sample by sample.
    - Samples less than ``window_s`` after the first one only warm the window up.
    - If the slice is shorter than the window, fall back to mean power.
    - Ignore NaNs; do not forward-fill here.
    """
    elapsed = (time - time.iloc[0]).to_numpy(dtype=float)
    series = pd.Series(watts.to_numpy(dtype=float), index=pd.to_timedelta(elapsed, unit="s"))
    if series.dropna().empty:
        return None

    warm = elapsed >= window_s
    if not warm.any():
        return float(series.mean())

    rolling = series.rolling(f"{window_s}s").mean()
    fourth = rolling[warm].pow(4)
    mean_fourth = fourth.mean(skipna=True)
    if pd.isna(mean_fourth):
        return None
    return float(np.power(mean_fourth, 1.0 / 4.0))


def compute_power_data(channel: Optional[PowerChannel], prepared: PreparedStream, weight_kg: float,
                       ftp: Optional[float] = None, zones: Optional[ZoneSet] = None,
                       config: Optional[AnalysisConfig] = None) -> Optional[PowerData]:
    config = config or get_config()
    if channel is None or not prepared.has_time:
        return None

    watts = channel.watts
    if watts.dropna().empty:
        return None

    avg_watts = float(watts.mean())
    npw = weighted_power(watts, prepared.frame["time"], config.power.rolling_window_s)
    if npw is None:
        return None

    summary = summarize(watts)

    power_zones = None
    if zones:
        moving = prepared.moving
        power_zones = distribute_in_zones(watts[moving], prepared.durations[moving], zones)

    logger.debug(f"Power ({channel.source.value}): avg {avg_watts:.0f}W, NP {npw:.0f}W")

    return PowerData(
        has_power_meter=channel.has_power_meter,
        power_source=channel.source,
        avg_watts=avg_watts,
        avg_watts_per_kg=avg_watts / weight_kg,
        max_watts=float(watts.max()),
        weighted_power=npw,
        variability_index=(npw / avg_watts) if avg_watts > 0 else None,
        punch_factor=(npw / ftp) if (ftp is not None and ftp > 0) else None,
        weighted_watts_per_kg=npw / weight_kg,
        lower_quartile_watts=summary.lower_quartile,
        median_watts=summary.median,
        upper_quartile_watts=summary.upper_quartile,
        power_zones=power_zones,
    )
