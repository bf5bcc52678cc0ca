#!/usr/bin/env python3
"""Bounding and moving/paused classification of activity streams."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..models.stream import ActivityStream
from ..utils.config import AnalysisConfig, get_config
from .errors import InvalidBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedStream:
    """Bounded working slice of a stream.

    ``frame`` holds the present channels plus ``duration`` (seconds since the
    previous sample, 0 for the first) and ``moving`` (bool) columns.
    Analyzers read it and never write to it.
    """
    frame: pd.DataFrame
    start_index: int
    end_index: int
    moving_time_s: float
    elapsed_time_s: float
    move_ratio: Optional[float]

    def has(self, channel: str) -> bool:
        return channel in self.frame.columns

    @property
    def has_time(self) -> bool:
        return self.has("time")

    @property
    def moving(self) -> pd.Series:
        return self.frame["moving"]

    @property
    def durations(self) -> pd.Series:
        return self.frame["duration"]

    @property
    def moving_frame(self) -> pd.DataFrame:
        return self.frame[self.frame["moving"]]


def clamp_bounds(bounds: Optional[Sequence[int]], length: int) -> Tuple[int, int]:
    """Clamp an inclusive [start, end] index pair to the stream.

    Raises InvalidBoundsError when the pair is malformed or inverted after clamping.
    """
    if bounds is None:
        if length == 0:
            return 0, -1
        return 0, length - 1

    try:
        start, end = bounds
        start, end = int(start), int(end)
    except (TypeError, ValueError) as e:
        raise InvalidBoundsError(bounds, length) from e

    start = max(0, min(start, length - 1))
    end = min(end, length - 1)

    if start > end:
        raise InvalidBoundsError(bounds, length)

    return start, end


def compute_durations(time: pd.Series) -> pd.Series:
    """Seconds elapsed since the previous sample; the first sample gets 0."""
    return time.diff().fillna(0.0)


def compute_moving_mask(frame: pd.DataFrame, durations: pd.Series,
                        is_trainer: bool = False, config: Optional[AnalysisConfig] = None) -> pd.Series:
    """Flag samples recorded while moving.

    A sample is moving when its duration is positive and under the pause gap
    and, unless this is a trainer session or no speed channel exists, its
    speed exceeds the moving threshold.
    """
    config = config or get_config()
    settings = config.processing

    recorded = (durations > 0) & (durations < settings.max_sample_gap_s)
    if is_trainer or "velocity_smooth" not in frame.columns:
        return recorded

    speed = frame["velocity_smooth"].fillna(0.0)
    return recorded & (speed > settings.moving_speed_threshold_mps)


def preprocess_stream(stream: ActivityStream, bounds: Optional[Sequence[int]] = None,
                      is_trainer: bool = False, config: Optional[AnalysisConfig] = None) -> PreparedStream:
    """Slice a stream to its bounds and classify samples as moving or paused."""
    config = config or get_config()

    start, end = clamp_bounds(bounds, len(stream))
    frame = stream.to_dataframe().iloc[start:end + 1].reset_index(drop=True)

    if "time" in frame.columns:
        durations = compute_durations(frame["time"])
        elapsed = float(frame["time"].iloc[-1] - frame["time"].iloc[0]) if len(frame) else 0.0
    else:
        durations = pd.Series(np.zeros(len(frame)), index=frame.index)
        elapsed = 0.0

    moving = compute_moving_mask(frame, durations, is_trainer, config)
    if "time" not in frame.columns:
        moving = pd.Series(False, index=frame.index)

    frame = frame.assign(duration=durations, moving=moving.astype(bool))

    moving_time = float(durations[frame["moving"]].sum())
    move_ratio = moving_time / elapsed if elapsed > 0 else None

    logger.debug(
        f"Prepared samples {start}..{end}: moving {moving_time:.0f}s of {elapsed:.0f}s"
    )

    return PreparedStream(
        frame=frame,
        start_index=start,
        end_index=end,
        moving_time_s=moving_time,
        elapsed_time_s=elapsed,
        move_ratio=move_ratio,
    )


def recorded_durations(prepared: PreparedStream, config: Optional[AnalysisConfig] = None) -> pd.Series:
    """Durations with recording pauses zeroed, moving or not."""
    config = config or get_config()
    durations = prepared.durations
    return durations.where(durations < config.processing.max_sample_gap_s, 0.0)
