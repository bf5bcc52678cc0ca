"""
Activity stream model.
Parallel, index-aligned sensor channels recorded for one activity.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from ..core.errors import InvalidStreamError

Channel = Tuple[float, ...]

# Provider and contract key spellings accepted by ActivityStream.from_dict
CHANNEL_ALIASES: Dict[str, str] = {
    "time": "time",
    "distance": "distance",
    "altitude": "altitude",
    "heartrate": "heart_rate",
    "heartRate": "heart_rate",
    "heart_rate": "heart_rate",
    "watts": "watts",
    "watts_calc": "watts_calc",
    "wattsCalc": "watts_calc",
    "cadence": "cadence",
    "grade_smooth": "grade_smooth",
    "gradeSmooth": "grade_smooth",
    "velocity_smooth": "velocity_smooth",
    "velocitySmooth": "velocity_smooth",
    "grade_adjusted_distance": "grade_adjusted_distance",
    "gradeAdjustedDistance": "grade_adjusted_distance",
}


def _to_channel(values: Optional[Iterable[Any]]) -> Channel:
    if values is None:
        return ()
    return tuple(float("nan") if v is None else float(v) for v in values)


@dataclass(frozen=True)
class ActivityStream:
    """Sensor channels of one activity; an absent channel is an empty tuple."""
    time: Channel = ()
    distance: Channel = ()
    altitude: Channel = ()
    heart_rate: Channel = ()
    watts: Channel = ()
    watts_calc: Channel = ()
    cadence: Channel = ()
    grade_smooth: Channel = ()
    velocity_smooth: Channel = ()
    grade_adjusted_distance: Channel = ()

    def __post_init__(self):
        lengths = {}
        for f in fields(self):
            channel = _to_channel(getattr(self, f.name))
            object.__setattr__(self, f.name, channel)
            if channel:
                lengths[f.name] = len(channel)

        if len(set(lengths.values())) > 1:
            raise InvalidStreamError(f"Stream channels have different lengths: {lengths}")

        if self.time:
            if any(math.isnan(t) for t in self.time):
                raise InvalidStreamError("Time channel contains missing samples")
            if any(b < a for a, b in zip(self.time, self.time[1:])):
                raise InvalidStreamError("Time channel must be non-decreasing")

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[Any]]) -> "ActivityStream":
        """Build a stream from provider (snake_case) or contract (camelCase) keys.

        Unknown keys are ignored.
        """
        channels: Dict[str, Any] = {}
        for key, values in data.items():
            name = CHANNEL_ALIASES.get(key)
            if name is not None and values is not None:
                channels[name] = values
        return cls(**channels)

    @classmethod
    def channel_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def has(self, name: str) -> bool:
        return len(getattr(self, name)) > 0

    def present_channels(self) -> Tuple[str, ...]:
        return tuple(name for name in self.channel_names() if self.has(name))

    def __len__(self) -> int:
        for name in self.channel_names():
            channel = getattr(self, name)
            if channel:
                return len(channel)
        return 0

    def to_dataframe(self) -> pd.DataFrame:
        """One column per present channel, one row per sample."""
        data = {name: np.asarray(getattr(self, name), dtype=float) for name in self.present_channels()}
        return pd.DataFrame(data, index=pd.RangeIndex(len(self)))
