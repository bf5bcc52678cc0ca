"""Distribution statistics shared by every metric channel."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
import pandas as pd

QUARTILES = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class DistributionSummary:
    mean: Optional[float] = None
    median: Optional[float] = None
    lower_quartile: Optional[float] = None
    upper_quartile: Optional[float] = None
    variance: Optional[float] = None
    standard_deviation: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.mean is None


def _as_series(values: Iterable[float]) -> pd.Series:
    if not isinstance(values, (pd.Series, np.ndarray, list, tuple)):
        values = list(values)
    return pd.Series(values, dtype=float).dropna()


def summarize(values: Iterable[float]) -> DistributionSummary:
    """Mean, quartiles and population variance of a numeric sequence.

    Quartiles interpolate linearly on the sorted values at rank p * (n - 1).
    NaN samples are ignored; an empty sequence gives an all-None summary.
    """
    series = _as_series(values)
    if series.empty:
        return DistributionSummary()

    q1, median, q3 = series.quantile(list(QUARTILES), interpolation="linear").tolist()
    variance = float(series.var(ddof=0))

    return DistributionSummary(
        mean=float(series.mean()),
        median=float(median),
        lower_quartile=float(q1),
        upper_quartile=float(q3),
        variance=variance,
        standard_deviation=math.sqrt(variance),
    )


def time_weighted_mean(values: Iterable[float], durations: Iterable[float]) -> Optional[float]:
    """Mean of values weighted by sample duration; None without any weight."""
    v = np.asarray(values, dtype=float)
    w = np.asarray(durations, dtype=float)
    valid = ~np.isnan(v) & (w > 0)
    if not valid.any():
        return None
    return float(np.average(v[valid], weights=w[valid]))
