"""Time-in-zone distribution of a numeric channel."""
from __future__ import annotations

from typing import Iterable

import numpy as np

from ..models.results import ZoneDistribution, ZoneTime
from ..models.zones import ZoneSet


def distribute_in_zones(values: Iterable[float], durations: Iterable[float], zones: ZoneSet) -> ZoneDistribution:
    """Accumulate sample durations per zone.

    A value belongs to [lower, upper); the last zone also takes its upper
    bound. Samples outside every zone (or NaN) count as uncovered time.
    """
    v = np.asarray(values, dtype=float)
    d = np.asarray(durations, dtype=float)
    if v.shape != d.shape:
        raise ValueError(f"Values and durations differ in length: {v.shape} vs {d.shape}")

    total = float(d.sum())
    covered = np.zeros(v.shape, dtype=bool)
    zone_times = []
    last = len(zones) - 1

    for i, zone in enumerate(zones):
        if i == last:
            in_zone = (v >= zone.lower) & (v <= zone.upper)
        else:
            in_zone = (v >= zone.lower) & (v < zone.upper)
        covered |= in_zone
        seconds = float(d[in_zone].sum())
        zone_times.append(ZoneTime(
            lower=zone.lower,
            upper=zone.upper,
            seconds=seconds,
            percentage=(seconds / total * 100.0) if total > 0 else None,
        ))

    return ZoneDistribution(
        zones=tuple(zone_times),
        total_seconds=total,
        uncovered_seconds=float(d[~covered].sum()),
    )
