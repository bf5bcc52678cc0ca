import numpy as np
import pytest

from activity_analysis import ActivityStream, AthleteSettings


def _channel(value, n):
    if value is None:
        return None
    if np.isscalar(value):
        return np.full(n, float(value))
    return np.asarray(value, dtype=float)


def build_stream(n=601, dt=1.0, speed=10.0, watts=200.0, heart_rate=150.0, cadence=90.0,
                 grade=2.0, altitude_start=100.0, **overrides):
    """Steady synthetic activity sampled every ``dt`` seconds.

    Pass ``channel=None`` to drop a channel, or an array to replace it.
    """
    time = np.arange(n) * dt
    speed_channel = _channel(speed, n)
    distance = np.concatenate([[0.0], np.cumsum(speed_channel[1:] * dt)]) if speed is not None else time * 10.0
    grade_channel = _channel(grade, n)
    altitude = None
    if altitude_start is not None:
        altitude = altitude_start + distance * (grade_channel if grade is not None else 0.0) / 100.0

    data = {
        "time": time,
        "distance": distance,
        "velocity_smooth": speed_channel,
        "watts": _channel(watts, n),
        "heart_rate": _channel(heart_rate, n),
        "cadence": _channel(cadence, n),
        "grade_smooth": grade_channel,
        "altitude": altitude,
        "grade_adjusted_distance": distance,
    }
    data.update(overrides)
    return ActivityStream(**{name: values for name, values in data.items() if values is not None})


@pytest.fixture
def make_stream():
    return build_stream


@pytest.fixture
def athlete():
    return AthleteSettings(
        weight_kg=70.0,
        gender="men",
        rest_hr=50,
        max_hr=190,
        ftp=250,
        heart_rate_zones=[{"from": 0, "to": 120}, {"from": 120, "to": 160}, {"from": 160, "to": 220}],
        power_zones=[{"from": 0, "to": 150}, {"from": 150, "to": 250}, {"from": 250, "to": 2000}],
        running_power_zones=[{"from": 0, "to": 200}, {"from": 200, "to": 400}],
        cadence_zones=[{"from": 0, "to": 80}, {"from": 80, "to": 100}, {"from": 100, "to": 150}],
        pace_zones=[{"from": 0, "to": 300}, {"from": 300, "to": 3600}],
        speed_zones=[{"from": 0, "to": 30}, {"from": 30, "to": 100}],
    )
