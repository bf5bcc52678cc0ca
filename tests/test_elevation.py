import numpy as np
import pytest

from activity_analysis.core.processing import preprocess_stream
from activity_analysis.metrics.elevation import accumulate_elevation, compute_elevation_data


def test_jitter_below_threshold_is_ignored():
    altitude = [100.0, 100.2, 99.9, 100.1, 100.0, 100.3]
    assert accumulate_elevation(altitude, 0.5) == (0.0, 0.0)


def test_slow_drift_below_threshold_is_not_counted():
    # 0.25 m steps never clear the threshold between consecutive samples
    climb = 100.0 + 0.25 * np.arange(41)
    profile = np.concatenate([climb, climb[::-1][1:]])

    assert accumulate_elevation(profile, 0.5) == (0.0, 0.0)


def test_steps_at_or_above_threshold_accumulate():
    altitude = [100.0, 101.0, 101.5, 101.75, 100.75, 100.25]

    ascent, descent = accumulate_elevation(altitude, 0.5)

    # The 0.25 m step is jitter; 1 m and 0.5 m steps count both ways
    assert ascent == pytest.approx(1.5)
    assert descent == pytest.approx(1.5)


def test_nan_altitude_samples_are_skipped():
    assert accumulate_elevation([100.0, np.nan, 101.0], 0.5) == (1.0, 0.0)
    assert accumulate_elevation([np.nan], 0.5) == (0.0, 0.0)


def test_elevation_data_statistics(make_stream):
    stream = make_stream(n=101, speed=10.0, grade=5.0, altitude_start=200.0)
    data = compute_elevation_data(preprocess_stream(stream))

    # 1000 m at 5 %
    assert data.min_elevation == pytest.approx(200.0)
    assert data.max_elevation == pytest.approx(250.0)
    assert data.median_elevation == pytest.approx(225.0)
    assert data.accumulated_elevation_ascent == pytest.approx(50.0)
    assert data.accumulated_elevation_descent == 0.0


def test_no_altitude_channel(make_stream):
    assert compute_elevation_data(preprocess_stream(make_stream(altitude_start=None))) is None
