import math

import numpy as np
import pytest

from activity_analysis import AthleteSettings
from activity_analysis.core.processing import preprocess_stream
from activity_analysis.metrics.heart_rate import compute_heart_rate_data, heart_rate_reserve


def test_heart_rate_reserve_is_clamped():
    reserve = heart_rate_reserve(np.array([40.0, 120.0, 200.0]), 50.0, 190.0)
    assert reserve.tolist() == [0.0, 0.5, 1.0]


def test_trimp_of_steady_effort(make_stream, athlete):
    data = compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=120.0)), athlete)

    # 10 moving minutes at half of the heart rate reserve
    expected = 10 * 0.5 * 0.64 * math.exp(1.92 * 0.5)
    assert data.trimp == pytest.approx(expected)
    assert data.trimp_per_hour == pytest.approx(expected * 6)
    assert data.activity_heart_rate_reserve == pytest.approx(50.0)
    assert data.activity_heart_rate_reserve_max == pytest.approx(50.0)
    assert data.average_heart_rate == pytest.approx(120.0)


def test_trimp_uses_women_factor(make_stream):
    settings = AthleteSettings(weight_kg=60, gender="women", rest_hr=50, max_hr=190)
    data = compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=120.0)), settings)
    assert data.trimp == pytest.approx(10 * 0.5 * 0.64 * math.exp(1.67 * 0.5))


def test_harder_effort_has_higher_load(make_stream, athlete):
    easy = compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=120.0)), athlete)
    hard = compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=170.0)), athlete)
    assert hard.trimp > easy.trimp


def test_without_rest_and_max_heart_rate(make_stream):
    data = compute_heart_rate_data(
        preprocess_stream(make_stream(heart_rate=130.0)), AthleteSettings(weight_kg=70)
    )
    assert data.trimp is None
    assert data.trimp_per_hour is None
    assert data.activity_heart_rate_reserve is None
    assert data.average_heart_rate == pytest.approx(130.0)


def test_zero_only_sensor_gives_no_section(make_stream, athlete):
    assert compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=0.0)), athlete) is None
    assert compute_heart_rate_data(preprocess_stream(make_stream(heart_rate=None)), athlete) is None


def test_heart_rate_zones(make_stream, athlete):
    prepared = preprocess_stream(make_stream(heart_rate=130.0))
    data = compute_heart_rate_data(prepared, athlete, athlete.heart_rate_zones)
    assert [z.seconds for z in data.heart_rate_zones.zones] == [0.0, 600.0, 0.0]
    assert data.heart_rate_zones.zones[1].percentage == pytest.approx(100.0)
