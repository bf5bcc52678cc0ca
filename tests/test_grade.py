import numpy as np
import pytest

from activity_analysis.core.processing import preprocess_stream
from activity_analysis.metrics.grade import classify_grade_profile, compute_grade_data
from activity_analysis.models import GradeProfile
from activity_analysis.utils.config import GradeSettings


@pytest.mark.parametrize("avg_abs, variance, expected", [
    (0.5, 1.0, GradeProfile.FLAT),
    (1.2, 3.0, GradeProfile.ROLLING),
    (0.5, 4.0, GradeProfile.ROLLING),
    (2.5, 6.0, GradeProfile.HILLY),
    (5.0, 10.0, GradeProfile.HILLY),
    (6.0, 30.0, GradeProfile.MOUNTAINOUS),
])
def test_classify_grade_profile(avg_abs, variance, expected):
    assert classify_grade_profile(avg_abs, variance, GradeSettings()) is expected


def test_profile_rank_is_ordered():
    ranks = [p.rank for p in (GradeProfile.FLAT, GradeProfile.ROLLING, GradeProfile.HILLY, GradeProfile.MOUNTAINOUS)]
    assert ranks == sorted(ranks)


def _undulating_stream(make_stream):
    grade = np.tile([3.0, 0.0, -3.0], 101)[:301]
    return make_stream(n=301, speed=5.0, grade=grade)


def test_up_flat_down_split_covers_moving_time(make_stream):
    prepared = preprocess_stream(_undulating_stream(make_stream))
    data = compute_grade_data(prepared)

    seconds = data.up_flat_down_in_seconds
    assert (seconds.up, seconds.flat, seconds.down) == (100.0, 100.0, 100.0)
    assert seconds.up + seconds.flat + seconds.down == pytest.approx(prepared.moving_time_s)

    distance = data.up_flat_down_distance_data
    assert distance.up == pytest.approx(0.5)
    assert distance.total == pytest.approx(1.5)
    assert data.up_flat_down_move_data.up == pytest.approx(18.0)


def test_grade_statistics_and_profile(make_stream):
    data = compute_grade_data(preprocess_stream(_undulating_stream(make_stream)))
    assert data.avg_grade == pytest.approx(0.0)
    assert data.avg_absolute_grade == pytest.approx(2.0)
    assert data.variance_grade == pytest.approx(6.0)
    assert data.grade_profile is GradeProfile.HILLY


def test_flat_ride_is_flat(make_stream):
    data = compute_grade_data(preprocess_stream(make_stream(grade=0.0)))
    assert data.grade_profile is GradeProfile.FLAT
    assert data.up_flat_down_in_seconds.up == 0.0


def test_no_grade_without_distance_keeps_seconds(make_stream):
    data = compute_grade_data(preprocess_stream(make_stream(distance=None, grade_adjusted_distance=None)))
    assert data.up_flat_down_in_seconds.total == pytest.approx(600.0)
    assert data.up_flat_down_distance_data is None
    assert data.up_flat_down_move_data is None


def test_trainer_and_missing_grade_give_no_section(make_stream):
    assert compute_grade_data(preprocess_stream(make_stream(), is_trainer=True), is_trainer=True) is None
    assert compute_grade_data(preprocess_stream(make_stream(grade=None))) is None


def test_missing_grade_samples_count_as_flat(make_stream):
    grade = np.full(11, 3.0)
    grade[5] = np.nan
    prepared = preprocess_stream(make_stream(n=11, grade=grade))

    data = compute_grade_data(prepared)

    seconds = data.up_flat_down_in_seconds
    assert seconds.total == pytest.approx(prepared.moving_time_s)
    assert (seconds.up, seconds.flat, seconds.down) == (9.0, 1.0, 0.0)
    assert data.up_flat_down_distance_data.total == pytest.approx(0.1)
    assert data.avg_grade == pytest.approx(3.0)
