import math

import pytest

from activity_analysis import (
    ActivityStream,
    AthleteSettings,
    ConfigurationError,
    Gender,
    InvalidStreamError,
    StatsMap,
    ZoneConfigurationError,
)
from activity_analysis.models import HeartRateData


def test_stream_rejects_misaligned_channels():
    with pytest.raises(InvalidStreamError):
        ActivityStream(time=[0, 1, 2], heart_rate=[120, 121])


def test_stream_rejects_time_going_backwards():
    with pytest.raises(InvalidStreamError):
        ActivityStream(time=[0, 2, 1])


def test_stream_from_dict_accepts_provider_and_contract_keys():
    stream = ActivityStream.from_dict({
        "time": [0, 1, 2],
        "heartrate": [100, None, 102],
        "velocitySmooth": [3, 3, 3],
        "latlng": [[0, 0], [0, 0], [0, 0]],
    })
    assert len(stream) == 3
    assert stream.present_channels() == ("time", "heart_rate", "velocity_smooth")
    assert math.isnan(stream.heart_rate[1])
    assert not stream.has("watts")


def test_stream_dataframe_only_holds_present_channels():
    frame = ActivityStream(time=[0, 1], cadence=[80, 82]).to_dataframe()
    assert list(frame.columns) == ["time", "cadence"]
    assert len(frame) == 2


def test_empty_stream():
    stream = ActivityStream()
    assert len(stream) == 0
    assert stream.to_dataframe().empty


@pytest.mark.parametrize("weight", [None, 0, -60])
def test_athlete_requires_positive_weight(weight):
    with pytest.raises(ConfigurationError):
        AthleteSettings(weight_kg=weight)


def test_athlete_from_dict():
    settings = AthleteSettings.from_dict({
        "userWeight": 68,
        "userGender": "female",
        "userRestHr": 48,
        "userMaxHr": 188,
        "userFTP": 220,
        "zones": {"heartRate": [{"from": 0, "to": 140}, {"from": 140, "to": 200}]},
    })
    assert settings.weight_kg == 68.0
    assert settings.gender is Gender.WOMEN
    assert settings.has_heart_rate_range
    assert len(settings.heart_rate_zones) == 2
    assert settings.power_zones is None


def test_athlete_rejects_invalid_zones():
    with pytest.raises(ZoneConfigurationError):
        AthleteSettings(weight_kg=70, power_zones=[{"from": 200, "to": 100}])


def test_athlete_without_heart_rate_range():
    assert not AthleteSettings(weight_kg=70, rest_hr=60).has_heart_rate_range
    assert not AthleteSettings(weight_kg=70, rest_hr=190, max_hr=60).has_heart_rate_range


def test_stats_map_from_dict():
    stats = StatsMap.from_dict({"elevation": 350, "avgPower": 180, "averageSpeed": 28.5, "movingTime": 3600})
    assert stats.elevation == 350.0
    assert stats.avg_power == 180.0
    assert stats.distance is None
    assert StatsMap.from_dict(None) == StatsMap()


def test_heart_rate_section_uses_trimp_keys():
    section = HeartRateData(
        trimp=50.0, trimp_per_hour=100.0, average_heart_rate=140.0, max_heart_rate=170.0,
        lower_quartile_heart_rate=130.0, median_heart_rate=140.0, upper_quartile_heart_rate=150.0,
        activity_heart_rate_reserve=60.0, activity_heart_rate_reserve_max=85.0,
    )
    rendered = section.to_dict()
    assert rendered["TRIMP"] == 50.0
    assert rendered["TRIMPPerHour"] == 100.0
    assert rendered["activityHeartRateReserveMax"] == 85.0
    assert rendered["heartRateZones"] is None
