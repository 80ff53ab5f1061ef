from datetime import datetime, timedelta

from pytz import utc

from lightrenderer.models import SolarResult
from lightrenderer.shadows import local_time, shadow_settings


def test_shadow_settings_for_paris():
    result = SolarResult(latitude=48.85, longitude=2.35, time=datetime(2024, 3, 20, 12, 0, tzinfo=utc))
    settings = shadow_settings(result)

    assert settings["Latitude"] == 48.85
    assert settings["Longitude"] == 2.35
    assert settings["TZOffset"] == 1.0
    assert settings["ShadowTime"].hour == 13
    assert settings["ShadowTime"].astimezone(utc) == result.time
    assert settings["DisplayShadows"] is True
    assert settings["UseSunForAllShading"] is True
    assert settings["Light"] == 1.0
    assert settings["Dark"] == 0.0


def test_open_sea_uses_whole_hour_offset():
    result = SolarResult(latitude=0.0, longitude=-30.0, time=datetime(2024, 3, 20, 12, 0, tzinfo=utc))
    assert local_time(result).utcoffset() == timedelta(hours=-2)
    assert shadow_settings(result, light=0.8, dark=0.3)["TZOffset"] == -2.0


def test_local_time_keeps_the_instant():
    result = SolarResult(latitude=35.68, longitude=139.69, time=datetime(2024, 3, 20, 6, 30, tzinfo=utc))
    local = local_time(result)
    assert local.hour == 15
    assert local.astimezone(utc) == result.time
