"""Maps a solved sun position onto the host's shadow settings."""

import logging
from datetime import datetime
from typing import Any

from pytz import FixedOffset, timezone, utc
from timezonefinder import TimezoneFinder

from lightrenderer.models import SolarResult

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()


def local_time(result: SolarResult) -> datetime:
    """Solved UTC time expressed in the local timezone of the solved location.

    Uses the IANA zone at the location; over open sea, where there is none,
    falls back to the nautical offset of whole hours (longitude / 15).
    """
    tz_str = _tf.timezone_at(lat=result.latitude, lng=result.longitude)
    if tz_str is None:
        offset_hours = round(result.longitude / 15)
        logger.debug(
            "No timezone at lat=%s, lng=%s; using UTC%+d",
            result.latitude,
            result.longitude,
            offset_hours,
        )
        return result.time.astimezone(FixedOffset(offset_hours * 60))
    return result.time.astimezone(utc).astimezone(timezone(tz_str))


def shadow_settings(result: SolarResult, light: float = 1.0, dark: float = 0.0) -> dict[str, Any]:
    """Build the host's shadow parameter set for a solar result.

    Args:
        result: Output of the sun search.
        light: Direct light level, 0..1.
        dark: Shadow darkness level, 0..1.

    Returns:
        Dict of shadow parameters keyed the way the host names them.
    """
    local_dt = local_time(result)
    offset = local_dt.utcoffset()
    tz_offset = offset.total_seconds() / 3600 if offset is not None else 0.0
    return {
        "Latitude": result.latitude,
        "Longitude": result.longitude,
        "ShadowTime": local_dt,
        "TZOffset": tz_offset,
        "DisplayShadows": True,
        "UseSunForAllShading": True,
        "Light": light,
        "Dark": dark,
    }
