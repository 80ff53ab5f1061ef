"""Solar position layer — sun direction approximation and the coarse-to-fine sun search."""

import calendar
import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from pytz import utc

from lightrenderer.geometry import direction_between, normalize, squared_distance
from lightrenderer.models import (
    SearchOutcome,
    SearchWindow,
    SolarQuery,
    SolarResult,
    Vector3,
)

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_DATE = date(2024, 3, 20)

_EPSILON_DENOMINATOR = 1e-12


class UndefinedSolarPositionError(ArithmeticError):
    """Azimuth is undefined at this point (pole, or sun at the zenith/nadir)."""


class NoSolutionFoundError(Exception):
    """Every grid point of a search stage was undefined."""


@dataclass(frozen=True)
class SolverSettings:
    """Grid parameters for the two search stages."""

    reference_date: date = DEFAULT_REFERENCE_DATE
    coarse_step_deg: float = 10.0
    coarse_day_start: time = time(6, 0)
    coarse_day_end: time = time(18, 0)
    coarse_time_step: timedelta = timedelta(hours=1)
    fine_span_deg: float = 2.0
    fine_step_deg: float = 1.0
    fine_time_span: timedelta = timedelta(minutes=60)
    fine_time_step: timedelta = timedelta(minutes=5)


def _fractional_year(when: datetime) -> float:
    """Fractional year in radians (NOAA convention)."""
    utc_dt = when.astimezone(utc)
    days = 366 if calendar.isleap(utc_dt.year) else 365
    hour = utc_dt.hour + utc_dt.minute / 60 + (utc_dt.second + utc_dt.microsecond / 1e6) / 3600
    doy = utc_dt.timetuple().tm_yday
    return 2 * math.pi / days * (doy - 1 + (hour - 12) / 24)


def solar_declination(when: datetime) -> float:
    """Solar declination in radians."""
    g = _fractional_year(when)
    return (
        0.006918
        - 0.399912 * math.cos(g)
        + 0.070257 * math.sin(g)
        - 0.006758 * math.cos(2 * g)
        + 0.000907 * math.sin(2 * g)
        - 0.002697 * math.cos(3 * g)
        + 0.00148 * math.sin(3 * g)
    )


def equation_of_time(when: datetime) -> float:
    """Equation of time in minutes (true solar time minus mean solar time)."""
    g = _fractional_year(when)
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(g)
        - 0.032077 * math.sin(g)
        - 0.014615 * math.cos(2 * g)
        - 0.040849 * math.sin(2 * g)
    )


def hour_angle(longitude_deg: float, when: datetime) -> float:
    """Hour angle in degrees, normalized to (-180, 180]. Negative before solar noon."""
    utc_dt = when.astimezone(utc)
    minutes = utc_dt.hour * 60 + utc_dt.minute + (utc_dt.second + utc_dt.microsecond / 1e6) / 60
    true_solar_minutes = minutes + equation_of_time(utc_dt) + 4 * longitude_deg
    angle = (true_solar_minutes / 4 - 180) % 360
    return angle - 360 if angle > 180 else angle


def sun_direction(latitude_deg: float, longitude_deg: float, when: datetime) -> Vector3:
    """Unit vector toward the sun in a local frame (x = east, y = north, z = up).

    Args:
        latitude_deg: Observer latitude (decimal degrees).
        longitude_deg: Observer longitude (decimal degrees, east positive).
        when: Timezone-aware datetime; converted to UTC.

    Returns:
        Direction vector from the observer to the sun.

    Raises:
        UndefinedSolarPositionError: When cos(altitude) * cos(latitude) is zero,
            i.e. at a pole or with the sun exactly overhead.
    """
    lat = math.radians(latitude_deg)
    decl = solar_declination(when)
    ha_deg = hour_angle(longitude_deg, when)
    ha = math.radians(ha_deg)

    sin_alt = math.sin(lat) * math.sin(decl) + math.cos(lat) * math.cos(decl) * math.cos(ha)
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))

    denominator = math.cos(altitude) * math.cos(lat)
    if abs(denominator) < _EPSILON_DENOMINATOR:
        raise UndefinedSolarPositionError(
            f"Azimuth undefined at lat={latitude_deg}, lng={longitude_deg}, t={when}"
        )
    cos_az = (math.sin(decl) - math.sin(altitude) * math.sin(lat)) / denominator
    azimuth = math.acos(max(-1.0, min(1.0, cos_az)))
    if ha_deg > 0:
        azimuth = 2 * math.pi - azimuth

    return Vector3(
        math.cos(altitude) * math.sin(azimuth),
        math.cos(altitude) * math.cos(azimuth),
        math.sin(altitude),
    )


def _steps(start: float, stop: float, step: float) -> list[float]:
    count = int(math.floor((stop - start) / step + 1e-9))
    return [start + i * step for i in range(count + 1)]


def _wrap_longitude(lon: float) -> float:
    if lon > 180:
        return lon - 360
    if lon < -180:
        return lon + 360
    return lon


def _times(window: SearchWindow) -> list[datetime]:
    count = int((window.time_end - window.time_start) / window.time_step)
    return [window.time_start + i * window.time_step for i in range(count + 1)]


def iter_grid(window: SearchWindow) -> Iterator[tuple[float, float, datetime]]:
    """Yield grid points latitude-major, then longitude, then time.

    Latitudes outside -90..90 are yielded unchanged so the caller can count
    them as skipped; longitudes outside -180..180 wrap around.
    """
    times = _times(window)
    for lat in _steps(window.lat_min, window.lat_max, window.lat_step):
        for lon in _steps(window.lon_min, window.lon_max, window.lon_step):
            for t in times:
                yield lat, _wrap_longitude(lon), t


def coarse_window(settings: SolverSettings = SolverSettings()) -> SearchWindow:
    """Whole globe over daylight hours of the reference date."""
    return SearchWindow(
        lat_min=-90.0,
        lat_max=90.0,
        lat_step=settings.coarse_step_deg,
        lon_min=-180.0,
        lon_max=180.0,
        lon_step=settings.coarse_step_deg,
        time_start=datetime.combine(settings.reference_date, settings.coarse_day_start, tzinfo=utc),
        time_end=datetime.combine(settings.reference_date, settings.coarse_day_end, tzinfo=utc),
        time_step=settings.coarse_time_step,
    )


def fine_window(best: SolarResult, settings: SolverSettings = SolverSettings()) -> SearchWindow:
    """Neighborhood of a coarse result: ±span degrees and the following hour."""
    span = settings.fine_span_deg
    return SearchWindow(
        lat_min=best.latitude - span,
        lat_max=best.latitude + span,
        lat_step=settings.fine_step_deg,
        lon_min=best.longitude - span,
        lon_max=best.longitude + span,
        lon_step=settings.fine_step_deg,
        time_start=best.time,
        time_end=best.time + settings.fine_time_span,
        time_step=settings.fine_time_step,
    )


def search(target: Vector3, window: SearchWindow) -> SearchOutcome:
    """Exhaustive grid search for the point whose sun direction is closest to target.

    The first point reaching the running minimum wins; later ties are ignored.

    Raises:
        NoSolutionFoundError: If no grid point has a defined sun direction.
    """
    best: tuple[float, float, datetime] | None = None
    best_distance = math.inf
    evaluated = 0
    skipped = 0

    for lat, lon, t in iter_grid(window):
        if not -90.0 <= lat <= 90.0:
            skipped += 1
            continue
        try:
            candidate = sun_direction(lat, lon, t)
        except UndefinedSolarPositionError:
            skipped += 1
            continue
        evaluated += 1
        distance = squared_distance(candidate, target)
        if distance < best_distance:
            best_distance = distance
            best = (lat, lon, t)

    if best is None:
        raise NoSolutionFoundError(f"No defined sun position in {window}")

    lat, lon, t = best
    return SearchOutcome(
        result=SolarResult(latitude=lat, longitude=lon, time=t),
        distance=best_distance,
        evaluated=evaluated,
        skipped=skipped,
    )


def find_best_sun_position(
    target: Vector3, settings: SolverSettings = SolverSettings()
) -> SolarResult:
    """Find latitude, longitude and UTC time whose sun direction best matches target.

    Args:
        target: Direction toward the light. Normalized here if it is not unit length.
        settings: Grid parameters and reference date.

    Returns:
        The best point of the fine search around the coarse optimum.

    Raises:
        DegenerateDirectionError: If target has zero length.
        NoSolutionFoundError: If a search stage has no defined point.
    """
    _, fine = search_stages(target, settings)
    return fine.result


def search_stages(
    target: Vector3, settings: SolverSettings = SolverSettings()
) -> tuple[SearchOutcome, SearchOutcome]:
    """Run both search stages and return their outcomes (coarse, fine)."""
    target = normalize(target)
    coarse = search(target, coarse_window(settings))
    logger.debug(
        "Coarse search: best=%s d2=%.6f evaluated=%d skipped=%d",
        coarse.result,
        coarse.distance,
        coarse.evaluated,
        coarse.skipped,
    )
    fine = search(target, fine_window(coarse.result, settings))
    logger.debug(
        "Fine search: best=%s d2=%.6f evaluated=%d skipped=%d",
        fine.result,
        fine.distance,
        fine.evaluated,
        fine.skipped,
    )
    return coarse, fine


def solve(query: SolarQuery, settings: SolverSettings = SolverSettings()) -> SolarResult:
    """Solve a SolarQuery. Same as find_best_sun_position on its target."""
    return find_best_sun_position(query.target_direction, settings)


def solve_for_light(
    light_position: Vector3,
    reference_point: Vector3,
    settings: SolverSettings = SolverSettings(),
) -> SolarResult:
    """Place the host's sun so it shines from light_position onto reference_point.

    Raises:
        DegenerateDirectionError: If the light sits on the reference point.
        NoSolutionFoundError: If the search finds no defined point.
    """
    direction = direction_between(reference_point, light_position)
    logger.info("Solving sun position for light direction %s", direction)
    return find_best_sun_position(direction, settings)

