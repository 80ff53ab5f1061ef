"""Environment-driven settings. Entry points call load_dotenv() before load_settings()."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime

from lightrenderer.color import parse_rgb
from lightrenderer.geometry import clamp
from lightrenderer.models import Color, LightSource, Vector3
from lightrenderer.presets import AMBIENT_RANGE, INTENSITY_RANGE, color_preset
from lightrenderer.shading import DEFAULT_AMBIENT
from lightrenderer.solar import DEFAULT_REFERENCE_DATE, SolverSettings

_PREFIX = "LIGHT_RENDERER_"

SUPPORTED_LANGS = ("en", "vi")


class ConfigError(ValueError):
    """An environment variable holds a value that cannot be parsed."""


@dataclass(frozen=True)
class RendererSettings:
    """Resolved configuration for one process."""

    light_position: Vector3 = Vector3(100.0, 100.0, 200.0)
    light_color: Color = Color(255, 255, 200)
    ambient: float = DEFAULT_AMBIENT
    intensity: float = 1.0
    reference_date: date = DEFAULT_REFERENCE_DATE
    lang: str = "en"
    log_level: str = "INFO"

    def light_source(self) -> LightSource:
        return LightSource(
            color=self.light_color,
            position=self.light_position,
            ambient=self.ambient,
            intensity=self.intensity,
        )

    def solver_settings(self) -> SolverSettings:
        return SolverSettings(reference_date=self.reference_date)


def _parse_position(name: str, raw: str) -> Vector3:
    parts = raw.split(",")
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError as exc:
        raise ConfigError(f"{name}: expected 'x,y,z', got {raw!r}") from exc
    return Vector3(x, y, z)


def _parse_color(name: str, raw: str) -> Color:
    try:
        return color_preset(raw)
    except KeyError:
        pass
    try:
        return parse_rgb(raw)
    except ValueError as exc:
        raise ConfigError(f"{name}: expected a preset name or 'r,g,b', got {raw!r}") from exc


def _parse_float(name: str, raw: str, bounds: tuple[float, float]) -> float:
    try:
        return clamp(float(raw), *bounds)
    except ValueError as exc:
        raise ConfigError(f"{name}: expected a number, got {raw!r}") from exc


def _parse_date(name: str, raw: str) -> date:
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ConfigError(f"{name}: expected YYYY-MM-DD, got {raw!r}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> RendererSettings:
    """Read LIGHT_RENDERER_* variables into RendererSettings.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with defaults for every unset variable.

    Raises:
        ConfigError: If a set variable cannot be parsed.
    """
    env = os.environ if environ is None else environ
    defaults = RendererSettings()

    def get(key: str) -> tuple[str, str | None]:
        name = _PREFIX + key
        value = env.get(name)
        return name, value.strip() if value is not None and value.strip() else None

    name, raw = get("LIGHT_POSITION")
    light_position = _parse_position(name, raw) if raw else defaults.light_position

    name, raw = get("LIGHT_COLOR")
    light_color = _parse_color(name, raw) if raw else defaults.light_color

    name, raw = get("AMBIENT")
    ambient = _parse_float(name, raw, AMBIENT_RANGE) if raw else defaults.ambient

    name, raw = get("INTENSITY")
    intensity = _parse_float(name, raw, INTENSITY_RANGE) if raw else defaults.intensity

    name, raw = get("REFERENCE_DATE")
    reference_date = _parse_date(name, raw) if raw else defaults.reference_date

    name, raw = get("LANG")
    lang = raw.lower() if raw else defaults.lang
    if lang not in SUPPORTED_LANGS:
        raise ConfigError(f"{name}: expected one of {SUPPORTED_LANGS}, got {raw!r}")

    name, raw = get("LOG_LEVEL")
    log_level = raw.upper() if raw else defaults.log_level
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"{name}: unknown log level {raw!r}")

    return RendererSettings(
        light_position=light_position,
        light_color=light_color,
        ambient=ambient,
        intensity=intensity,
        reference_date=reference_date,
        lang=lang,
        log_level=log_level,
    )
