"""Data model definitions — explicit boundaries between host, shading, and solar layers."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Vector3:
    """Position, direction, or normal in model space."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Color:
    """8-bit RGB color. Channels are kept in 0..255 by every producer."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


WHITE = Color(255, 255, 255)


@dataclass(frozen=True)
class LightSource:
    """Light configuration passed explicitly into every render call."""

    color: Color
    position: Vector3
    ambient: float = 0.4  # Brightness floor, 0..1
    intensity: float = 1.0  # Diffuse multiplier, 0.1..3.0


@dataclass(frozen=True)
class LightingInput:
    """Everything the shader needs for a single face."""

    base_color: Color  # Face's own color before lighting
    light_color: Color
    light_position: Vector3
    face_normal: Vector3 | None  # None when the host cannot report one
    face_center: Vector3  # Bounding-box center of the face
    ambient: float
    light_intensity: float = 1.0


@dataclass(frozen=True)
class FaceSample:
    """Geometry and color the host reports for one paintable face."""

    normal: Vector3 | None
    center: Vector3
    color: Color | None  # None = no material assigned


@dataclass(frozen=True)
class ShadedFace:
    """A single face after a lighting pass."""

    center: Vector3
    normal: Vector3 | None
    base_color: Color
    lit_color: Color


@dataclass(frozen=True)
class RenderReport:
    """Outcome of one lighting pass over a selection."""

    light: LightSource
    shaded: tuple[ShadedFace, ...]
    skipped: tuple[str, ...]  # One reason string per face that could not be shaded

    @property
    def painted_count(self) -> int:
        return len(self.shaded)


@dataclass(frozen=True)
class SolarQuery:
    """Light direction to reproduce with the host's sun."""

    target_direction: Vector3  # Unit vector pointing toward the sun


@dataclass(frozen=True)
class SolarResult:
    """Best-match solar parameters."""

    latitude: float  # Decimal degrees, -90..90
    longitude: float  # Decimal degrees, -180..180
    time: datetime  # UTC datetime (with tzinfo=utc)


@dataclass(frozen=True)
class SearchWindow:
    """Inclusive grid of candidate (latitude, longitude, time) points."""

    lat_min: float
    lat_max: float
    lat_step: float
    lon_min: float
    lon_max: float
    lon_step: float
    time_start: datetime
    time_end: datetime
    time_step: timedelta


@dataclass(frozen=True)
class SearchOutcome:
    """Best grid point found by one search stage."""

    result: SolarResult
    distance: float  # Squared Euclidean distance to the target direction
    evaluated: int  # Grid points with a defined sun direction
    skipped: int  # Grid points that were undefined or out of range
