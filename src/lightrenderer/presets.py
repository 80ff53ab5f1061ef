"""Named light colors, quick light placements, and light-property clamping."""

from lightrenderer.color import make_color
from lightrenderer.geometry import add, clamp
from lightrenderer.models import Color, LightSource, Vector3

COLOR_PRESETS: dict[str, Color] = {
    "AliceBlue": Color(240, 248, 255),
    "AntiqueWhite": Color(250, 235, 215),
    "Aqua": Color(0, 255, 255),
    "Gold": Color(255, 215, 0),
    "Cyan": Color(0, 255, 255),
    "Magenta": Color(255, 0, 255),
    "Orange": Color(255, 165, 0),
    "DeepPink": Color(255, 20, 147),
    "White": Color(255, 255, 255),
    "Black": Color(0, 0, 0),
}

QUICK_POSITIONS = ("top", "side", "front", "back")

# Drag bounds of the light marker: (min, max) per axis
POSITION_BOUNDS = ((-1000.0, 1000.0), (-1000.0, 1000.0), (0.0, 1000.0))

INTENSITY_RANGE = (0.1, 3.0)
AMBIENT_RANGE = (0.0, 1.0)


def color_preset(name: str) -> Color:
    """Look up a named color. Matching ignores case.

    Raises:
        KeyError: If no preset has that name.
    """
    for key, color in COLOR_PRESETS.items():
        if key.lower() == name.strip().lower():
            return color
    raise KeyError(f"Unknown color preset: {name}")


def quick_position(name: str, center: Vector3, depth: float = 0.0) -> Vector3:
    """Standard light placements around a model.

    Args:
        name: One of "top", "side", "front", "back".
        center: Model bounding-box center.
        depth: Model depth along y; front/back lights sit that far out.

    Returns:
        Light position in model space.

    Raises:
        KeyError: If name is not a known placement.
    """
    offsets = {
        "top": Vector3(0.0, 0.0, 150.0),
        "side": Vector3(100.0, 100.0, 100.0),
        "front": Vector3(0.0, depth, 50.0),
        "back": Vector3(0.0, -depth, 80.0),
    }
    if name not in offsets:
        raise KeyError(f"Unknown quick position: {name}")
    return add(center, offsets[name])


def constrain_light_position(position: Vector3) -> Vector3:
    (x_lo, x_hi), (y_lo, y_hi), (z_lo, z_hi) = POSITION_BOUNDS
    return Vector3(
        clamp(position.x, x_lo, x_hi),
        clamp(position.y, y_lo, y_hi),
        clamp(position.z, z_lo, z_hi),
    )


def light_properties(
    position: Vector3,
    intensity: float,
    ambient: float,
    red: float,
    green: float,
    blue: float,
) -> LightSource:
    """Build a LightSource from free-form property values, clamping each into range."""
    return LightSource(
        color=make_color(red, green, blue),
        position=constrain_light_position(position),
        ambient=clamp(ambient, *AMBIENT_RANGE),
        intensity=clamp(intensity, *INTENSITY_RANGE),
    )
