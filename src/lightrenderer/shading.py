"""Reflectance shading — Lambert diffuse term with an ambient floor and light tint."""

import logging

from lightrenderer.color import scale, tint
from lightrenderer.geometry import UP, clamp, direction_between, dot, normalize
from lightrenderer.models import (
    WHITE,
    Color,
    FaceSample,
    LightingInput,
    LightSource,
    Vector3,
)

logger = logging.getLogger(__name__)

DEFAULT_AMBIENT = 0.4


def lambert_factor(ambient: float, intensity: float) -> float:
    """Brightness multiplier in 0..1: ambient floor plus the remaining share scaled by intensity."""
    ambient = clamp(ambient, 0.0, 1.0)
    return clamp(ambient + (1.0 - ambient) * intensity, 0.0, 1.0)


def diffuse_intensity(
    face_normal: Vector3 | None,
    face_center: Vector3,
    light_position: Vector3,
    light_intensity: float = 1.0,
) -> float:
    """Cosine of the angle between the face normal and the direction to the light, in 0..1.

    A face without a normal is treated as facing straight up. That is a coarse
    fallback for host entities that cannot report one, not a real normal.

    Raises:
        DegenerateDirectionError: If the light sits on the face center or the
            normal has zero length.
    """
    to_light = direction_between(face_center, light_position)
    if face_normal is None:
        logger.debug("Face at %s has no normal; using up-vector", face_center)
        face_normal = UP
    cosine = dot(normalize(face_normal), to_light)
    return clamp(cosine * light_intensity, 0.0, 1.0)


def compute_lit_color(lighting: LightingInput) -> Color:
    """Compute the display color of one face under a point light.

    Args:
        lighting: Base color, light color/position, face normal/center and
            ambient level. Ambient outside 0..1 is clamped, not rejected.

    Returns:
        The tinted base color dimmed by the Lambert factor.

    Raises:
        DegenerateDirectionError: On a zero-length light direction or normal.
    """
    tinted = tint(lighting.base_color, lighting.light_color)
    intensity = diffuse_intensity(
        lighting.face_normal,
        lighting.face_center,
        lighting.light_position,
        lighting.light_intensity,
    )
    return scale(tinted, lambert_factor(lighting.ambient, intensity))


def lighting_input(sample: FaceSample, light: LightSource) -> LightingInput:
    """Combine a host face sample with the light configuration. Unset colors default to white."""
    return LightingInput(
        base_color=sample.color if sample.color is not None else WHITE,
        light_color=light.color,
        light_position=light.position,
        face_normal=sample.normal,
        face_center=sample.center,
        ambient=light.ambient,
        light_intensity=light.intensity,
    )
