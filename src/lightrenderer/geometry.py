"""Vector math shared by the shader and the solar solver."""

import math

from lightrenderer.models import Vector3

UP = Vector3(0.0, 0.0, 1.0)

_EPSILON_LENGTH = 1e-12


class DegenerateDirectionError(ValueError):
    """A direction was requested from a zero-length vector."""


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def length(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def squared_distance(a: Vector3, b: Vector3) -> float:
    d = subtract(a, b)
    return dot(d, d)


def normalize(v: Vector3) -> Vector3:
    """Return v scaled to unit length.

    Raises:
        DegenerateDirectionError: If v has (numerically) zero length.
    """
    n = length(v)
    if n < _EPSILON_LENGTH:
        raise DegenerateDirectionError(f"Cannot normalize zero-length vector {v}")
    return Vector3(v.x / n, v.y / n, v.z / n)


def direction_between(origin: Vector3, target: Vector3) -> Vector3:
    """Unit vector pointing from origin toward target."""
    return normalize(subtract(target, origin))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
