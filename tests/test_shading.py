import math

import pytest

from lightrenderer.geometry import DegenerateDirectionError
from lightrenderer.models import WHITE, Color, FaceSample, LightingInput, LightSource, Vector3
from lightrenderer.shading import compute_lit_color, diffuse_intensity, lambert_factor, lighting_input

ORIGIN = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 0.0, 1.0)
OVERHEAD = Vector3(0.0, 0.0, 300.0)
BASE = Color(200, 100, 50)


def _input(**overrides) -> LightingInput:
    values = dict(
        base_color=BASE,
        light_color=WHITE,
        light_position=OVERHEAD,
        face_normal=UP,
        face_center=ORIGIN,
        ambient=0.4,
    )
    values.update(overrides)
    return LightingInput(**values)


def test_warm_light_facing_face():
    lit = compute_lit_color(
        LightingInput(
            base_color=Color(200, 150, 100),
            light_color=Color(255, 255, 200),
            light_position=OVERHEAD,
            face_normal=UP,
            face_center=ORIGIN,
            ambient=0.4,
        )
    )
    assert lit == Color(200, 150, 78)


def test_white_light_leaves_base_color_unchanged():
    assert compute_lit_color(_input()) == BASE


def test_perpendicular_face_gets_ambient_floor():
    lit = compute_lit_color(_input(face_normal=Vector3(1.0, 0.0, 0.0)))
    assert lit == Color(80, 40, 20)


def test_face_turned_away_gets_ambient_floor():
    lit = compute_lit_color(_input(face_normal=Vector3(0.0, 0.0, -1.0)))
    assert lit == Color(80, 40, 20)


def test_oblique_light():
    # 60 degrees off the normal: cosine 0.5, factor 0.4 + 0.6 * 0.5
    light = Vector3(100 * math.sqrt(3), 0.0, 100.0)
    lit = compute_lit_color(_input(light_position=light))
    assert lit == Color(140, 70, 35)


def test_light_intensity_scales_diffuse_term():
    light = Vector3(100 * math.sqrt(3), 0.0, 100.0)
    lit = compute_lit_color(_input(light_position=light, light_intensity=2.0))
    assert lit == BASE


def test_unnormalized_normal_is_normalized():
    assert compute_lit_color(_input(face_normal=Vector3(0.0, 0.0, 42.0))) == BASE


def test_missing_normal_faces_up():
    assert compute_lit_color(_input(face_normal=None)) == compute_lit_color(_input())


def test_ambient_is_clamped_not_rejected():
    sideways = Vector3(1.0, 0.0, 0.0)
    assert compute_lit_color(_input(face_normal=sideways, ambient=1.7)) == BASE
    assert compute_lit_color(_input(face_normal=sideways, ambient=-0.5)) == Color(0, 0, 0)


def test_light_on_face_center_is_degenerate():
    with pytest.raises(DegenerateDirectionError):
        compute_lit_color(_input(light_position=ORIGIN))


def test_zero_normal_is_degenerate():
    with pytest.raises(DegenerateDirectionError):
        compute_lit_color(_input(face_normal=Vector3(0.0, 0.0, 0.0)))


@pytest.mark.parametrize(
    "base, light, normal, ambient",
    [
        (Color(255, 255, 255), Color(255, 255, 255), UP, 1.0),
        (Color(0, 0, 0), Color(255, 0, 0), UP, 0.0),
        (Color(255, 128, 3), Color(17, 240, 255), Vector3(0.2, -0.7, 0.1), 0.25),
        (Color(90, 200, 10), Color(255, 215, 0), Vector3(-1.0, -1.0, -1.0), 3.0),
    ],
)
def test_channels_stay_in_byte_range(base, light, normal, ambient):
    lit = compute_lit_color(
        _input(base_color=base, light_color=light, face_normal=normal, ambient=ambient)
    )
    for channel in lit.as_tuple():
        assert isinstance(channel, int)
        assert 0 <= channel <= 255


def test_lambert_factor_bounds():
    assert lambert_factor(0.4, 0.0) == pytest.approx(0.4)
    assert lambert_factor(0.4, 1.0) == pytest.approx(1.0)
    assert lambert_factor(0.0, 0.25) == pytest.approx(0.25)


def test_diffuse_intensity_is_clamped():
    assert diffuse_intensity(Vector3(0.0, 0.0, -1.0), ORIGIN, OVERHEAD) == 0.0
    assert diffuse_intensity(UP, ORIGIN, OVERHEAD, light_intensity=3.0) == 1.0


def test_lighting_input_defaults_unset_color_to_white():
    light = LightSource(color=Color(255, 215, 0), position=OVERHEAD, ambient=0.3, intensity=1.5)
    lighting = lighting_input(FaceSample(normal=UP, center=ORIGIN, color=None), light)
    assert lighting.base_color == WHITE
    assert lighting.light_color == Color(255, 215, 0)
    assert lighting.ambient == 0.3
    assert lighting.light_intensity == 1.5
