from datetime import date

import pytest

from lightrenderer.config import ConfigError, RendererSettings, load_settings
from lightrenderer.models import Color, LightSource, Vector3
from lightrenderer.presets import (
    color_preset,
    constrain_light_position,
    light_properties,
    quick_position,
)


def test_defaults_when_environment_is_empty():
    settings = load_settings({})
    assert settings == RendererSettings()
    assert settings.ambient == 0.4
    assert settings.light_source() == LightSource(
        color=Color(255, 255, 200),
        position=Vector3(100.0, 100.0, 200.0),
        ambient=0.4,
        intensity=1.0,
    )
    assert settings.solver_settings().reference_date == date(2024, 3, 20)


def test_reads_every_variable():
    settings = load_settings(
        {
            "LIGHT_RENDERER_LIGHT_POSITION": "1, 2.5, 300",
            "LIGHT_RENDERER_LIGHT_COLOR": "gold",
            "LIGHT_RENDERER_AMBIENT": "0.25",
            "LIGHT_RENDERER_INTENSITY": "2",
            "LIGHT_RENDERER_REFERENCE_DATE": "2024-06-21",
            "LIGHT_RENDERER_LANG": "VI",
            "LIGHT_RENDERER_LOG_LEVEL": "debug",
        }
    )
    assert settings.light_position == Vector3(1.0, 2.5, 300.0)
    assert settings.light_color == Color(255, 215, 0)
    assert settings.ambient == 0.25
    assert settings.intensity == 2.0
    assert settings.reference_date == date(2024, 6, 21)
    assert settings.lang == "vi"
    assert settings.log_level == "DEBUG"


def test_numeric_values_are_clamped():
    settings = load_settings(
        {
            "LIGHT_RENDERER_AMBIENT": "1.5",
            "LIGHT_RENDERER_INTENSITY": "0",
            "LIGHT_RENDERER_LIGHT_COLOR": "300,-1,12",
        }
    )
    assert settings.ambient == 1.0
    assert settings.intensity == 0.1
    assert settings.light_color == Color(255, 0, 12)


def test_blank_values_fall_back_to_defaults():
    assert load_settings({"LIGHT_RENDERER_AMBIENT": "  "}) == RendererSettings()


@pytest.mark.parametrize(
    "key, value",
    [
        ("LIGHT_RENDERER_LIGHT_POSITION", "1,2"),
        ("LIGHT_RENDERER_LIGHT_COLOR", "sunset"),
        ("LIGHT_RENDERER_AMBIENT", "bright"),
        ("LIGHT_RENDERER_REFERENCE_DATE", "20/03/2024"),
        ("LIGHT_RENDERER_LANG", "fr"),
        ("LIGHT_RENDERER_LOG_LEVEL", "LOUD"),
    ],
)
def test_malformed_values_raise(key, value):
    with pytest.raises(ConfigError, match=key):
        load_settings({key: value})


def test_color_presets():
    assert color_preset("Gold") == Color(255, 215, 0)
    assert color_preset(" deeppink ") == Color(255, 20, 147)
    with pytest.raises(KeyError):
        color_preset("Sunset")


def test_quick_positions():
    center = Vector3(10.0, 20.0, 30.0)
    assert quick_position("top", center) == Vector3(10.0, 20.0, 180.0)
    assert quick_position("side", center) == Vector3(110.0, 120.0, 130.0)
    assert quick_position("front", center, depth=40.0) == Vector3(10.0, 60.0, 80.0)
    assert quick_position("back", center, depth=40.0) == Vector3(10.0, -20.0, 110.0)
    with pytest.raises(KeyError):
        quick_position("below", center)


def test_constrain_light_position():
    assert constrain_light_position(Vector3(-5000.0, 20.0, -3.0)) == Vector3(-1000.0, 20.0, 0.0)
    assert constrain_light_position(Vector3(1.0, 2000.0, 1500.0)) == Vector3(1.0, 1000.0, 1000.0)


def test_light_properties_clamps_dialog_values():
    light = light_properties(Vector3(0.0, 0.0, -10.0), 5.0, -0.2, 300, 128, -7)
    assert light == LightSource(
        color=Color(255, 128, 0),
        position=Vector3(0.0, 0.0, 0.0),
        ambient=0.0,
        intensity=3.0,
    )
