import matplotlib
import pytest

from lightrenderer.memory import MemoryFace, MemoryGroup
from lightrenderer.models import Color, LightSource, Vector3

matplotlib.use("Agg")


@pytest.fixture
def overhead_light() -> LightSource:
    return LightSource(color=Color(255, 255, 255), position=Vector3(0.0, 0.0, 300.0), ambient=0.4)


@pytest.fixture
def nested_selection() -> list:
    """Face, group with a nested group, and an object the host cannot paint."""
    top = MemoryFace("top", Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), Color(200, 100, 50))
    side = MemoryFace("side", Vector3(10.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Color(200, 100, 50))
    bare = MemoryFace("bare", Vector3(0.0, 10.0, 0.0), Vector3(0.0, 0.0, 1.0))
    inner = MemoryGroup("inner", [side, "edge"])
    outer = MemoryGroup("outer", [inner, bare])
    return [top, outer]
