"""In-memory scene host: plain groups and faces for previews and tests."""

from dataclasses import dataclass, field

from lightrenderer.models import Color, FaceSample, Vector3


@dataclass
class MemoryFace:
    name: str
    center: Vector3
    normal: Vector3 | None
    color: Color | None = None  # None = default material


@dataclass
class MemoryGroup:
    name: str
    children: list["MemoryFace | MemoryGroup"] = field(default_factory=list)


class MemoryScene:
    """SceneHost over MemoryGroup / MemoryFace trees. Anything else is ignored."""

    def children_of(self, node: object) -> list["MemoryFace | MemoryGroup"] | None:
        if isinstance(node, MemoryGroup):
            return node.children
        return None

    def is_paintable(self, node: object) -> bool:
        return isinstance(node, MemoryFace)

    def sample(self, node: MemoryFace) -> FaceSample:
        return FaceSample(normal=node.normal, center=node.center, color=node.color)

    def paint(self, node: MemoryFace, color: Color | None) -> None:
        node.color = color


def box_scene(
    center: Vector3 = Vector3(0.0, 0.0, 50.0),
    size: float = 100.0,
    color: Color | None = None,
) -> MemoryGroup:
    """Axis-aligned box as a group of six faces, normals pointing outward."""
    h = size / 2
    c = center
    sides = [
        ("top", Vector3(c.x, c.y, c.z + h), Vector3(0.0, 0.0, 1.0)),
        ("bottom", Vector3(c.x, c.y, c.z - h), Vector3(0.0, 0.0, -1.0)),
        ("east", Vector3(c.x + h, c.y, c.z), Vector3(1.0, 0.0, 0.0)),
        ("west", Vector3(c.x - h, c.y, c.z), Vector3(-1.0, 0.0, 0.0)),
        ("north", Vector3(c.x, c.y + h, c.z), Vector3(0.0, 1.0, 0.0)),
        ("south", Vector3(c.x, c.y - h, c.z), Vector3(0.0, -1.0, 0.0)),
    ]
    return MemoryGroup(
        name="box",
        children=[MemoryFace(name, center_, normal, color) for name, center_, normal in sides],
    )
