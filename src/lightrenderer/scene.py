"""Host layer — walks a host selection through capability queries and paints lit colors.

The host never exposes its own types here. It answers four questions about
opaque nodes: what are your children, can you be painted, what do you look
like, and please take this color.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Protocol

from lightrenderer.geometry import DegenerateDirectionError
from lightrenderer.models import Color, FaceSample, LightSource, RenderReport, ShadedFace
from lightrenderer.shading import compute_lit_color, lighting_input

logger = logging.getLogger(__name__)

_END = object()


class SceneHost(Protocol):
    def children_of(self, node: Any) -> Iterable[Any] | None:
        """Child nodes of a container (group, component), or None for a leaf."""
        ...

    def is_paintable(self, node: Any) -> bool:
        """True for face-like leaves that accept a color."""
        ...

    def sample(self, node: Any) -> FaceSample: ...

    def paint(self, node: Any, color: Color | None) -> None:
        """Assign a display color. None clears the material."""
        ...


def iter_paintable(host: SceneHost, selection: Iterable[Any]) -> Iterator[Any]:
    """Yield paintable leaves under selection, depth-first, in host order."""
    stack: list[Iterator[Any]] = [iter(selection)]
    while stack:
        node = next(stack[-1], _END)
        if node is _END:
            stack.pop()
            continue
        children = host.children_of(node)
        if children is not None:
            stack.append(iter(children))
        elif host.is_paintable(node):
            yield node


def apply_lighting(host: SceneHost, selection: Iterable[Any], light: LightSource) -> RenderReport:
    """Shade every paintable face under selection.

    A face the shader cannot handle (light on its center, zero-length normal)
    keeps its current color and is listed in RenderReport.skipped; the rest
    of the selection is still painted.
    """
    shaded: list[ShadedFace] = []
    skipped: list[str] = []
    for node in iter_paintable(host, selection):
        sample = host.sample(node)
        lighting = lighting_input(sample, light)
        try:
            lit = compute_lit_color(lighting)
        except DegenerateDirectionError as e:
            logger.warning("Skipping face at %s: %s", sample.center, e)
            skipped.append(f"{sample.center}: {e}")
            continue
        host.paint(node, lit)
        shaded.append(
            ShadedFace(
                center=sample.center,
                normal=sample.normal,
                base_color=lighting.base_color,
                lit_color=lit,
            )
        )

    logger.info("Lighting pass: %d painted, %d skipped", len(shaded), len(skipped))
    return RenderReport(light=light, shaded=tuple(shaded), skipped=tuple(skipped))


class LightingSession:
    """Render/restore cycle over one selection.

    start() remembers each face's original color before the first pass.
    Every update() shades from those originals, so passes never compound.
    stop() puts the originals back.
    """

    def __init__(self, host: SceneHost) -> None:
        self._host = host
        self._active = False
        self._selection: tuple[Any, ...] = ()
        self._originals: list[tuple[Any, Color | None]] = []
        self.last_report: RenderReport | None = None

    @property
    def active(self) -> bool:
        return self._active

    def start(self, selection: Iterable[Any], light: LightSource) -> RenderReport:
        if self.active:
            self.stop()
        self._selection = tuple(selection)
        self._active = True
        self._originals = [
            (node, self._host.sample(node).color)
            for node in iter_paintable(self._host, self._selection)
        ]
        logger.info("Lighting session started over %d faces", len(self._originals))
        return self.update(light)

    def update(self, light: LightSource) -> RenderReport:
        """Re-apply lighting after the light changed.

        Raises:
            RuntimeError: If the session has not been started.
        """
        if not self.active:
            raise RuntimeError("Lighting session is not active")
        self._restore()
        self.last_report = apply_lighting(self._host, self._selection, light)
        return self.last_report

    def _restore(self) -> int:
        for node, color in self._originals:
            self._host.paint(node, color)
        return len(self._originals)

    def stop(self) -> int:
        """Restore original colors and end the session. Returns the number of faces restored."""
        restored = self._restore()
        self._active = False
        self._selection = ()
        self._originals = []
        logger.info("Lighting session stopped, %d faces restored", restored)
        return restored
