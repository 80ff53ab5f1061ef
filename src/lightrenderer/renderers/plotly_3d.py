"""Plotly 3D interactive preview of a lighting pass.

Face centers are drawn in their lit colors, together with the light marker,
the light rays toward the model center, and optionally the solved sun direction.
"""

import numpy as np
import plotly.graph_objects as go

from lightrenderer.models import RenderReport, SolarResult, Vector3
from lightrenderer.solar import sun_direction

_BG = "#1b1b1b"
_LIGHT_COLOR = "#ffffc8"
_RAY_COLOR = "#ffff96"
_SUN_COLOR = "#ffa500"

# Parallel rays drawn beside the main ray, offset on x and y
_RAY_OFFSETS = ((15.0, 0.0), (-15.0, 0.0), (0.0, 15.0), (0.0, -15.0))


def model_center(report: RenderReport) -> Vector3:
    """Mean of the shaded face centers (origin when nothing was shaded)."""
    if not report.shaded:
        return Vector3(0.0, 0.0, 0.0)
    pts = np.array([(f.center.x, f.center.y, f.center.z) for f in report.shaded])
    x, y, z = pts.mean(axis=0)
    return Vector3(float(x), float(y), float(z))


def _ray_segments(start: Vector3, end: Vector3) -> tuple[list, list, list]:
    """Main ray plus offset rays, as one trace using None separators."""
    xs: list[float | None] = [start.x, end.x, None]
    ys: list[float | None] = [start.y, end.y, None]
    zs: list[float | None] = [start.z, end.z, None]
    for dx, dy in _RAY_OFFSETS:
        xs += [start.x + dx, end.x + dx, None]
        ys += [start.y + dy, end.y + dy, None]
        zs += [start.z, end.z, None]
    return xs, ys, zs


def render_plotly_scene(
    report: RenderReport,
    sun: SolarResult | None = None,
    show_rays: bool = True,
) -> go.Figure:
    """Render a lighting pass as a Plotly 3D figure.

    Args:
        report: Result of a lighting pass.
        sun: Solved sun position. When given, an arrow from the model center
            shows the direction the host's sun will shine from.
        show_rays: Draw the light rays toward the model center.

    Returns:
        Plotly Figure object.
    """
    light = report.light.position
    center = model_center(report)

    face_trace = go.Scatter3d(
        x=[f.center.x for f in report.shaded],
        y=[f.center.y for f in report.shaded],
        z=[f.center.z for f in report.shaded],
        mode="markers",
        marker=dict(
            size=10,
            color=[f"rgb({f.lit_color.r},{f.lit_color.g},{f.lit_color.b})" for f in report.shaded],
            line=dict(width=0),
        ),
        name="faces",
    )

    light_trace = go.Scatter3d(
        x=[light.x],
        y=[light.y],
        z=[light.z],
        mode="markers",
        marker=dict(size=8, color=_LIGHT_COLOR, symbol="diamond"),
        name="light",
    )

    # Drop line from the light to the ground plane
    drop_trace = go.Scatter3d(
        x=[light.x, light.x],
        y=[light.y, light.y],
        z=[light.z, 0.0],
        mode="lines",
        line=dict(color=_LIGHT_COLOR, width=2, dash="dot"),
        hoverinfo="skip",
        name="drop",
    )

    traces = [face_trace, light_trace, drop_trace]

    if show_rays:
        xs, ys, zs = _ray_segments(light, center)
        traces.append(
            go.Scatter3d(
                x=xs,
                y=ys,
                z=zs,
                mode="lines",
                line=dict(color=_RAY_COLOR, width=2, dash="dash"),
                hoverinfo="skip",
                name="rays",
            )
        )

    if sun is not None:
        d = sun_direction(sun.latitude, sun.longitude, sun.time)
        reach = max(
            float(np.linalg.norm([light.x - center.x, light.y - center.y, light.z - center.z])),
            1.0,
        )
        traces.append(
            go.Scatter3d(
                x=[center.x, center.x + d.x * reach],
                y=[center.y, center.y + d.y * reach],
                z=[center.z, center.z + d.z * reach],
                mode="lines",
                line=dict(color=_SUN_COLOR, width=4),
                name="sun",
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        scene=dict(
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            zaxis=dict(visible=False),
            aspectmode="data",
            bgcolor=_BG,
        ),
    )

    return fig
