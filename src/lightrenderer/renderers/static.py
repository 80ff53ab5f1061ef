"""Matplotlib static PNG renderer — base vs lit color swatches per face."""

from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from lightrenderer.models import RenderReport

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#1b1b1b"
_TEXT_COLOR = "#e8e8e8"


def render_static_preview(report: RenderReport, swatch_size: float = 1.2) -> Figure:
    """Render a RenderReport as two rows of swatches: base colors above, lit colors below.

    Args:
        report: Result of a lighting pass.
        swatch_size: Width of one swatch in inches.

    Returns:
        matplotlib Figure object.
    """
    count = max(len(report.shaded), 1)
    fig, ax = plt.subplots(figsize=(swatch_size * count + 1.5, swatch_size * 2 + 1))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    base = np.array([f.base_color.as_tuple() for f in report.shaded], dtype=float) / 255
    lit = np.array([f.lit_color.as_tuple() for f in report.shaded], dtype=float) / 255

    for i, face in enumerate(report.shaded):
        ax.add_patch(Rectangle((i, 1.05), 0.9, 0.9, color=base[i]))
        ax.add_patch(Rectangle((i, 0.0), 0.9, 0.9, color=lit[i]))
        label = f"{face.lit_color.r},{face.lit_color.g},{face.lit_color.b}"
        ax.text(i + 0.45, -0.15, label, color=_TEXT_COLOR, ha="center", va="top", fontsize=7)

    ax.text(-0.1, 1.5, "base", color=_TEXT_COLOR, ha="right", va="center")
    ax.text(-0.1, 0.45, "lit", color=_TEXT_COLOR, ha="right", va="center")

    light = report.light
    ax.set_title(
        f"light {light.color.as_tuple()} at ({light.position.x:g}, {light.position.y:g}, "
        f"{light.position.z:g}), ambient {light.ambient:g}",
        color=_TEXT_COLOR,
        fontsize=9,
    )
    ax.set_xlim(-0.8, count)
    ax.set_ylim(-0.5, 2.1)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_preview(report: RenderReport, output_path: Path | None = None) -> Path:
    """Save a RenderReport preview as a PNG file.

    Args:
        report: Result of a lighting pass.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        stamp = datetime.now().strftime("%Y_%m_%d_%H_%M_%S")
        output_path = _ROOT / "results" / f"lighting__{stamp}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_preview(report)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
