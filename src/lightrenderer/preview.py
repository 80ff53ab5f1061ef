"""CLI entry point for a lighting preview.

Configure the light in .env (see README), then run:
    uv run python -m lightrenderer.preview
"""

import logging

from dotenv import load_dotenv

from lightrenderer.config import load_settings
from lightrenderer.geometry import DegenerateDirectionError
from lightrenderer.i18n import t
from lightrenderer.memory import MemoryScene, box_scene
from lightrenderer.renderers.plotly_3d import model_center
from lightrenderer.renderers.static import save_static_preview
from lightrenderer.scene import LightingSession
from lightrenderer.setup_logging import setup_logging
from lightrenderer.shadows import shadow_settings
from lightrenderer.solar import NoSolutionFoundError, solve_for_light

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    settings = load_settings()
    setup_logging(settings.log_level)
    lang = settings.lang
    light = settings.light_source()

    scene = MemoryScene()
    selection = [box_scene()]
    session = LightingSession(scene)
    report = session.start(selection, light)
    print(t("render_started", lang))
    print(t("render_summary", lang).format(painted=report.painted_count, skipped=len(report.skipped)))

    try:
        sun = solve_for_light(light.position, model_center(report), settings.solver_settings())
    except DegenerateDirectionError:
        print(t("invalid_direction", lang))
    except NoSolutionFoundError:
        print(t("no_solution", lang))
    else:
        shadows = shadow_settings(sun)
        print(
            t("sun_placed", lang).format(
                lat=sun.latitude, lng=sun.longitude, time=shadows["ShadowTime"].isoformat()
            )
        )
        logger.debug("Shadow settings: %s", shadows)

    path = save_static_preview(report)
    print(t("preview_saved", lang).format(path=path))

    session.stop()
    print(t("render_stopped", lang))


if __name__ == "__main__":
    main()
