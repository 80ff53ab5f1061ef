import logging

import lightrenderer.preview as preview
from lightrenderer.i18n import t
from lightrenderer.renderers.static import save_static_preview
from lightrenderer.setup_logging import setup_logging


def test_t_falls_back_to_english_then_key():
    assert t("select_object", "vi") == "Vui lòng chọn một đối tượng"
    assert t("select_object", "ja") == "Please select an object"
    assert t("missing_key", "en") == "missing_key"


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "lightrenderer.log"
    setup_logging("DEBUG", log_file)
    logging.getLogger("lightrenderer.test").debug("hello")

    root = logging.getLogger()
    for handler in root.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def test_preview_main(monkeypatch, tmp_path, capsys):
    for key in ("LIGHT_POSITION", "LIGHT_COLOR", "AMBIENT", "INTENSITY", "REFERENCE_DATE", "LOG_LEVEL"):
        monkeypatch.delenv(f"LIGHT_RENDERER_{key}", raising=False)
    monkeypatch.setenv("LIGHT_RENDERER_LANG", "en")
    monkeypatch.setattr(preview, "load_dotenv", lambda: False)
    monkeypatch.setattr(
        preview,
        "save_static_preview",
        lambda report: save_static_preview(report, tmp_path / "preview.png"),
    )

    preview.main()

    out = capsys.readouterr().out
    assert "6 faces lit, 0 skipped" in out
    assert "Sun placed at lat" in out
    assert "Original materials restored" in out
    assert (tmp_path / "preview.png").exists()

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
