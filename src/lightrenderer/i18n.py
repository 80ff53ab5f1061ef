"""Simple two-language (en/vi) translation helper for host-facing messages."""

_STRINGS: dict[str, dict[str, str]] = {
    "plugin_name": {
        "en": "Light Renderer",
        "vi": "Light Renderer",
    },
    "select_object": {
        "en": "Please select an object",
        "vi": "Vui lòng chọn một đối tượng",
    },
    "render_started": {
        "en": "Rendering started. Light effects applied.",
        "vi": "Đã bắt đầu render. Hiệu ứng ánh sáng đã được áp dụng.",
    },
    "render_stopped": {
        "en": "Rendering stopped. Original materials restored.",
        "vi": "Đã dừng render. Vật liệu gốc đã được khôi phục.",
    },
    "render_summary": {
        "en": "{painted} faces lit, {skipped} skipped",
        "vi": "Đã chiếu sáng {painted} mặt, bỏ qua {skipped}",
    },
    "invalid_direction": {
        "en": "Invalid light direction!",
        "vi": "Hướng ánh sáng không hợp lệ!",
    },
    "sun_placed": {
        "en": "Sun placed at lat {lat:.1f}°, lng {lng:.1f}°, {time}",
        "vi": "Mặt trời đặt tại vĩ độ {lat:.1f}°, kinh độ {lng:.1f}°, {time}",
    },
    "no_solution": {
        "en": "No sun position matches this light direction.",
        "vi": "Không tìm được vị trí mặt trời phù hợp với hướng sáng này.",
    },
    "preview_saved": {
        "en": "Saved: {path}",
        "vi": "Đã lưu: {path}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
