from pathlib import Path

import pytest

from hoverlocator.ui_state import (
    SessionState,
    load_session_state,
    normalize_url,
    normalize_viewport_size,
    parse_viewport,
    save_session_state,
)


def test_session_state_roundtrip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    original = SessionState(
        url="https://example.org/login",
        viewport_width=1440,
        viewport_height=900,
        start_active=True,
        headless=True,
    )
    assert save_session_state(original, config_path) == (True, None)
    assert load_session_state(config_path) == original
    assert not list(config_path.parent.glob("*.tmp"))


def test_session_state_load_fallbacks(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    assert load_session_state(config_path) == SessionState()
    config_path.write_text("{invalid", encoding="utf-8")
    assert load_session_state(config_path) == SessionState()
    config_path.write_text("[1, 2]", encoding="utf-8")
    assert load_session_state(config_path) == SessionState()
    config_path.write_text('{"viewport_width": "wide", "viewport_height": 10}', encoding="utf-8")
    loaded = load_session_state(config_path)
    assert (loaded.viewport_width, loaded.viewport_height) == (1280, 240)


def test_save_reports_unwritable_folder(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a folder", encoding="utf-8")
    ok, message = save_session_state(SessionState(), blocker / "config.json")
    assert ok is False
    assert message and message.startswith("Could not create config folder")


def test_viewport_parsing_and_clamping() -> None:
    assert parse_viewport("1440x900") == (1440, 900)
    assert parse_viewport(" 200 X 100 ") == (320, 240)
    with pytest.raises(ValueError):
        parse_viewport("wide")
    assert normalize_viewport_size(None, "x") == (1280, 720)


def test_normalize_url() -> None:
    assert normalize_url("example.com") == "https://example.com"
    assert normalize_url("http://localhost:3000") == "http://localhost:3000"
    assert normalize_url("file:///tmp/page.html") == "file:///tmp/page.html"
    assert normalize_url("   ") == ""
