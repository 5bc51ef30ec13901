import logging
from pathlib import Path
from typing import Iterator

import pytest

import hoverlocator.__main__ as cli
import hoverlocator.browser_manager as browser_manager
import hoverlocator.ui_state as ui_state
from hoverlocator.ui_state import SessionState, load_session_state

PAGE = """
<html>
  <body>
    <form>
      <input name="email">
      <button id="submit-btn">Submit</button>
      <button>Cancel</button>
    </form>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(cli, "CONFIG_DIR", tmp_path / "config")
    yield
    logger = logging.getLogger("hoverlocator")
    logger.propagate = True
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _write_page(tmp_path: Path) -> Path:
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    return page


def test_locate_prints_all_three_schemes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    page = _write_page(tmp_path)

    assert cli.main(["locate", str(page), "//button"]) == 0

    out = capsys.readouterr().out
    assert "[1] <button>" in out
    assert "Cypress:    cy.get('#submit-btn')" in out
    assert "Playwright: page.locator('#submit-btn')" in out
    assert 'Selenium:   driver.find_element(By.CSS_SELECTOR, "#submit-btn")' in out
    assert "[2] <button>" in out
    assert "Cypress:    cy.contains('button', 'Cancel')" in out
    assert 'Selenium:   driver.find_element(By.XPATH, "/html/body/form/button[2]")' in out
    assert (tmp_path / "config" / "session.log").exists()


def test_locate_reports_no_match_and_bad_input(tmp_path: Path) -> None:
    page = _write_page(tmp_path)

    assert cli.main(["locate", str(page), "//table"]) == 1
    assert cli.main(["locate", str(page), "//["]) == 1
    assert cli.main(["locate", str(tmp_path / "missing.html"), "//button"]) == 1

    empty = tmp_path / "empty.html"
    empty.write_text("", encoding="utf-8")
    assert cli.main(["locate", str(empty), "//button"]) == 1


def test_usage_errors_exit_with_code_two() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["inspect", "--viewport", "wide"])
    assert excinfo.value.code == 2


class FakeBrowserManager:
    runs: list[SessionState] = []

    def __init__(self, state: SessionState) -> None:
        self.state = state

    def run(self) -> int:
        FakeBrowserManager.runs.append(self.state)
        return 0


def test_inspect_flags_apply_to_a_single_run(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setattr(ui_state, "CONFIG_PATH", config_path)
    monkeypatch.setattr(browser_manager, "BrowserManager", FakeBrowserManager)
    monkeypatch.setattr(FakeBrowserManager, "runs", [])

    assert cli.main(["inspect", "https://example.org", "--active", "--headless"]) == 0
    assert cli.main(["inspect"]) == 0
    assert cli.main(["inspect", "--no-active", "--no-headless"]) == 0

    assert [run.start_active for run in FakeBrowserManager.runs] == [True, False, False]
    assert [run.headless for run in FakeBrowserManager.runs] == [True, False, False]
    assert [run.url for run in FakeBrowserManager.runs] == ["https://example.org"] * 3

    saved = load_session_state(config_path)
    assert saved.start_active is False
    assert saved.headless is False


def test_inspect_uses_saved_flags_when_omitted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config" / "config.json"
    ui_state.save_session_state(SessionState(start_active=True, headless=True), config_path)
    monkeypatch.setattr(ui_state, "CONFIG_PATH", config_path)
    monkeypatch.setattr(browser_manager, "BrowserManager", FakeBrowserManager)
    monkeypatch.setattr(FakeBrowserManager, "runs", [])

    assert cli.main(["inspect"]) == 0
    assert cli.main(["inspect", "--no-active"]) == 0

    assert [run.start_active for run in FakeBrowserManager.runs] == [True, False]
    assert [run.headless for run in FakeBrowserManager.runs] == [True, True]
