from __future__ import annotations

from dataclasses import asdict
import logging
from typing import TYPE_CHECKING, Any

from playwright.sync_api import Error as PlaywrightError, sync_playwright

from .dom_extractor import capture_element
from .hover_overlay import describe_element, placement_from_payload, render_tooltip_html
from .inspector_controller import InspectorController
from .overlay_script import (
    COPY_BINDING,
    LEAVE_BINDING,
    PLACE_BINDING,
    STATE_BINDING,
    SYNTHESIZE_BINDING,
    TOGGLE_BINDING,
    build_overlay_script,
)
from .runtime_checks import MISSING_BROWSER_MESSAGE, is_closed_target_error, is_missing_browser_error
from .ui_state import SessionState, normalize_url

if TYPE_CHECKING:
    from playwright.sync_api import BrowserContext, ElementHandle


class BrowserManager:
    """Runs one headed Chromium page with the hover overlay installed.

    Page events reach Python through bindings exposed on the browser context;
    the Playwright sync API dispatches them on this thread while ``run`` waits
    for the page to close, so syntheses never overlap.
    """

    def __init__(self, state: SessionState, controller: InspectorController | None = None) -> None:
        self.state = state
        self.controller = controller or InspectorController(active=state.start_active)
        self.logger = logging.getLogger("hoverlocator.session")

    def run(self) -> int:
        url = normalize_url(self.state.url)
        if not url:
            self.logger.error("Please enter a URL.")
            return 1

        with sync_playwright() as playwright:
            try:
                browser = playwright.chromium.launch(headless=self.state.headless)
            except PlaywrightError as exc:
                if is_missing_browser_error(exc):
                    self.logger.error(MISSING_BROWSER_MESSAGE)
                else:
                    self.logger.error("Failed to launch Chromium: %s", exc)
                return 1

            try:
                context = browser.new_context(
                    viewport={"width": self.state.viewport_width, "height": self.state.viewport_height}
                )
                self.install(context)
                page = context.new_page()
                self.logger.info("Opening %s", url)
                page.goto(url, wait_until="domcontentloaded")
                self.logger.info("Inspector ready. Alt+Shift+I toggles, Alt+Shift+1/2/3 copies.")
                page.wait_for_event("close", timeout=0)
            except PlaywrightError as exc:
                if not is_closed_target_error(exc):
                    self.logger.exception("Hover session failed")
                    return 1
            finally:
                self._close_browser(browser)

        self.logger.info("Session ended.")
        return 0

    def install(self, context: BrowserContext) -> None:
        context.expose_binding(SYNTHESIZE_BINDING, self._on_synthesize, handle=True)
        context.expose_binding(PLACE_BINDING, self._on_place)
        context.expose_binding(TOGGLE_BINDING, self._on_toggle)
        context.expose_binding(STATE_BINDING, self._on_state)
        context.expose_binding(LEAVE_BINDING, self._on_leave)
        context.expose_binding(COPY_BINDING, self._on_copy)
        context.add_init_script(build_overlay_script())

    def _on_synthesize(self, _source: Any, element: ElementHandle) -> dict[str, str] | None:
        try:
            if not self.controller.active:
                return None
            snapshot = capture_element(element)
        except PlaywrightError as exc:
            self.logger.exception("Element capture failed", exc_info=exc)
            return None
        finally:
            self._dispose(element)

        result = self.controller.hover(snapshot)
        if result is None or snapshot is None:
            return None

        self.logger.debug(
            "Hover <%s>: %s | %s | %s",
            snapshot.tag_name,
            result.css_scheme,
            result.role_scheme,
            result.xpath_scheme,
        )
        payload = result.as_dict()
        payload["html"] = render_tooltip_html(describe_element(snapshot), result)
        return payload

    def _on_place(self, _source: Any, pointer: Any, size: Any) -> dict[str, int] | None:
        placement = placement_from_payload(pointer, size)
        return asdict(placement) if placement else None

    def _on_toggle(self, _source: Any) -> bool:
        active = self.controller.toggle()
        self.logger.info("Inspector %s.", "on" if active else "off")
        return active

    def _on_state(self, _source: Any) -> bool:
        return self.controller.active

    def _on_leave(self, _source: Any) -> None:
        self.controller.leave()

    def _on_copy(self, _source: Any, scheme: Any) -> str | None:
        selector = self.controller.selector_for(str(scheme or ""))
        if selector:
            self.logger.info("Copied %s selector: %s", scheme, selector)
        return selector

    def _dispose(self, element: ElementHandle) -> None:
        try:
            element.dispose()
        except PlaywrightError as exc:
            self.logger.debug("Element handle already released: %s", exc)

    def _close_browser(self, browser: Any) -> None:
        try:
            browser.close()
        except PlaywrightError as exc:
            self.logger.debug("Browser already closed: %s", exc)
