from __future__ import annotations

from .element_ref import ElementRef
from .formatters import format_css_scheme, format_role_scheme, format_xpath_scheme
from .models import SelectorResult


def synthesize(element: ElementRef | None) -> SelectorResult | None:
    """Build the Cypress, Playwright and Selenium locators for one element.

    Every call reads the element afresh; nothing is cached between calls.
    """
    if element is None:
        return None
    return SelectorResult(
        css_scheme=format_css_scheme(element),
        role_scheme=format_role_scheme(element),
        xpath_scheme=format_xpath_scheme(element),
        element=element,
    )
