from __future__ import annotations

from .element_ref import ElementRef, attr, class_tokens, tag_of, visible_text
from .models import AttributeMatch
from .path_builder import build_path
from .prioritizer import prioritize
from .selector_rules import (
    ID_ATTR,
    INTERACTIVE_TAGS,
    ROLE_ATTR,
    css_attribute_selector,
    css_class_selector,
    css_id_selector,
    js_string,
    py_string,
)

CYPRESS_FINDER = "cy"
PLAYWRIGHT_FINDER = "page"
SELENIUM_FINDER = "driver"


def attribute_selector(match: AttributeMatch, quote: str = '"') -> str:
    if match.kind == "id":
        return css_id_selector(match.value, quote)
    return css_attribute_selector(match.attr_name, match.value, quote)


def _interactive_text(element: ElementRef) -> str | None:
    if tag_of(element) not in INTERACTIVE_TAGS:
        return None
    return visible_text(element) or None


def format_css_scheme(element: ElementRef, finder: str = CYPRESS_FINDER) -> str:
    match = prioritize(element)
    if match:
        return f"{finder}.get({js_string(attribute_selector(match))})"

    text = _interactive_text(element)
    if text:
        return f"{finder}.contains({js_string(tag_of(element))}, {js_string(text)})"

    classes = class_tokens(element)
    if len(classes) == 1:
        return f"{finder}.get({js_string(css_class_selector(classes[0]))})"

    return f"{finder}.get({js_string(build_path(element, 'css'))})"


def format_role_scheme(element: ElementRef, finder: str = PLAYWRIGHT_FINDER) -> str:
    # id wins outright here; data-cy/data-test/name are not consulted.
    id_value = attr(element, ID_ATTR)
    if id_value:
        return f"{finder}.locator({js_string(css_id_selector(id_value))})"

    role = (attr(element, ROLE_ATTR) or "").strip()
    if role:
        text = visible_text(element)
        if text:
            return f"{finder}.getByRole({js_string(role)}, {{ name: {js_string(text)} }})"
        return f"{finder}.getByRole({js_string(role)})"

    text = _interactive_text(element)
    if text:
        return f"{finder}.getByText({js_string(text)})"

    return f"{finder}.locator({js_string(build_path(element, 'css'))})"


def format_xpath_scheme(element: ElementRef, finder: str = SELENIUM_FINDER) -> str:
    match = prioritize(element)
    if match:
        selector = attribute_selector(match, quote="'")
        return f"{finder}.find_element(By.CSS_SELECTOR, {py_string(selector)})"
    return f"{finder}.find_element(By.XPATH, {py_string(build_path(element, 'xpath'))})"
