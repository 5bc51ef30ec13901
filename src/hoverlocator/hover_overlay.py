from __future__ import annotations

from html import escape
from typing import Any, Mapping

from .element_ref import ElementRef, attr, tag_of
from .models import ElementInfo, SelectorResult, TooltipPlacement
from .selector_rules import CLASS_ATTR, ID_ATTR, NAME_ATTR, ROLE_ATTR, TYPE_ATTR, normalize_space

TOOLTIP_OFFSET = 10
SECRET_INPUT_TYPES = frozenset({"password"})


def describe_element(element: ElementRef) -> ElementInfo:
    raw_value = getattr(element, "value", None)
    if raw_value is None:
        raw_value = element.get_attribute("value")
    if (attr(element, TYPE_ATTR) or "").strip().lower() in SECRET_INPUT_TYPES:
        raw_value = None
    return ElementInfo(
        tag=tag_of(element),
        element_id=attr(element, ID_ATTR),
        classes=normalize_space(element.get_attribute(CLASS_ATTR)) or None,
        role=attr(element, ROLE_ATTR),
        name=attr(element, NAME_ATTR),
        value=str(raw_value) if raw_value not in (None, "") else None,
    )


def render_tooltip_html(info: ElementInfo, result: SelectorResult) -> str:
    rows = [
        f"Tag: {escape(info.tag)}",
        f"ID: {escape(info.element_id or 'none')}",
        f"Classes: {escape(info.classes or 'none')}",
    ]
    if info.role:
        rows.append(f"Role: {escape(info.role)}")
    if info.name:
        rows.append(f"Name: {escape(info.name)}")
    if info.value:
        rows.append(f"Value: {escape(info.value)}")

    sections = [
        ("Cypress", result.css_scheme, "1"),
        ("Playwright", result.role_scheme, "2"),
        ("Selenium", result.xpath_scheme, "3"),
    ]
    parts = [
        '<div class="hoverlocator-section">',
        "<strong>Element Info:</strong><br>",
        "<br>".join(rows),
        "</div>",
    ]
    for label, selector, shortcut in sections:
        parts.extend(
            [
                '<div class="hoverlocator-section">',
                f"<strong>{label}:</strong> <span class=\"hoverlocator-hint\">Alt+Shift+{shortcut}</span><br>",
                f"<code>{escape(selector)}</code>",
                "</div>",
            ]
        )
    return "".join(parts)


def place_tooltip(
    pointer_x: float,
    pointer_y: float,
    width: float,
    height: float,
    viewport_width: float,
    viewport_height: float,
    offset: int = TOOLTIP_OFFSET,
) -> TooltipPlacement:
    """Place the tooltip below-right of the pointer, pulled back inside the viewport."""
    left = int(round(pointer_x)) + offset
    top = int(round(pointer_y)) + offset
    box_width = max(0, int(round(width)))
    box_height = max(0, int(round(height)))
    view_width = max(1, int(round(viewport_width)))
    view_height = max(1, int(round(viewport_height)))

    if left + box_width > view_width:
        left = view_width - box_width - offset
    if top + box_height > view_height:
        top = view_height - box_height - offset
    return TooltipPlacement(left=max(0, left), top=max(0, top))


def placement_from_payload(
    pointer: Mapping[str, Any] | None,
    size: Mapping[str, Any] | None,
) -> TooltipPlacement | None:
    if not isinstance(pointer, Mapping) or not isinstance(size, Mapping):
        return None
    try:
        return place_tooltip(
            float(pointer.get("x", 0)),
            float(pointer.get("y", 0)),
            float(size.get("width", 0)),
            float(size.get("height", 0)),
            float(pointer.get("viewport_width", 0)),
            float(pointer.get("viewport_height", 0)),
        )
    except (TypeError, ValueError):
        return None
