from __future__ import annotations

from dataclasses import dataclass

from .element_ref import ElementRef
from .models import SelectorResult
from .synthesis import synthesize

SCHEME_KEYS = ("css", "role", "xpath")


@dataclass(slots=True)
class InspectorController:
    """Owns the inspector's on/off switch and the currently highlighted element.

    The highlight only changes on hover and leave; synthesis never reads it.
    """

    active: bool = False
    highlighted: ElementRef | None = None
    last_result: SelectorResult | None = None

    def toggle(self) -> bool:
        return self.set_active(not self.active)

    def set_active(self, enabled: bool) -> bool:
        self.active = bool(enabled)
        if not self.active:
            self.highlighted = None
            self.last_result = None
        return self.active

    def hover(self, element: ElementRef | None) -> SelectorResult | None:
        if not self.active or element is None:
            return None
        self.highlighted = element
        self.last_result = synthesize(element)
        return self.last_result

    def leave(self) -> None:
        self.highlighted = None

    def selector_for(self, scheme: str) -> str | None:
        if self.last_result is None:
            return None
        key = scheme.strip().lower()
        if key not in SCHEME_KEYS:
            return None
        return self.last_result.as_dict()[key]
