from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .element_ref import ElementRef

PathStyle = Literal["css", "xpath"]
MatchKind = Literal["id", "test_attribute", "name"]


@dataclass(frozen=True, slots=True)
class AttributeMatch:
    kind: MatchKind
    attr_name: str
    value: str


@dataclass(frozen=True, slots=True)
class SelectorResult:
    css_scheme: str
    role_scheme: str
    xpath_scheme: str
    element: ElementRef = field(compare=False, repr=False)

    def as_dict(self) -> dict[str, str]:
        return {
            "css": self.css_scheme,
            "role": self.role_scheme,
            "xpath": self.xpath_scheme,
        }


@dataclass(frozen=True, slots=True)
class ElementInfo:
    tag: str
    element_id: str | None
    classes: str | None
    role: str | None = None
    name: str | None = None
    value: str | None = None


@dataclass(frozen=True, slots=True)
class TooltipPlacement:
    left: int
    top: int
