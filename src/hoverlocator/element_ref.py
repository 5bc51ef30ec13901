from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .selector_rules import CLASS_ATTR, normalize_space, split_classes


@runtime_checkable
class ElementRef(Protocol):
    """Read-only view of one element in a document tree.

    ``children`` lists element children only, in document order. ``parent`` is
    ``None`` for the document element and for detached nodes.
    """

    @property
    def tag_name(self) -> str: ...

    @property
    def parent(self) -> ElementRef | None: ...

    @property
    def children(self) -> Sequence[ElementRef]: ...

    @property
    def text_content(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...


def attr(element: ElementRef, name: str) -> str | None:
    """Return the attribute value, or ``None`` when missing or blank."""
    raw = element.get_attribute(name)
    if raw is None:
        return None
    value = str(raw)
    return value if value.strip() else None


def tag_of(element: ElementRef) -> str:
    return (element.tag_name or "").strip().lower() or "*"


def visible_text(element: ElementRef) -> str:
    # Collapses inner whitespace runs as well as trimming, matching how
    # cy.contains and Playwright text locators normalize the text they match.
    return normalize_space(element.text_content)


def class_tokens(element: ElementRef) -> list[str]:
    return split_classes(element.get_attribute(CLASS_ATTR))


def index_among(siblings: Sequence[ElementRef], element: ElementRef) -> int:
    for index, sibling in enumerate(siblings):
        if sibling == element:
            return index
    raise ValueError(f"<{tag_of(element)}> is not a child of its parent")
