from __future__ import annotations

from pathlib import Path

from lxml import html as lxml_html
from lxml.html import HtmlElement, InputElement, TextareaElement


class LxmlElement:
    """Adapts an lxml HTML element to ``ElementRef``.

    Comments and processing instructions are skipped when listing children.
    Two wrappers compare equal when they wrap the same lxml node.
    """

    __slots__ = ("_element",)

    def __init__(self, element: HtmlElement) -> None:
        self._element = element

    @property
    def element(self) -> HtmlElement:
        return self._element

    @property
    def tag_name(self) -> str:
        tag = self._element.tag
        return tag.lower() if isinstance(tag, str) else ""

    @property
    def parent(self) -> LxmlElement | None:
        parent = self._element.getparent()
        return LxmlElement(parent) if parent is not None else None

    @property
    def children(self) -> list[LxmlElement]:
        return [LxmlElement(child) for child in self._element if isinstance(child.tag, str)]

    @property
    def text_content(self) -> str:
        return self._element.text_content()

    @property
    def value(self) -> str | None:
        if isinstance(self._element, (InputElement, TextareaElement)):
            return self._element.value
        return self._element.get("value")

    def get_attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LxmlElement):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"LxmlElement(<{self.tag_name}>)"


def parse_document(markup: str | bytes) -> LxmlElement:
    return LxmlElement(lxml_html.document_fromstring(markup))


def load_document(path: Path) -> LxmlElement:
    return parse_document(path.read_bytes())


def find_elements(root: LxmlElement, xpath: str) -> list[LxmlElement]:
    matches = root.element.xpath(xpath)
    if not isinstance(matches, list):
        return []
    return [LxmlElement(item) for item in matches if isinstance(item, HtmlElement) and isinstance(item.tag, str)]
