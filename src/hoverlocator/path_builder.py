from __future__ import annotations

from dataclasses import dataclass, field

from .element_ref import ElementRef, attr, index_among, tag_of
from .models import PathStyle
from .selector_rules import BOUNDARY_TAGS, ID_ATTR, css_id_selector, xpath_literal

CSS_SEPARATOR = " > "
XPATH_SEPARATOR = "/"


@dataclass(slots=True)
class AncestorWalk:
    """Nodes visited from the target upward, target first.

    ``anchor`` is the id-bearing node that ended the walk (always the last
    entry of ``chain``); ``boundary`` is the body/html element the walk stopped
    at, which is never part of ``chain``.
    """

    chain: list[ElementRef] = field(default_factory=list)
    anchor: ElementRef | None = None
    boundary: ElementRef | None = None


def walk_ancestors(element: ElementRef) -> AncestorWalk:
    walk = AncestorWalk()
    current: ElementRef | None = element
    while current is not None:
        if tag_of(current) in BOUNDARY_TAGS:
            walk.boundary = current
            break
        walk.chain.append(current)
        if attr(current, ID_ATTR):
            walk.anchor = current
            break
        current = current.parent
    return walk


def css_token(node: ElementRef) -> str:
    tag = tag_of(node)
    parent = node.parent
    if parent is None:
        return tag
    position = index_among(parent.children, node) + 1
    return f"{tag}:nth-child({position})"


def xpath_token(node: ElementRef) -> str:
    tag = tag_of(node)
    parent = node.parent
    if parent is None:
        return tag
    same_tag = [sibling for sibling in parent.children if tag_of(sibling) == tag]
    if len(same_tag) <= 1:
        return tag
    return f"{tag}[{index_among(same_tag, node) + 1}]"


def _absolute_xpath(node: ElementRef) -> str:
    tokens: list[str] = []
    current: ElementRef | None = node
    while current is not None:
        tokens.insert(0, xpath_token(current))
        current = current.parent
    return XPATH_SEPARATOR + XPATH_SEPARATOR.join(tokens)


def build_css_path(element: ElementRef) -> str:
    walk = walk_ancestors(element)
    if not walk.chain:
        return tag_of(element)

    tokens: list[str] = []
    for node in walk.chain:
        if node is walk.anchor:
            tokens.insert(0, css_id_selector(attr(node, ID_ATTR) or ""))
        else:
            tokens.insert(0, css_token(node))
    return CSS_SEPARATOR.join(tokens)


def build_xpath_path(element: ElementRef) -> str:
    walk = walk_ancestors(element)
    if not walk.chain:
        # The target is the boundary itself.
        return _absolute_xpath(element)

    tokens: list[str] = []
    for node in walk.chain:
        if node is walk.anchor:
            tokens.insert(0, f"//*[@id={xpath_literal(attr(node, ID_ATTR) or '')}]")
        else:
            tokens.insert(0, xpath_token(node))

    path = XPATH_SEPARATOR.join(tokens)
    if walk.anchor is None and walk.boundary is not None:
        return f"{_absolute_xpath(walk.boundary)}{XPATH_SEPARATOR}{path}"
    return path


def build_path(element: ElementRef, style: PathStyle) -> str:
    if style == "css":
        return build_css_path(element)
    if style == "xpath":
        return build_xpath_path(element)
    raise ValueError(f"Unsupported path style: {style!r}")
