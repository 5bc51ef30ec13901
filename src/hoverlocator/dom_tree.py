from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass(eq=False, slots=True)
class DomNode:
    """In-memory element used for captured snapshots and hand-built trees.

    ``text`` is the node's own text; ``text_content`` appends the text of every
    descendant, which is enough for locator text even though the interleaving
    of text and child elements is not kept.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    value: str | None = None
    children: list[DomNode] = field(default_factory=list, repr=False)
    parent: DomNode | None = field(default=None, repr=False)

    @property
    def tag_name(self) -> str:
        return self.tag.lower()

    @property
    def text_content(self) -> str:
        parts = [self.text]
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            parts.append(node.text)
            stack.extend(reversed(node.children))
        return "".join(parts)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def append(self, child: DomNode) -> DomNode:
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children: Iterable[DomNode]) -> DomNode:
        for child in children:
            self.append(child)
        return self

    @classmethod
    def from_snapshot(cls, payload: Mapping[str, Any]) -> DomNode | None:
        """Rebuild a captured element and its ancestor chain.

        ``payload["chain"]`` runs from the target up to the topmost ancestor.
        Each entry carries ``tag``, ``attributes``, ``sibling_tags`` (tags of
        the parent's element children) and ``index`` (position among them, or
        ``None`` when the node had no parent). Siblings become tag-only stubs.
        """
        chain = [item for item in payload.get("chain", []) if isinstance(item, Mapping)]
        if not chain:
            return None

        nodes = [
            cls(
                tag=str(item.get("tag") or "").lower() or "*",
                attributes={str(k): str(v) for k, v in dict(item.get("attributes") or {}).items()},
            )
            for item in chain
        ]

        for level in range(len(chain) - 2, -1, -1):
            parent_node = nodes[level + 1]
            node = nodes[level]
            sibling_tags = [str(tag).lower() for tag in chain[level].get("sibling_tags") or []]
            index = _coerce_index(chain[level].get("index"), len(sibling_tags))
            if index is None:
                parent_node.append(node)
                continue
            for position, sibling_tag in enumerate(sibling_tags):
                parent_node.append(node if position == index else cls(tag=sibling_tag or "*"))

        target = nodes[0]
        target.text = str(payload.get("text") or "")
        raw_value = payload.get("value")
        target.value = str(raw_value) if raw_value is not None else None
        return target


def _coerce_index(raw: Any, sibling_count: int) -> int | None:
    try:
        index = int(raw)
    except (TypeError, ValueError):
        return None
    if index < 0 or index >= sibling_count:
        return None
    return index
