from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .dom_tree import DomNode

if TYPE_CHECKING:
    from playwright.sync_api import ElementHandle

OVERLAY_MARKER_ATTR = "data-hoverlocator-overlay"

CAPTURE_SCRIPT = """
(el) => {
  const marker = '%s';
  const chain = [];
  let current = el;
  while (current && current.nodeType === Node.ELEMENT_NODE) {
    const attrs = {};
    for (const attr of Array.from(current.attributes || [])) {
      attrs[attr.name] = attr.value;
    }
    const parent = current.parentElement;
    const siblings = parent
      ? Array.from(parent.children).filter((node) => !node.hasAttribute(marker))
      : [];
    chain.push({
      tag: (current.tagName || '').toLowerCase(),
      attributes: attrs,
      sibling_tags: siblings.map((node) => (node.tagName || '').toLowerCase()),
      index: parent ? siblings.indexOf(current) : null,
    });
    current = parent;
  }

  const secret = (el.getAttribute('type') || '').toLowerCase() === 'password';
  const value = !secret && typeof el.value === 'string' ? el.value : null;
  return {
    chain,
    text: el.textContent || '',
    value,
  };
}
""" % OVERLAY_MARKER_ATTR


def capture_element(element: ElementHandle) -> DomNode | None:
    """Snapshot a live element with its ancestors and their sibling tags."""
    payload: Any = element.evaluate(CAPTURE_SCRIPT)
    if not isinstance(payload, dict):
        return None
    return DomNode.from_snapshot(payload)
