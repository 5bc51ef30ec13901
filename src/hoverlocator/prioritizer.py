from __future__ import annotations

from .element_ref import ElementRef, attr
from .models import AttributeMatch
from .selector_rules import ID_ATTR, NAME_ATTR, TEST_ATTR_PRIORITY


def prioritize(element: ElementRef) -> AttributeMatch | None:
    """Return the element's most stable identifying attribute.

    Order: ``id``, then ``data-cy``, ``data-test``, ``data-testid``, then
    ``name``. Blank values are skipped.
    """
    id_value = attr(element, ID_ATTR)
    if id_value:
        return AttributeMatch(kind="id", attr_name=ID_ATTR, value=id_value)

    for attr_name in TEST_ATTR_PRIORITY:
        value = attr(element, attr_name)
        if value:
            return AttributeMatch(kind="test_attribute", attr_name=attr_name, value=value)

    name_value = attr(element, NAME_ATTR)
    if name_value:
        return AttributeMatch(kind="name", attr_name=NAME_ATTR, value=name_value)
    return None
