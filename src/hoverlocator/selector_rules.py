from __future__ import annotations

import re

ID_ATTR = "id"
NAME_ATTR = "name"
ROLE_ATTR = "role"
CLASS_ATTR = "class"
TYPE_ATTR = "type"

TEST_ATTR_PRIORITY = (
    "data-cy",
    "data-test",
    "data-testid",
)

INTERACTIVE_TAGS = frozenset({"button", "a"})
BOUNDARY_TAGS = frozenset({"body", "html"})

_CSS_SAFE_ID_PATTERN = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")

_LITERAL_CONTROL_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def normalize_space(value: str | None) -> str:
    if not value:
        return ""
    return re.sub(r"\s+", " ", str(value)).strip()


def split_classes(raw: str | None) -> list[str]:
    """Split a class attribute on whitespace, keeping duplicates and order."""
    if not raw:
        return []
    return raw.split()


def is_css_safe_id(value: str) -> bool:
    return bool(_CSS_SAFE_ID_PATTERN.fullmatch(value))


def escape_css_string(value: str, quote: str = '"') -> str:
    return value.replace("\\", "\\\\").replace(quote, f"\\{quote}")


def escape_css_identifier(value: str) -> str:
    """Escape an identifier the way ``CSS.escape`` does in browsers."""
    escaped: list[str] = []
    length = len(value)
    for index, char in enumerate(value):
        code = ord(char)
        if code == 0:
            escaped.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char.isdigit() and char.isascii():
            escaped.append(f"\\{code:x} ")
        elif index == 1 and char.isdigit() and char.isascii() and value[0] == "-":
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and length == 1:
            escaped.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "".join(escaped)


def css_id_selector(value: str, quote: str = '"') -> str:
    if is_css_safe_id(value):
        return f"#{value}"
    return f"[id={quote}{escape_css_string(value, quote)}{quote}]"


def css_attribute_selector(attr: str, value: str, quote: str = '"') -> str:
    return f"[{attr}={quote}{escape_css_string(value, quote)}{quote}]"


def css_class_selector(class_name: str) -> str:
    return f".{escape_css_identifier(class_name)}"


def xpath_literal(value: str) -> str:
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    pieces = value.split("'")
    quoted = [f"'{piece}'" for piece in pieces]
    return "concat(" + ", \"'\", ".join(quoted) + ")"


def _escape_literal(value: str, quote: str) -> str:
    escaped = value.replace("\\", "\\\\").replace(quote, f"\\{quote}")
    for raw, replacement in _LITERAL_CONTROL_ESCAPES.items():
        escaped = escaped.replace(raw, replacement)
    return escaped


def js_string(value: str) -> str:
    """Return ``value`` as a single-quoted JavaScript string literal."""
    return "'" + _escape_literal(value, "'") + "'"


def py_string(value: str) -> str:
    """Return ``value`` as a double-quoted Python string literal."""
    return '"' + _escape_literal(value, '"') + '"'
