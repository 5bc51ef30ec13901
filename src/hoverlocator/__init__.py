from __future__ import annotations

from .element_ref import ElementRef
from .models import AttributeMatch, SelectorResult
from .path_builder import build_path
from .prioritizer import prioritize
from .synthesis import synthesize

__version__ = "0.1.0"

__all__ = [
    "AttributeMatch",
    "ElementRef",
    "SelectorResult",
    "build_path",
    "prioritize",
    "synthesize",
]
