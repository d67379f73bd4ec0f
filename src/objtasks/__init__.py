"""objtasks: a rectangle value, JSON helpers, and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.codec import from_json, to_json
from objtasks.errors import ObjtasksError, ParseError
from objtasks.model import Rectangle
from objtasks.selector import (
    Combinator,
    DuplicateSingletonError,
    FragmentKind,
    OutOfOrderError,
    Selector,
    SelectorError,
    css_selector_builder,
    parse_selector,
)

__all__ = [
    "__version__",
    "Combinator",
    "DuplicateSingletonError",
    "FragmentKind",
    "ObjtasksError",
    "OutOfOrderError",
    "ParseError",
    "Rectangle",
    "Selector",
    "SelectorError",
    "css_selector_builder",
    "from_json",
    "parse_selector",
    "to_json",
]
