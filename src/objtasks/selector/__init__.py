from objtasks.selector.builder import Selector, SelectorBuilder, css_selector_builder
from objtasks.selector.errors import DuplicateSingletonError, OutOfOrderError, SelectorError
from objtasks.selector.kinds import Combinator, FragmentKind
from objtasks.selector.parser import parse_selector

__all__ = [
    "Combinator",
    "DuplicateSingletonError",
    "FragmentKind",
    "OutOfOrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "parse_selector",
]
