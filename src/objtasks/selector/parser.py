"""Lark parser that replays selector text through :class:`Selector`.

Every compound selector in the text is rebuilt with the fragment methods,
so ordering rules are enforced exactly as for hand-built selectors, and the
compounds are joined with :meth:`Selector.combine`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from objtasks.errors import ParseError
from objtasks.selector.builder import Selector
from objtasks.selector.kinds import Combinator, FragmentKind

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

Fragment = tuple[FragmentKind, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a parse tree into compounds and combinator tokens.

    The result of ``start`` alternates ``list[Fragment]`` and ``str``.
    """

    def element_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.ELEMENT, str(items[0]))

    def id_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.ID, str(items[0]))

    def class_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.CLASS, str(items[0]))

    def attr_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.ATTRIBUTE, str(items[0]))

    def pseudo_class_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.PSEUDO_CLASS, str(items[0]))

    def pseudo_element_part(self, items: list[Token]) -> Fragment:
        return (FragmentKind.PSEUDO_ELEMENT, str(items[0]))

    def compound(self, items: list[Fragment]) -> list[Fragment]:
        return list(items)

    def combinator(self, items: list[Token]) -> str:
        # Whitespace alone is the descendant combinator.
        return str(items[0]) if items else Combinator.DESCENDANT.value

    def start(self, items: list[object]) -> list[object]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _build_compound(fragments: list[Fragment]) -> Selector:
    selector = Selector()
    for kind, value in fragments:
        selector.append(kind, value)
    return selector


def _assemble(items: list[object]) -> Selector:
    """Fold compounds left to right with their combinators."""
    result = _build_compound(items[0])  # type: ignore[arg-type]
    for i in range(1, len(items), 2):
        combinator = str(items[i])
        right = _build_compound(items[i + 1])  # type: ignore[arg-type]
        result = Selector.combine(result, combinator, right)
    return result


def parse_selector(source: str) -> Selector:
    """Parse selector text into a :class:`Selector`.

    Raises :class:`ParseError` for text the grammar rejects, and the
    assembler's :class:`OutOfOrderError` or :class:`DuplicateSingletonError`
    for well-formed text whose parts are misordered or repeated.
    """
    try:
        tree = _parser().parse(source.strip())
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    items = SelectorTransformer().transform(tree)
    logger.debug("Parsed %r into %d compound(s)", source, (len(items) + 1) // 2)
    return _assemble(items)
