"""Fragment kinds, their ranks, and combinator tokens."""
from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """One category of compound-selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return RANKS[self]

    @property
    def singleton(self) -> bool:
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Return *value* wrapped in this kind's selector syntax."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


class Combinator(StrEnum):
    """Tokens that join two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


# Order in which parts must appear inside one compound selector.
RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 1,
    FragmentKind.ID: 2,
    FragmentKind.CLASS: 3,
    FragmentKind.ATTRIBUTE: 4,
    FragmentKind.PSEUDO_CLASS: 5,
    FragmentKind.PSEUDO_ELEMENT: 6,
}

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
