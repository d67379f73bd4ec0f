"""Fluent CSS selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be appended in that order.  Class, attribute and pseudo-class
parts may repeat; element, id and pseudo-element may appear once.  Two
selectors are joined with :meth:`Selector.combine`::

    Selector.combine(
        css_selector_builder.element("div").id("main"),
        "+",
        css_selector_builder.element("table").class_("data"),
    ).stringify()
    # 'div#main + table.data'
"""

from __future__ import annotations

import logging

from objtasks.selector.errors import DuplicateSingletonError, OutOfOrderError
from objtasks.selector.kinds import Combinator, FragmentKind

__all__ = ["Selector", "SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


def is_duplicate_singleton(kind: FragmentKind, last: FragmentKind | None) -> bool:
    """True if *kind* repeats a singleton kind appended just before it."""
    return last is not None and kind is last and kind.singleton


def is_out_of_order(kind: FragmentKind, last: FragmentKind | None) -> bool:
    """True if *kind* ranks below the previously appended kind."""
    return last is not None and kind.rank < last.rank


class Selector:
    """An accumulating selector string plus the last appended fragment kind.

    Append methods mutate the selector in place and return it for chaining.
    A rejected append raises before anything is written.
    """

    def __init__(self) -> None:
        self._text = ""
        self._last: FragmentKind | None = None

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> Selector:
        """Append *value* as a fragment of *kind*.

        Raises :class:`DuplicateSingletonError` if *kind* is a singleton
        that was just appended, and :class:`OutOfOrderError` if *kind*
        ranks below the previous fragment.
        """
        if is_duplicate_singleton(kind, self._last):
            logger.debug("Rejected duplicate %s %r after %r", kind, value, self._text)
            raise DuplicateSingletonError(kind=kind, last_kind=self._last)
        if is_out_of_order(kind, self._last):
            logger.debug("Rejected %s %r after %s", kind, value, self._last)
            raise OutOfOrderError(kind=kind, last_kind=self._last)
        self._text += kind.render(value)
        self._last = kind
        return self

    # --- combination ----------------------------------------------------------

    @classmethod
    def combine(
        cls, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        """Return a new selector joining *left* and *right* with *combinator*.

        The token is not validated.  The result has no last fragment, so a
        later append starts a fresh ordered run on the combined text.
        """
        combined = cls()
        combined._text = f"{left._text} {combinator} {right._text}"
        logger.debug("Combined selector %r", combined._text)
        return combined

    # --- output ---------------------------------------------------------------

    @property
    def last_kind(self) -> FragmentKind | None:
        return self._last

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Selector({self._text!r})"


class SelectorBuilder:
    """Stateless facade: every call starts a fresh :class:`Selector`."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        return Selector.combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
