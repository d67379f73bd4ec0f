"""Errors raised while assembling a selector."""
from __future__ import annotations

from objtasks.errors import ObjtasksError
from objtasks.selector.kinds import FragmentKind


class SelectorError(ObjtasksError):
    """Base error for a rejected selector fragment.

    The selector the fragment was appended to must not be built further.
    """

    default_message = "Invalid selector fragment"

    def __init__(
        self,
        message: str | None = None,
        *,
        kind: FragmentKind | None = None,
        last_kind: FragmentKind | None = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.kind = kind
        self.last_kind = last_kind


class OutOfOrderError(SelectorError):
    """A fragment ranked lower than the previous one was appended."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


class DuplicateSingletonError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    default_message = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )
