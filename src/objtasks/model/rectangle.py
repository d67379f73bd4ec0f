"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair with an area operation.

    Dimensions are not validated; negative or NaN values pass through.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
