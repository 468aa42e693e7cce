"""Geometry primitives for page layout."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import GeometryError


A4_WIDTH = 595.28
A4_HEIGHT = 841.89
DEFAULT_MARGIN = 42.0


@dataclass(slots=True)
class Size:
    width: float
    height: float


@dataclass(slots=True)
class Margins:
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Margins":
        return cls(value, value, value, value)


@dataclass(slots=True)
class PageGeometry:
    """Page size and margins, in PDF points."""

    size: Size = field(default_factory=lambda: Size(A4_WIDTH, A4_HEIGHT))
    margins: Margins = field(default_factory=lambda: Margins.uniform(DEFAULT_MARGIN))

    @classmethod
    def a4(cls, margin: float = DEFAULT_MARGIN) -> "PageGeometry":
        return cls(Size(A4_WIDTH, A4_HEIGHT), Margins.uniform(margin))

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def usable_width(self) -> float:
        return self.size.width - self.margins.left - self.margins.right

    @property
    def top(self) -> float:
        """Baseline of the first line on a page."""
        return self.size.height - self.margins.top

    @property
    def bottom(self) -> float:
        return self.margins.bottom

    def validate(self) -> None:
        """Reject geometry that cannot hold any text.

        Raises:
            GeometryError: If a dimension is zero or negative, a margin is
                negative, or the margins leave no printable area
        """
        if self.size.width <= 0 or self.size.height <= 0:
            raise GeometryError(
                "Page dimensions must be positive",
                f"{self.size.width} x {self.size.height}",
            )
        margins = (self.margins.top, self.margins.bottom, self.margins.left, self.margins.right)
        if any(value < 0 for value in margins):
            raise GeometryError("Page margins must not be negative", str(margins))
        if self.usable_width <= 0:
            raise GeometryError("Margins leave no printable width", f"usable width {self.usable_width}")
        if self.top <= self.bottom:
            raise GeometryError("Margins leave no printable height", f"top {self.top}, bottom {self.bottom}")
