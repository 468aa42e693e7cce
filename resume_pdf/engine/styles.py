"""Line kinds and the style table used by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class LineKind(str, Enum):
    """Kinds of lines produced from a résumé record."""

    HEADING_1 = "h1"
    HEADING_2 = "h2"
    HEADING_3 = "h3"
    META = "meta"
    BULLET = "bullet"
    SPACER = "spacer"
    SPACER_SMALL = "spacer-sm"
    BODY = "body"

    @property
    def is_spacer(self) -> bool:
        return self in (LineKind.SPACER, LineKind.SPACER_SMALL)


@dataclass(frozen=True, slots=True)
class LineStyle:
    """Font size and leading (baseline-to-baseline distance), in points."""

    size: float
    leading: float


def _default_styles() -> Dict[LineKind, LineStyle]:
    return {
        LineKind.HEADING_1: LineStyle(size=18, leading=24),
        LineKind.HEADING_2: LineStyle(size=14, leading=20),
        LineKind.HEADING_3: LineStyle(size=12, leading=18),
        LineKind.META: LineStyle(size=10, leading=14),
        LineKind.BODY: LineStyle(size=11, leading=16),
    }


@dataclass(slots=True)
class StyleTable:
    """Typography and vertical rhythm for every line kind.

    Bullets are set in the body style behind ``bullet_prefix``. Kinds without
    an entry in ``styles`` fall back to the body style.
    """

    styles: Dict[LineKind, LineStyle] = field(default_factory=_default_styles)
    bullet_prefix: str = "• "
    spacer: float = 10.0
    spacer_small: float = 6.0
    heading_padding: float = 2.0
    # Approximate advance of one character relative to the font size.
    char_width_factor: float = 0.92
    min_chars_per_line: int = 16

    def style_for(self, kind: LineKind) -> LineStyle:
        if kind is LineKind.BULLET:
            kind = LineKind.BODY
        return self.styles.get(kind, self.styles[LineKind.BODY])

    def spacer_height(self, kind: LineKind) -> float:
        if kind is LineKind.SPACER:
            return self.spacer
        if kind is LineKind.SPACER_SMALL:
            return self.spacer_small
        return 0.0

    def padding_for(self, kind: LineKind) -> float:
        """Extra space added both before and after a line of ``kind``."""
        if kind is LineKind.HEADING_2:
            return self.heading_padding
        return 0.0

    def max_chars(self, font_size: float, usable_width: float) -> int:
        """Characters that fit on one line at ``font_size``."""
        return max(self.min_chars_per_line, int(usable_width // (font_size * self.char_width_factor)))
