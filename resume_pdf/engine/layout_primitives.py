"""Layout primitives shared by the layout engine and the PDF compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .styles import LineKind


@dataclass(frozen=True, slots=True)
class Line:
    """A styled line of résumé text, before wrapping and placement."""

    kind: LineKind
    text: str = ""


@dataclass(frozen=True, slots=True)
class PositionedLine:
    """A wrapped line placed on a page (baseline coordinates in points)."""

    kind: LineKind
    text: str
    font_size: float
    x: float
    y: float


@dataclass(slots=True)
class Page:
    number: int
    lines: List[PositionedLine] = field(default_factory=list)

    def add_line(self, line: PositionedLine) -> None:
        self.lines.append(line)

    def is_empty(self) -> bool:
        return not self.lines
