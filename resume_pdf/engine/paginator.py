"""Vertical flow and page breaking for styled lines."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .geometry import PageGeometry
from .layout_primitives import Line, Page, PositionedLine
from .styles import LineKind, StyleTable
from .text import wrap_with_prefix

logger = logging.getLogger(__name__)


class Paginator:
    """Wraps lines to the column width and distributes them over pages.

    A running cursor holds the baseline of the next line. It starts at the
    top margin of each page and moves down by the leading of every placed
    line. A new page is started whenever the next line would end below the
    bottom margin. Spacers only move the cursor and never break a page.
    """

    def __init__(self, geometry: PageGeometry, styles: StyleTable):
        geometry.validate()
        self.geometry = geometry
        self.styles = styles
        self._pages: List[Page] = []
        self._current = Page(number=1)
        self._cursor = geometry.top

    def paginate(self, lines: Sequence[Line]) -> List[Page]:
        """Lay out ``lines`` into pages.

        Args:
            lines: Ordered styled lines

        Returns:
            Non-empty list of pages in order
        """
        self._pages = []
        self._current = Page(number=1)
        self._cursor = self.geometry.top

        for line in lines:
            if line.kind.is_spacer:
                self._cursor -= self.styles.spacer_height(line.kind)
                continue

            padding = self.styles.padding_for(line.kind)
            self._cursor -= padding
            self._place_wrapped(line)
            self._cursor -= padding

        if not self._current.is_empty() or not self._pages:
            self._pages.append(self._current)

        logger.debug(f"Paginated {len(lines)} lines into {len(self._pages)} page(s)")
        return self._pages

    def _place_wrapped(self, line: Line) -> None:
        style = self.styles.style_for(line.kind)
        prefix = self.styles.bullet_prefix if line.kind is LineKind.BULLET else ""
        max_chars = self.styles.max_chars(style.size, self.geometry.usable_width)

        for text in wrap_with_prefix(line.text, max_chars, prefix):
            if self._cursor - style.leading < self.geometry.bottom:
                self._new_page()
            self._current.add_line(
                PositionedLine(
                    kind=line.kind,
                    text=text,
                    font_size=style.size,
                    x=self.geometry.margins.left,
                    y=self._cursor,
                )
            )
            self._cursor -= style.leading

    def _new_page(self) -> None:
        if not self._current.is_empty():
            self._pages.append(self._current)
            self._current = Page(number=len(self._pages) + 1)
        self._cursor = self.geometry.top
