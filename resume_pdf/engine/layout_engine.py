"""Layout engine: résumé record in, positioned pages out."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import ResumeRecord
from .geometry import PageGeometry
from .layout_primitives import Page
from .line_builder import ResumeLineBuilder
from .locale import ZH, Locale
from .paginator import Paginator
from .styles import StyleTable

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Builds the pages of a résumé.

    Page geometry is validated on construction, so a bad geometry is
    rejected before any layout work starts.
    """

    def __init__(
        self,
        geometry: Optional[PageGeometry] = None,
        styles: Optional[StyleTable] = None,
        locale: Locale = ZH,
    ) -> None:
        self.geometry = geometry or PageGeometry.a4()
        self.geometry.validate()
        self.styles = styles or StyleTable()
        self.locale = locale
        self.line_builder = ResumeLineBuilder(locale)

    def build_layout(self, record: ResumeRecord) -> List[Page]:
        """Lay out ``record``.

        Args:
            record: Résumé record

        Returns:
            Ordered, non-empty list of pages
        """
        lines = self.line_builder.build(record)
        pages = Paginator(self.geometry, self.styles).paginate(lines)
        logger.info(f"Layout complete: {len(lines)} lines on {len(pages)} page(s)")
        return pages
