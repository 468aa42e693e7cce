"""Main PDF compiler - converts positioned pages to PDF."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..engine.geometry import PageGeometry
from ..engine.layout_primitives import Page
from ..exceptions import CompilationError
from .objects import PdfObjectTable, PdfStream
from .resources import PdfCidFont
from .utils import format_coordinate
from .writer import PdfWriter

logger = logging.getLogger(__name__)


class PDFCompiler:
    """Builds the PDF object graph for a sequence of pages.

    Object numbers are fixed by construction: the Type0 font, its CID
    descendant and the font descriptor take 1-3; page ``i`` (0-based) gets
    its content stream at ``4 + 2i`` and its page dictionary at ``5 + 2i``;
    the pages root and the catalog come last.
    """

    def __init__(self, geometry: Optional[PageGeometry] = None, font: Optional[PdfCidFont] = None):
        self.geometry = geometry or PageGeometry.a4()
        self.geometry.validate()
        self.font = font or PdfCidFont()

    def compile(self, pages: Sequence[Page]) -> bytes:
        """Compile pages to PDF bytes.

        Args:
            pages: Ordered pages from the layout engine

        Returns:
            PDF file contents

        Raises:
            CompilationError: If ``pages`` is empty
            ObjectTableError: If the object graph is inconsistent
        """
        if not pages:
            raise CompilationError("Cannot compile a PDF without pages")

        table, catalog_obj_num = self._build_object_table(pages)
        data = PdfWriter().serialize(table, catalog_obj_num)
        logger.info(f"Compiled {len(pages)} page(s) into {len(table)} PDF objects ({len(data):,} bytes)")
        return data

    def compile_to(self, pages: Sequence[Page], output_path: str | Path) -> Path:
        """Compile pages and write the PDF to ``output_path``."""
        if not pages:
            raise CompilationError("Cannot compile a PDF without pages")
        table, catalog_obj_num = self._build_object_table(pages)
        return PdfWriter().write(table, catalog_obj_num, output_path)

    def _build_object_table(self, pages: Sequence[Page]) -> tuple[PdfObjectTable, int]:
        table = PdfObjectTable()

        font_obj_num = table.reserve()
        cid_font_obj_num = table.reserve()
        descriptor_obj_num = table.reserve()

        slots: List[tuple[int, int]] = []
        for _ in pages:
            content_obj_num = table.reserve()
            page_obj_num = table.reserve()
            slots.append((content_obj_num, page_obj_num))

        pages_obj_num = table.reserve()
        catalog_obj_num = table.reserve()

        table.set(font_obj_num, self.font.type0_body(cid_font_obj_num))
        table.set(cid_font_obj_num, self.font.cid_font_body(descriptor_obj_num))
        table.set(descriptor_obj_num, self.font.descriptor_body())

        resources = self.font.resources_body(font_obj_num)
        for page, (content_obj_num, page_obj_num) in zip(pages, slots):
            table.set(content_obj_num, self._content_stream(page).to_object_body())
            table.set(page_obj_num, self._page_body(pages_obj_num, content_obj_num, resources))

        kids = " ".join(f"{page_obj_num} 0 R" for _, page_obj_num in slots)
        table.set(pages_obj_num, f"<< /Type /Pages /Count {len(slots)} /Kids [{kids}] >>")
        table.set(catalog_obj_num, f"<< /Type /Catalog /Pages {pages_obj_num} 0 R >>")

        return table, catalog_obj_num

    def _content_stream(self, page: Page) -> PdfStream:
        stream = PdfStream()
        for line in page.lines:
            stream.add_text(self.font.alias, line.font_size, line.x, line.y, line.text)
        return stream

    def _page_body(self, pages_obj_num: int, content_obj_num: int, resources: str) -> str:
        width = format_coordinate(self.geometry.width)
        height = format_coordinate(self.geometry.height)
        return (
            f"<< /Type /Page /Parent {pages_obj_num} 0 R\n"
            f"  /MediaBox [0 0 {width} {height}]\n"
            f"  /Resources {resources}\n"
            f"  /Contents {content_obj_num} 0 R\n"
            f">>"
        )
