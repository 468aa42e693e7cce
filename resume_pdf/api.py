"""
High-level API for resume-pdf.

Quick Start:
    from resume_pdf import render_resume_pdf

    render_resume_pdf("data/resume.json", "resume.pdf")

Each call is a self-contained unit of work (read, lay out, serialize,
write) with no shared state, so independent calls may run in parallel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .engine import LayoutEngine, Locale, PageGeometry, StyleTable, ZH
from .loader import check_text_encodable, load_resume
from .models import ResumeRecord
from .pdfcompiler import PDFCompiler

logger = logging.getLogger(__name__)

RecordSource = Union[ResumeRecord, Dict[str, Any], str, Path]


def _to_record(source: RecordSource) -> ResumeRecord:
    if isinstance(source, ResumeRecord):
        return source
    if isinstance(source, dict):
        check_text_encodable(source)
        return ResumeRecord.from_dict(source)
    return load_resume(source)


def build_pdf_bytes(
    source: RecordSource,
    *,
    locale: Locale = ZH,
    geometry: Optional[PageGeometry] = None,
    styles: Optional[StyleTable] = None,
) -> bytes:
    """Lay out a résumé and return the PDF bytes.

    Args:
        source: ResumeRecord, decoded JSON dict, or path to a JSON file
        locale: Labels for headings and fixed phrases
        geometry: Page geometry (default: A4 with 42 pt margins)
        styles: Style table (default: StyleTable())

    Returns:
        PDF file contents
    """
    geometry = geometry or PageGeometry.a4()
    engine = LayoutEngine(geometry=geometry, styles=styles, locale=locale)
    record = _to_record(source)
    pages = engine.build_layout(record)
    return PDFCompiler(geometry).compile(pages)


def render_resume_pdf(
    source: RecordSource,
    output_path: Union[str, Path],
    *,
    locale: Locale = ZH,
    geometry: Optional[PageGeometry] = None,
    styles: Optional[StyleTable] = None,
) -> Path:
    """Lay out a résumé and write the PDF to ``output_path``.

    Returns:
        Path of the written file
    """
    data = build_pdf_bytes(source, locale=locale, geometry=geometry, styles=styles)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Wrote {output_path} ({len(data):,} bytes)")
    return output_path
