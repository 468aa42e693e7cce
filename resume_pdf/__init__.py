"""
resume-pdf - lay out a JSON résumé and write it as a minimal PDF.

The PDF is built by hand (object table, content streams, xref, trailer) and
uses a non-embedded CJK CID font, so Chinese and Latin text both render in
standard viewers without any font data in the file.

Quick Start:
    from resume_pdf import render_resume_pdf

    render_resume_pdf("data/resume.json", "resume.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    CompilationError,
    ConfigurationError,
    GeometryError,
    ImageGenerationError,
    InputError,
    LayoutError,
    ObjectTableError,
    PostProcessError,
    ResumePdfError,
)
from .api import build_pdf_bytes, render_resume_pdf
from .engine import EN, ZH, LayoutEngine, PageGeometry, StyleTable
from .loader import load_resume
from .models import ResumeRecord
from .pdfcompiler import PDFCompiler

__all__ = [
    "__version__",
    "__version_info__",
    "CompilationError",
    "ConfigurationError",
    "EN",
    "GeometryError",
    "ImageGenerationError",
    "InputError",
    "LayoutError",
    "LayoutEngine",
    "ObjectTableError",
    "PDFCompiler",
    "PageGeometry",
    "PostProcessError",
    "ResumePdfError",
    "ResumeRecord",
    "StyleTable",
    "ZH",
    "build_pdf_bytes",
    "load_resume",
    "render_resume_pdf",
]
