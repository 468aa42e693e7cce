"""PDF Compiler - hand-built PDF 1.4 output for laid out pages."""

from .compiler import PDFCompiler
from .objects import PdfObjectTable, PdfStream
from .resources import PdfCidFont
from .writer import PdfWriter

__all__ = ["PDFCompiler", "PdfCidFont", "PdfObjectTable", "PdfStream", "PdfWriter"]
