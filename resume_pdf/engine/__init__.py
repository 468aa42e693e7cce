"""Layout engine for résumé records."""

from .geometry import Margins, PageGeometry, Size
from .layout_engine import LayoutEngine
from .layout_primitives import Line, Page, PositionedLine
from .line_builder import ResumeLineBuilder, build_lines
from .locale import EN, LOCALES, ZH, Locale, get_locale
from .paginator import Paginator
from .styles import LineKind, LineStyle, StyleTable
from .text import format_range, is_placeholder, safe_text, wrap_text

__all__ = [
    "EN",
    "LOCALES",
    "ZH",
    "LayoutEngine",
    "Line",
    "LineKind",
    "LineStyle",
    "Locale",
    "Margins",
    "Page",
    "PageGeometry",
    "Paginator",
    "PositionedLine",
    "ResumeLineBuilder",
    "Size",
    "StyleTable",
    "build_lines",
    "format_range",
    "get_locale",
    "is_placeholder",
    "safe_text",
    "wrap_text",
]
