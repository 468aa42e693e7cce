"""Utility functions for PDF generation."""

BYTE_ORDER_MARK = "FEFF"


def utf16_hex(text: str) -> str:
    """Encode ``text`` as upper-case UTF-16BE hex, prefixed with the BOM.

    Every UTF-16 code unit becomes four hex digits, so ``N`` BMP characters
    give ``4 + 4 * N`` digits.
    """
    if text is None:
        text = ""
    return BYTE_ORDER_MARK + str(text).encode("utf-16-be").hex().upper()


def hex_string(text: str) -> str:
    """Return ``text`` as a PDF hex string literal (``<FEFF...>``)."""
    return f"<{utf16_hex(text)}>"


def format_pdf_number(value: float) -> str:
    """Format number for PDF (limit decimal places).
    
    Args:
        value: Numeric value
        
    Returns:
        Formatted string
    """
    return f"{value:.3f}".rstrip("0").rstrip(".")


def format_coordinate(value: float) -> str:
    """Format a page coordinate with exactly two decimals."""
    return f"{value:.2f}"
