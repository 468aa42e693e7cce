"""Font resources for PDF output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfCidFont:
    """A non-embedded CJK composite font.

    The font is referenced by name only; the viewer supplies the glyphs.
    ``STSong-Light`` with the ``UniGB-UCS2-H`` CMap is available in common
    PDF viewers and covers both Chinese and Latin text.
    """

    alias: str = "/F1"
    base_font: str = "STSong-Light"
    encoding: str = "UniGB-UCS2-H"
    registry: str = "Adobe"
    ordering: str = "GB1"
    supplement: int = 5

    def type0_body(self, descendant_obj_num: int) -> str:
        return (
            f"<< /Type /Font /Subtype /Type0 /BaseFont /{self.base_font} "
            f"/Encoding /{self.encoding} /DescendantFonts [{descendant_obj_num} 0 R] >>"
        )

    def cid_font_body(self, descriptor_obj_num: int) -> str:
        return (
            f"<< /Type /Font /Subtype /CIDFontType0 /BaseFont /{self.base_font}\n"
            f"  /CIDSystemInfo << /Registry ({self.registry}) /Ordering ({self.ordering}) "
            f"/Supplement {self.supplement} >>\n"
            f"  /FontDescriptor {descriptor_obj_num} 0 R\n"
            f">>"
        )

    def descriptor_body(self) -> str:
        return (
            f"<< /Type /FontDescriptor /FontName /{self.base_font} /Flags 4 /FontBBox [0 -200 1000 900]\n"
            f"  /ItalicAngle 0 /Ascent 880 /Descent -120 /CapHeight 700 /StemV 80\n"
            f">>"
        )

    def resources_body(self, font_obj_num: int) -> str:
        """``/Resources`` dictionary exposing this font under its alias."""
        return f"<< /Font << {self.alias} {font_obj_num} 0 R >> >>"
