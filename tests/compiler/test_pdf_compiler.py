"""Tests for PDFCompiler object layout."""

import re

import pytest

from resume_pdf.engine import LineKind, Margins, Page, PageGeometry, PositionedLine, Size
from resume_pdf.exceptions import CompilationError, GeometryError
from resume_pdf.pdfcompiler import PDFCompiler, PdfCidFont
from resume_pdf.pdfcompiler.utils import utf16_hex


def _page(number, *texts):
    lines = [
        PositionedLine(kind=LineKind.BODY, text=text, font_size=11, x=42, y=799.89 - 16 * index)
        for index, text in enumerate(texts)
    ]
    return Page(number=number, lines=lines)


def _object_body(data, obj_num):
    match = re.search(rb"(?:^|\n)%d 0 obj\n(.*?)\nendobj\n" % obj_num, data, re.S)
    assert match, f"object {obj_num} not found"
    return match.group(1)


class TestPDFCompiler:
    """Object numbering and object bodies."""

    def test_rejects_empty_page_list(self):
        with pytest.raises(CompilationError):
            PDFCompiler().compile([])

    def test_rejects_bad_geometry(self):
        with pytest.raises(GeometryError):
            PDFCompiler(geometry=PageGeometry(Size(-1, 10), Margins()))

    def test_single_page_object_count(self, pdf_structure):
        data = PDFCompiler().compile([_page(1, "你好")])
        info = pdf_structure(data)

        assert len(info.offsets) == 7
        assert info.size == 8
        assert info.root == 7

    @pytest.mark.parametrize("page_count", [1, 2, 5])
    def test_page_object_numbers(self, page_count, pdf_structure):
        pages = [_page(index + 1, f"page {index + 1}") for index in range(page_count)]
        data = PDFCompiler().compile(pages)
        info = pdf_structure(data)

        pages_obj = 4 + 2 * page_count
        assert info.size == 4 + 2 * page_count + 2
        assert info.root == pages_obj + 1

        kids = " ".join(f"{5 + 2 * index} 0 R" for index in range(page_count))
        assert _object_body(data, pages_obj) == (
            f"<< /Type /Pages /Count {page_count} /Kids [{kids}] >>".encode()
        )
        assert _object_body(data, pages_obj + 1) == f"<< /Type /Catalog /Pages {pages_obj} 0 R >>".encode()

        for index in range(page_count):
            page_body = _object_body(data, 5 + 2 * index)
            assert f"/Parent {pages_obj} 0 R".encode() in page_body
            assert f"/Contents {4 + 2 * index} 0 R".encode() in page_body

    def test_page_body(self):
        data = PDFCompiler().compile([_page(1, "x")])
        assert _object_body(data, 5) == (
            b"<< /Type /Page /Parent 6 0 R\n"
            b"  /MediaBox [0 0 595.28 841.89]\n"
            b"  /Resources << /Font << /F1 1 0 R >> >>\n"
            b"  /Contents 4 0 R\n"
            b">>"
        )

    def test_font_objects(self):
        data = PDFCompiler().compile([_page(1, "x")])

        assert _object_body(data, 1) == (
            b"<< /Type /Font /Subtype /Type0 /BaseFont /STSong-Light "
            b"/Encoding /UniGB-UCS2-H /DescendantFonts [2 0 R] >>"
        )
        cid_font = _object_body(data, 2)
        assert b"/Subtype /CIDFontType0 /BaseFont /STSong-Light" in cid_font
        assert b"/CIDSystemInfo << /Registry (Adobe) /Ordering (GB1) /Supplement 5 >>" in cid_font
        assert b"/FontDescriptor 3 0 R" in cid_font

        descriptor = _object_body(data, 3)
        assert b"/FontName /STSong-Light /Flags 4 /FontBBox [0 -200 1000 900]" in descriptor
        assert b"/ItalicAngle 0 /Ascent 880 /Descent -120 /CapHeight 700 /StemV 80" in descriptor

    def test_content_stream_draws_every_line(self):
        data = PDFCompiler().compile([_page(1, "经历", "Acme")])
        content = _object_body(data, 4)

        assert content.count(b"BT\n") == 2
        assert content.count(b"\nET\n") == 2
        assert b"/F1 11 Tf\n42.00 799.89 Td\n<" + utf16_hex("经历").encode() + b"> Tj" in content
        assert b"42.00 783.89 Td\n<" + utf16_hex("Acme").encode() + b"> Tj" in content

    def test_stream_length_matches_payload(self):
        data = PDFCompiler().compile([_page(1, "经历", "• Did X")])
        content = _object_body(data, 4)

        length = int(re.match(rb"<< /Length (\d+) >>\nstream\n", content).group(1))
        payload = content.split(b"\nstream\n", 1)[1]
        assert payload.endswith(b"endstream")
        assert len(payload) - len(b"endstream") == length

    def test_empty_page_has_empty_stream(self, pdf_structure):
        data = PDFCompiler().compile([Page(number=1)])
        pdf_structure(data)
        assert _object_body(data, 4) == b"<< /Length 1 >>\nstream\n\nendstream"

    def test_custom_font_alias(self):
        data = PDFCompiler(font=PdfCidFont(alias="/F9")).compile([_page(1, "x")])
        assert b"/Font << /F9 1 0 R >>" in _object_body(data, 5)
        assert b"/F9 11 Tf" in _object_body(data, 4)

    def test_compile_to_writes_file(self, temp_dir):
        output = PDFCompiler().compile_to([_page(1, "x")], temp_dir / "nested" / "out.pdf")
        assert output.exists()
        assert output.read_bytes() == PDFCompiler().compile([_page(1, "x")])
