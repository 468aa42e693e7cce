"""Reading generated PDFs back with pypdf."""

import io

import pytest
from pypdf import PdfReader

from resume_pdf import EN, build_pdf_bytes
from resume_pdf.engine import LayoutEngine
from resume_pdf.models import ResumeRecord
from resume_pdf.pdfcompiler import PDFCompiler


def _read(data):
    return PdfReader(io.BytesIO(data))


@pytest.mark.integration
class TestPdfReadback:
    """Generated files open in a third-party PDF reader."""

    def test_scenario_opens_with_one_page(self, scenario_record):
        reader = _read(build_pdf_bytes(scenario_record))

        assert len(reader.pages) == 1
        assert reader.trailer["/Size"] == 8
        assert reader.trailer["/Root"]["/Type"] == "/Catalog"

    def test_page_geometry_and_font(self, scenario_record):
        page = _read(build_pdf_bytes(scenario_record)).pages[0]

        assert float(page.mediabox.width) == pytest.approx(595.28)
        assert float(page.mediabox.height) == pytest.approx(841.89)

        font = page["/Resources"]["/Font"]["/F1"]
        assert font["/Subtype"] == "/Type0"
        assert font["/BaseFont"] == "/STSong-Light"
        assert font["/Encoding"] == "/UniGB-UCS2-H"
        descendant = font["/DescendantFonts"][0].get_object()
        assert descendant["/CIDSystemInfo"]["/Ordering"] == "GB1"

    def test_multi_page_document(self, pdf_structure):
        record = ResumeRecord.from_dict({
            "basics": {"name": "Long"},
            "highlights": [f"Highlight number {n}" for n in range(150)],
        })
        pages = LayoutEngine().build_layout(record)
        data = PDFCompiler().compile(pages)

        reader = _read(data)
        assert len(pages) > 1
        assert len(reader.pages) == len(pages)
        assert reader.trailer["/Size"] == 4 + 2 * len(pages) + 2
        pdf_structure(data)

    def test_content_stream_is_readable(self, scenario_record):
        page = _read(build_pdf_bytes(scenario_record)).pages[0]
        content = page["/Contents"].get_data()

        assert content.startswith(b"BT\n/F1 18 Tf\n42.00 799.89 Td\n<FEFF")
        assert content.count(b" Tj\n") == 5

    def test_english_locale(self, full_record):
        data = build_pdf_bytes(full_record, locale=EN)
        assert len(_read(data).pages) >= 1
