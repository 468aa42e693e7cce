"""PDF file writer - generates xref, trailer, and final PDF structure."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List

from .objects import PdfObjectTable

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"


class PdfWriter:
    """Serializes an object table into PDF bytes."""

    def __init__(self) -> None:
        self.xref_table: List[int] = []

    def serialize(self, table: PdfObjectTable, root_obj_num: int) -> bytes:
        """Serialize ``table`` with ``root_obj_num`` as the document catalog.

        Objects are written in ascending order. Each xref offset is the byte
        position of the object's ``n 0 obj`` line.

        Args:
            table: Fully populated object table
            root_obj_num: Object number of the catalog

        Returns:
            Complete PDF file contents

        Raises:
            ObjectTableError: If the table is inconsistent
        """
        table.validate(root_obj_num)
        self.xref_table = []

        out = io.BytesIO()
        out.write(PDF_HEADER)

        for obj_num, body in table.items():
            self._write_object(out, obj_num, body)

        xref_offset = out.tell()
        self._write_xref(out)
        self._write_trailer(out, xref_offset, root_obj_num)

        data = out.getvalue()
        logger.debug(f"Serialized {len(table)} PDF objects ({len(data)} bytes)")
        return data

    def write(self, table: PdfObjectTable, root_obj_num: int, output_path: str | Path) -> Path:
        """Serialize ``table`` and write it to ``output_path``."""
        output_path = Path(output_path)
        data = self.serialize(table, root_obj_num)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as e:
            logger.error(f"IO error while writing PDF file: {e}")
            raise
        return output_path

    def _write_object(self, out: io.BytesIO, obj_num: int, body: bytes) -> None:
        self.xref_table.append(out.tell())
        out.write(f"{obj_num} 0 obj\n".encode("utf-8"))
        out.write(body)
        out.write(b"\nendobj\n")

    def _write_xref(self, out: io.BytesIO) -> None:
        out.write(b"xref\n")
        out.write(f"0 {len(self.xref_table) + 1}\n".encode("utf-8"))
        out.write(b"0000000000 65535 f \n")  # Free object
        for offset in self.xref_table:
            out.write(f"{offset:010d} {0:05d} n \n".encode("utf-8"))

    def _write_trailer(self, out: io.BytesIO, xref_offset: int, root_obj_num: int) -> None:
        out.write(b"trailer\n")
        out.write(f"<< /Size {len(self.xref_table) + 1} /Root {root_obj_num} 0 R >>".encode("utf-8"))
        out.write(b"\nstartxref\n")
        out.write(f"{xref_offset}\n".encode("utf-8"))
        out.write(b"%%EOF\n")
