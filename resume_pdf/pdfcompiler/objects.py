"""PDF objects and data structures."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from ..exceptions import ObjectTableError
from .utils import format_coordinate, format_pdf_number, hex_string

_REFERENCE_RE = re.compile(rb"(\d+) 0 R\b")


@dataclass
class PdfStream:
    """Represents a PDF content stream (instructions for drawing)."""

    commands: List[str] = field(default_factory=list)

    def add_text(self, font_alias: str, font_size: float, x: float, y: float, text: str) -> None:
        """Add a text drawing block.

        The text is always written as a UTF-16BE hex string so CJK and
        Latin text go through the same CID font path.

        Args:
            font_alias: Font alias (e.g., "/F1")
            font_size: Font size in points
            x: X position of the baseline start
            y: Y position of the baseline
            text: Text content
        """
        self.commands.append("BT")
        self.commands.append(f"{font_alias} {format_pdf_number(font_size)} Tf")
        self.commands.append(f"{format_coordinate(x)} {format_coordinate(y)} Td")
        self.commands.append(f"{hex_string(text)} Tj")
        self.commands.append("ET")

    def get_content(self) -> str:
        """Get stream content, newline terminated."""
        return "\n".join(self.commands) + "\n"

    def get_length(self) -> int:
        """Get stream length in bytes."""
        return len(self.get_content().encode("utf-8"))

    def to_object_body(self) -> str:
        return f"<< /Length {self.get_length()} >>\nstream\n{self.get_content()}endstream"


class PdfObjectTable:
    """Numbered PDF object bodies, 1-based and contiguous.

    Numbers are handed out by :meth:`reserve` so that objects can refer to
    each other before their bodies exist. Every reserved slot must receive
    exactly one body before the table is serialized.
    """

    def __init__(self) -> None:
        self._bodies: List[Optional[bytes]] = []

    def __len__(self) -> int:
        return len(self._bodies)

    def reserve(self) -> int:
        """Allocate the next object number."""
        self._bodies.append(None)
        return len(self._bodies)

    def set(self, obj_num: int, body: str | bytes) -> None:
        """Assign the body of a reserved object.

        Raises:
            ObjectTableError: If ``obj_num`` was never reserved or already has a body
        """
        if not 1 <= obj_num <= len(self._bodies):
            raise ObjectTableError(f"PDF object {obj_num} was never reserved")
        if self._bodies[obj_num - 1] is not None:
            raise ObjectTableError(f"PDF object {obj_num} assigned twice")
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._bodies[obj_num - 1] = body

    def items(self) -> Iterator[Tuple[int, bytes]]:
        for index, body in enumerate(self._bodies):
            yield index + 1, body

    def references(self) -> Set[int]:
        """Object numbers referenced (``n 0 R``) from any dictionary."""
        refs: Set[int] = set()
        for _, body in self.items():
            if body is None:
                continue
            dictionary = body.split(b"\nstream\n", 1)[0]
            refs.update(int(match) for match in _REFERENCE_RE.findall(dictionary))
        return refs

    def validate(self, root_obj_num: int) -> None:
        """Check the table before serialization.

        The referenced object numbers plus the root must be exactly
        ``1..len(self)``: no empty slot, no dangling reference, no
        unreachable object.

        Raises:
            ObjectTableError: On any inconsistency
        """
        if not self._bodies:
            raise ObjectTableError("PDF object table is empty")

        for obj_num, body in self.items():
            if not body:
                raise ObjectTableError(f"Missing PDF object {obj_num}")

        expected = set(range(1, len(self._bodies) + 1))
        reachable = self.references() | {root_obj_num}

        dangling = sorted(reachable - expected)
        if dangling:
            raise ObjectTableError("Dangling PDF object references", ", ".join(map(str, dangling)))

        unreachable = sorted(expected - reachable)
        if unreachable:
            raise ObjectTableError("Unreachable PDF objects", ", ".join(map(str, unreachable)))
