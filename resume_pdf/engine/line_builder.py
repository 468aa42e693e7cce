"""Turns a résumé record into an ordered sequence of styled lines."""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..models import Basics, Education, Experience, Link, Project, ResumeRecord, SkillGroup
from .layout_primitives import Line
from .locale import ZH, Locale
from .styles import LineKind
from .text import format_range, join_present, safe_text

logger = logging.getLogger(__name__)


class ResumeLineBuilder:
    """Builds the reading-order line list for one résumé.

    Sections appear in a fixed order: header, contact line, links,
    highlights, experience, projects, skills, then education and
    certifications. A section whose entries all turn out empty (missing or
    ``TODO`` values) is dropped together with its heading.
    """

    def __init__(self, locale: Locale = ZH):
        self.locale = locale

    def build(self, record: ResumeRecord) -> List[Line]:
        """Build lines for ``record``.

        Args:
            record: Résumé record

        Returns:
            Ordered list of lines; always starts with a heading-1 line
        """
        lines: List[Line] = []
        lines.extend(self._header_lines(record.basics))

        self._add_section(lines, self.locale.links, self._bullets(self._link_text(link) for link in record.basics.links))
        self._add_section(lines, self.locale.highlights, self._bullets(record.highlights))
        self._add_section(lines, self.locale.experience, self._entries(record.experience, self._experience_lines))
        self._add_section(lines, self.locale.projects, self._entries(record.projects, self._project_lines))
        self._add_section(lines, self.locale.skills, self._entries(record.skills, self._skill_lines))
        self._add_section(lines, self.locale.education, self._education_and_certification_lines(record))

        logger.debug(f"Built {len(lines)} lines from résumé record")
        return lines

    def _add_section(self, lines: List[Line], heading: str, body: List[Line]) -> None:
        if not body:
            return
        lines.append(Line(LineKind.SPACER))
        lines.append(Line(LineKind.HEADING_2, heading))
        lines.extend(body)

    def _header_lines(self, basics: Basics) -> List[Line]:
        sep = self.locale.separator
        name = safe_text(basics.name) or self.locale.missing_name
        headline = safe_text(basics.headline)

        lines = [Line(LineKind.HEADING_1, join_present([name, headline], sep))]
        contact = join_present(
            [safe_text(basics.location), safe_text(basics.email), safe_text(basics.phone)],
            sep,
        )
        if contact:
            lines.append(Line(LineKind.META, contact))
        return lines

    @staticmethod
    def _link_text(link: Link) -> str:
        url = safe_text(link.url)
        if not url:
            return ""
        label = safe_text(link.label)
        return f"{label}: {url}" if label else url

    @staticmethod
    def _bullets(values: Iterable) -> List[Line]:
        return [Line(LineKind.BULLET, text) for text in (safe_text(value) for value in values) if text]

    @staticmethod
    def _entries(entries: Iterable, render) -> List[Line]:
        """Render each entry, closing every non-empty one with a small spacer."""
        body: List[Line] = []
        for entry in entries:
            entry_lines = render(entry)
            if entry_lines:
                body.extend(entry_lines)
                body.append(Line(LineKind.SPACER_SMALL))
        return body

    def _experience_lines(self, item: Experience) -> List[Line]:
        sep = self.locale.separator
        lines: List[Line] = []

        title = safe_text(item.title) or join_present([safe_text(item.org), safe_text(item.role)], sep)
        if title:
            lines.append(Line(LineKind.HEADING_3, title))

        meta = join_present([format_range(item.start, item.end, self.locale.present), safe_text(item.location)], sep)
        if meta:
            lines.append(Line(LineKind.META, meta))

        lines.extend(self._bullets([*item.summary, *item.achievements]))
        return lines

    def _project_lines(self, item: Project) -> List[Line]:
        loc = self.locale
        lines: List[Line] = []

        name = safe_text(item.name)
        if name:
            lines.append(Line(LineKind.HEADING_3, name))

        context = safe_text(item.context)
        if context:
            lines.append(Line(LineKind.META, f"{loc.context_label}{context}"))

        lines.extend(self._bullets(item.actions))

        result = safe_text(item.result)
        if result:
            lines.append(Line(LineKind.META, f"{loc.result_label}{result}"))

        evidence = self._bullets(self._link_text(link) for link in item.evidence)
        if evidence:
            lines.append(Line(LineKind.META, loc.evidence_label))
            lines.extend(evidence)

        reflection = safe_text(item.reflection)
        if reflection:
            lines.append(Line(LineKind.META, f"{loc.reflection_label}{reflection}"))
        return lines

    def _skill_lines(self, item: SkillGroup) -> List[Line]:
        lines: List[Line] = []
        group = safe_text(item.group)
        if group:
            lines.append(Line(LineKind.HEADING_3, group))
        lines.extend(self._bullets(item.items))
        return lines

    def _education_lines(self, item: Education) -> List[Line]:
        lines: List[Line] = []
        school = safe_text(item.school)
        if school:
            lines.append(Line(LineKind.HEADING_3, school))
        meta = join_present(
            [
                safe_text(item.degree),
                safe_text(item.major),
                format_range(item.start, item.end, self.locale.present),
            ],
            self.locale.separator,
        )
        if meta:
            lines.append(Line(LineKind.META, meta))
        return lines

    def _education_and_certification_lines(self, record: ResumeRecord) -> List[Line]:
        body = self._entries(record.education, self._education_lines)
        certifications = self._bullets(record.certifications)
        if certifications:
            body.append(Line(LineKind.HEADING_3, self.locale.certifications))
            body.extend(certifications)
        return body


def build_lines(record: ResumeRecord, locale: Locale = ZH) -> List[Line]:
    """Build the line list for ``record`` in ``locale``."""
    return ResumeLineBuilder(locale).build(record)
