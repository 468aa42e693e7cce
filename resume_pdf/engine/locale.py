"""Localized labels for generated résumé text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class Locale:
    """Headings, separators and fixed phrases for one language."""

    code: str
    separator: str
    present: str
    missing_name: str
    links: str
    highlights: str
    experience: str
    projects: str
    skills: str
    education: str
    certifications: str
    context_label: str
    result_label: str
    evidence_label: str
    reflection_label: str


ZH = Locale(
    code="zh",
    separator="｜",
    present="至今",
    missing_name="（未填写姓名）",
    links="链接",
    highlights="核心亮点",
    experience="经历",
    projects="项目",
    skills="技能",
    education="教育 / 证书",
    certifications="证书",
    context_label="背景：",
    result_label="结果：",
    evidence_label="证据：",
    reflection_label="复盘：",
)

EN = Locale(
    code="en",
    separator=" | ",
    present="Present",
    missing_name="(Name not provided)",
    links="Links",
    highlights="Highlights",
    experience="Experience",
    projects="Projects",
    skills="Skills",
    education="Education / Certifications",
    certifications="Certifications",
    context_label="Context: ",
    result_label="Result: ",
    evidence_label="Evidence:",
    reflection_label="Reflection: ",
)

LOCALES: Dict[str, Locale] = {ZH.code: ZH, EN.code: EN}


def get_locale(code: str) -> Locale:
    """Return the locale registered under ``code``.

    Raises:
        ConfigurationError: If no such locale exists
    """
    try:
        return LOCALES[code]
    except KeyError:
        raise ConfigurationError(f"Unknown locale '{code}'", f"available: {', '.join(sorted(LOCALES))}") from None
