"""Résumé record models.

The JSON record is loosely typed: any field may be missing, ``null``, of the
wrong JSON type, or a ``TODO`` placeholder. The models keep the raw scalar
values untouched and only normalize containers, so a list that is not a list
and an object that is not an object are read as empty. Placeholder handling
belongs to the layout engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


@dataclass(slots=True)
class Link:
    """A labelled URL (profile link or project evidence)."""

    label: Optional[Any] = None
    url: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Link":
        data = _as_dict(data)
        return cls(label=data.get("label"), url=data.get("url"))


@dataclass(slots=True)
class Basics:
    name: Optional[Any] = None
    headline: Optional[Any] = None
    location: Optional[Any] = None
    email: Optional[Any] = None
    phone: Optional[Any] = None
    links: List[Link] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Basics":
        data = _as_dict(data)
        return cls(
            name=data.get("name"),
            headline=data.get("headline"),
            location=data.get("location"),
            email=data.get("email"),
            phone=data.get("phone"),
            links=[Link.from_dict(item) for item in _as_list(data.get("links"))],
        )


@dataclass(slots=True)
class Experience:
    title: Optional[Any] = None
    org: Optional[Any] = None
    role: Optional[Any] = None
    start: Optional[Any] = None
    end: Optional[Any] = None
    location: Optional[Any] = None
    summary: List[Any] = field(default_factory=list)
    achievements: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Experience":
        data = _as_dict(data)
        return cls(
            title=data.get("title"),
            org=data.get("org"),
            role=data.get("role"),
            start=data.get("start"),
            end=data.get("end"),
            location=data.get("location"),
            summary=_as_list(data.get("summary")),
            achievements=_as_list(data.get("achievements")),
        )


@dataclass(slots=True)
class Project:
    name: Optional[Any] = None
    context: Optional[Any] = None
    actions: List[Any] = field(default_factory=list)
    result: Optional[Any] = None
    evidence: List[Link] = field(default_factory=list)
    reflection: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        data = _as_dict(data)
        return cls(
            name=data.get("name"),
            context=data.get("context"),
            actions=_as_list(data.get("actions")),
            result=data.get("result"),
            evidence=[Link.from_dict(item) for item in _as_list(data.get("evidence"))],
            reflection=data.get("reflection"),
        )


@dataclass(slots=True)
class SkillGroup:
    group: Optional[Any] = None
    items: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "SkillGroup":
        data = _as_dict(data)
        return cls(group=data.get("group"), items=_as_list(data.get("items")))


@dataclass(slots=True)
class Education:
    school: Optional[Any] = None
    degree: Optional[Any] = None
    major: Optional[Any] = None
    start: Optional[Any] = None
    end: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Education":
        data = _as_dict(data)
        return cls(
            school=data.get("school"),
            degree=data.get("degree"),
            major=data.get("major"),
            start=data.get("start"),
            end=data.get("end"),
        )


@dataclass(slots=True)
class ResumeRecord:
    """A complete résumé as read from JSON."""

    basics: Basics = field(default_factory=Basics)
    highlights: List[Any] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: List[SkillGroup] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    certifications: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """Build a record from decoded JSON.

        Args:
            data: Decoded JSON document (normally a dict)

        Returns:
            ResumeRecord with every container normalized
        """
        data = _as_dict(data)
        return cls(
            basics=Basics.from_dict(data.get("basics")),
            highlights=_as_list(data.get("highlights")),
            experience=[Experience.from_dict(item) for item in _as_list(data.get("experience"))],
            projects=[Project.from_dict(item) for item in _as_list(data.get("projects"))],
            skills=[SkillGroup.from_dict(item) for item in _as_list(data.get("skills"))],
            education=[Education.from_dict(item) for item in _as_list(data.get("education"))],
            certifications=_as_list(data.get("certifications")),
        )
