"""Semantic models for résumé records."""

from .resume import (
    Basics,
    Education,
    Experience,
    Link,
    Project,
    ResumeRecord,
    SkillGroup,
)

__all__ = [
    "Basics",
    "Education",
    "Experience",
    "Link",
    "Project",
    "ResumeRecord",
    "SkillGroup",
]
