"""Parsing of the image prompt markdown document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Tuple, Union

from ..exceptions import ConfigurationError

# ### 3) `p1_03.png`
#
# **提示词：**
# prompt text ...
_ITEM_RE = re.compile(
    r"^###\s+\d+\)\s+`([^`]+)`\s*\n\n\*\*(?:提示词：|Prompt:)\*\*\n(.*?)"
    r"(?=\n\n###\s+\d+\)|\n\n#\s+\S|\n\n---|\n?\Z)",
    re.MULTILINE | re.DOTALL,
)

_DIMENSIONS_RE = re.compile(r"^(\d+)x(\d+)$")

FilenameFilter = Union[str, Pattern[str]]


@dataclass(frozen=True)
class PromptItem:
    filename: str
    prompt: str


def parse_prompt_markdown(markdown: str) -> List[PromptItem]:
    """Extract ``(filename, prompt)`` items from the prompt document.

    Items with an empty filename or prompt are skipped.
    """
    items: List[PromptItem] = []
    for match in _ITEM_RE.finditer(markdown.replace("\r\n", "\n")):
        filename = match.group(1).strip()
        prompt = match.group(2).strip()
        if filename and prompt:
            items.append(PromptItem(filename=filename, prompt=prompt))
    return items


def parse_dimensions(value: Optional[str], label: str) -> Optional[Tuple[int, int]]:
    """Parse ``"WxH"``; empty or missing values mean "not set".

    Raises:
        ConfigurationError: If the value is not of the form ``WxH``
    """
    if not value or not str(value).strip():
        return None
    match = _DIMENSIONS_RE.match(str(value).strip())
    if not match:
        raise ConfigurationError(f"{label} must look like WxH, e.g. 1536x1024", str(value))
    return int(match.group(1)), int(match.group(2))


def parse_filename_filter(value: Optional[str]) -> Optional[FilenameFilter]:
    """Turn ``--only`` into a prefix string or a compiled ``/regex/flags``."""
    if not value or not value.strip():
        return None
    value = value.strip()
    last = value.rfind("/")
    if value.startswith("/") and last > 0:
        flags = 0
        for flag in value[last + 1:]:
            if flag == "i":
                flags |= re.IGNORECASE
            elif flag == "m":
                flags |= re.MULTILINE
            elif flag == "s":
                flags |= re.DOTALL
        try:
            return re.compile(value[1:last], flags)
        except re.error as e:
            raise ConfigurationError("Invalid --only pattern", str(e)) from e
    return value


def select_items(
    items: Sequence[PromptItem],
    only: Optional[FilenameFilter] = None,
    limit: Optional[int] = None,
) -> List[PromptItem]:
    """Apply the filename filter, then keep the first ``limit`` items."""
    selected = list(items)
    if isinstance(only, str):
        selected = [item for item in selected if item.filename.startswith(only)]
    elif only is not None:
        selected = [item for item in selected if only.search(item.filename)]
    if limit and limit > 0:
        selected = selected[:limit]
    return selected
