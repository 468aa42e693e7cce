"""Runtime settings for the command-line tools."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple

from dotenv import dotenv_values

DEFAULT_INPUT = Path("data") / "resume.json"
DEFAULT_OUTPUT = Path("resume.pdf")
DEFAULT_LOCALE = "zh"

DEFAULT_PROMPTS = Path("portfolio") / "image_prompts.md"
DEFAULT_IMAGE_MODEL = "gpt-image-1"
DEFAULT_IMAGE_SIZE = "1536x1024"
DEFAULT_ASPECT = "16x10"
DEFAULT_RESIZE = "1600x1000"

API_KEY_VAR = "OPENAI_API_KEY"


@dataclass
class ExportSettings:
    """Where to read the résumé from and where to write the PDF."""

    input_path: Path = DEFAULT_INPUT
    output_path: Path = DEFAULT_OUTPUT
    locale: str = DEFAULT_LOCALE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExportSettings":
        """Defaults, overridden by ``RESUME_PDF_INPUT``, ``RESUME_PDF_OUTPUT`` and ``RESUME_PDF_LOCALE``."""
        environ = os.environ if environ is None else environ
        return cls(
            input_path=Path(environ.get("RESUME_PDF_INPUT", DEFAULT_INPUT)),
            output_path=Path(environ.get("RESUME_PDF_OUTPUT", DEFAULT_OUTPUT)),
            locale=environ.get("RESUME_PDF_LOCALE", DEFAULT_LOCALE),
        )


@dataclass
class ImageJobSettings:
    """Options of one image generation run."""

    input_path: Path = DEFAULT_PROMPTS
    output_dir: Path = field(default_factory=lambda: Path("portfolio") / f"generated_images_{date.today().isoformat()}")
    model: str = DEFAULT_IMAGE_MODEL
    size: Tuple[int, int] = (1536, 1024)
    aspect: Optional[Tuple[int, int]] = (16, 10)
    resize: Optional[Tuple[int, int]] = (1600, 1000)
    only: Optional[str] = None
    limit: Optional[int] = None
    skip_existing: bool = False
    dry_run: bool = False


def find_api_key(
    env_files: Iterable[str | Path] = (),
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Look up the image API key.

    The environment wins; otherwise the first readable ``.env`` file among
    ``env_files`` (then ``./.env``) that defines the key is used.

    Returns:
        The key, or ``""`` if none was found
    """
    environ = os.environ if environ is None else environ
    if environ.get(API_KEY_VAR):
        return environ[API_KEY_VAR]

    for candidate in [*env_files, Path.cwd() / ".env"]:
        path = Path(candidate)
        if not path.is_file():
            continue
        value = dotenv_values(path).get(API_KEY_VAR)
        if value:
            return value
    return ""
