"""Batch image generation from a prompt document."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import ImageJobSettings
from ..exceptions import InputError, PostProcessError
from .client import ImageClient
from .postprocess import postprocess_image
from .prompts import PromptItem, parse_filename_filter, parse_prompt_markdown, select_items

logger = logging.getLogger(__name__)

MANIFEST_NAME = "_manifest.json"


def _format_dimensions(value) -> Optional[str]:
    return f"{value[0]}x{value[1]}" if value else None


class ImageGenerationRun:
    """One pass over a prompt document.

    Items are generated in order. A generation failure (after the client's
    retries) aborts the run; a failed crop or resize only logs a warning.
    The manifest is written once every item is done.
    """

    def __init__(self, settings: ImageJobSettings, client: Optional[ImageClient] = None):
        self.settings = settings
        self.client = client

    def load_items(self) -> List[PromptItem]:
        try:
            markdown = Path(self.settings.input_path).read_text(encoding="utf-8")
        except OSError as e:
            raise InputError("Cannot read prompt document", f"{self.settings.input_path}: {e}") from e
        items = parse_prompt_markdown(markdown)
        return select_items(items, parse_filename_filter(self.settings.only), self.settings.limit)

    def run(self) -> Optional[Dict[str, Any]]:
        """Generate every selected item.

        Returns:
            The manifest, or None for a dry run or when nothing matched
        """
        settings = self.settings
        items = self.load_items()
        if not items:
            logger.warning("No image items matched. Check the prompt document and --only.")
            return None

        logger.info(f"Generating {len(items)} image(s)")
        logger.info(f"Input: {settings.input_path}")
        logger.info(f"Output: {settings.output_dir}")
        logger.info(
            f"Model: {settings.model} | size: {_format_dimensions(settings.size)} | "
            f"aspect: {_format_dimensions(settings.aspect) or 'none'} | "
            f"resize: {_format_dimensions(settings.resize) or 'none'}"
        )

        if settings.dry_run:
            for item in items[:5]:
                logger.info(f"- {item.filename}")
            if len(items) > 5:
                logger.info(f"... ({len(items) - 5} more)")
            return None

        if self.client is None:
            raise ValueError("An ImageClient is required unless dry_run is set")

        output_dir = Path(settings.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        manifest: Dict[str, Any] = {
            "source": str(settings.input_path),
            "generatedAt": datetime.now(timezone.utc).isoformat(),
            "model": settings.model,
            "size": _format_dimensions(settings.size),
            "aspect": _format_dimensions(settings.aspect),
            "resize": _format_dimensions(settings.resize),
            "items": [],
        }

        for index, item in enumerate(items, start=1):
            manifest["items"].append(self._generate_item(index, len(items), item, output_dir))

        manifest_path = output_dir / MANIFEST_NAME
        manifest_path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Done. Manifest: {manifest_path}")
        return manifest

    def _generate_item(self, index: int, total: int, item: PromptItem, output_dir: Path) -> Dict[str, Any]:
        settings = self.settings
        out_path = output_dir / item.filename
        entry = {"filename": item.filename, "prompt": item.prompt, "path": str(out_path)}

        if settings.skip_existing and out_path.exists():
            logger.info(f"[{index}/{total}] skip existing: {item.filename}")
            return {**entry, "skipped": True}

        logger.info(f"[{index}/{total}] generate: {item.filename}")
        png = self.client.generate_png(item.prompt, model=settings.model, size=_format_dimensions(settings.size))

        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(png)

        try:
            postprocess_image(out_path, aspect=settings.aspect, resize=settings.resize)
        except PostProcessError as e:
            logger.warning(f"  post-process failed: {e}")

        return {**entry, "skipped": False}
