"""Portfolio image generation from a markdown prompt document."""

from .client import ImageClient
from .postprocess import crop_box_for_aspect, postprocess_image
from .prompts import PromptItem, parse_dimensions, parse_filename_filter, parse_prompt_markdown, select_items
from .runner import MANIFEST_NAME, ImageGenerationRun

__all__ = [
    "MANIFEST_NAME",
    "ImageClient",
    "ImageGenerationRun",
    "PromptItem",
    "crop_box_for_aspect",
    "parse_dimensions",
    "parse_filename_filter",
    "parse_prompt_markdown",
    "postprocess_image",
    "select_items",
]
