"""Cropping and resizing of generated images."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from ..exceptions import PostProcessError

logger = logging.getLogger(__name__)


def crop_box_for_aspect(width: int, height: int, aspect: Tuple[int, int]) -> Optional[Tuple[int, int, int, int]]:
    """Centered crop box bringing ``width x height`` to ``aspect``.

    Returns:
        ``(left, top, right, bottom)`` or None if no crop is needed
    """
    target_ratio = aspect[0] / aspect[1]
    current_ratio = width / height

    crop_w, crop_h = width, height
    if current_ratio > target_ratio:
        crop_w = round(height * target_ratio)
    elif current_ratio < target_ratio:
        crop_h = round(width / target_ratio)

    if (crop_w, crop_h) == (width, height):
        return None
    left = (width - crop_w) // 2
    top = (height - crop_h) // 2
    return left, top, left + crop_w, top + crop_h


def postprocess_image(
    path: str | Path,
    aspect: Optional[Tuple[int, int]] = None,
    resize: Optional[Tuple[int, int]] = None,
) -> None:
    """Crop ``path`` to ``aspect`` and then resize it to ``resize``, in place.

    Raises:
        PostProcessError: If the image cannot be read, transformed or saved
    """
    if not aspect and not resize:
        return

    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            result = image
            if aspect:
                box = crop_box_for_aspect(image.width, image.height, aspect)
                if box:
                    result = result.crop(box)
            if resize and result.size != tuple(resize):
                result = result.resize(tuple(resize), Image.Resampling.LANCZOS)
            if result is not image:
                result.save(path)
                logger.debug(f"  post-processed {path.name} -> {result.width}x{result.height}")
    except (OSError, ValueError) as e:
        raise PostProcessError(f"Post-processing failed for {path.name}", str(e)) from e
