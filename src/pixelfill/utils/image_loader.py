from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from PIL import Image

from pixelfill.utils.color import RGB

logger = logging.getLogger(__name__)


def raster_from_image(image: Image.Image) -> List[List[RGB]]:
    """Rows of RGB triples in storage order (top row first)."""
    rgb = image.convert("RGB")
    width, height = rgb.size
    pixels = list(rgb.getdata())
    return [pixels[row * width:(row + 1) * width] for row in range(height)]


def load_raster(path: str | Path) -> List[List[RGB]]:
    """Decode an image file into RGB rows.

    Raises FileNotFoundError or PIL.UnidentifiedImageError for unreadable files.
    """
    path = Path(path)
    with Image.open(path) as image:
        rows = raster_from_image(image)
    logger.debug("Loaded %s (%dx%d)", path, len(rows[0]) if rows else 0, len(rows))
    return rows
