"""Page images as they move from the rasterizer through the scrub."""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class PageImage:
    """One encoded slide image, 1-based ``page_num`` within its document.

    ``image_bytes`` holds the rendered JPEG until the page is scrubbed, then
    the repainted JPEG. ``dimensions`` is (width, height) in pixels.
    """

    page_num: int
    image_bytes: bytes
    dimensions: Tuple[int, int]

    def repainted(self, image_bytes: bytes, dimensions: Tuple[int, int]) -> "PageImage":
        return replace(self, image_bytes=image_bytes, dimensions=dimensions)
