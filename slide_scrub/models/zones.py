"""Fixed branding zones, expressed in percent of page width/height."""

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class PixelRect:
    """Absolute rectangle in pixels (floats, not yet snapped to the grid)."""

    left: float
    top: float
    width: float
    height: float

    def expanded(self, margin: float) -> "PixelRect":
        return PixelRect(
            self.left - margin,
            self.top - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )

    def box(self) -> List[int]:
        """Inclusive [x0, y0, x1, y1] box covering every touched pixel."""
        x0 = math.floor(self.left)
        y0 = math.floor(self.top)
        x1 = math.ceil(self.left + self.width) - 1
        y1 = math.ceil(self.top + self.height) - 1
        return [x0, y0, x1, y1]


@dataclass(frozen=True)
class Zone:
    """Rectangle (x, y, w, h) in percent of the page."""

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Zone must have a positive size, got {self}")
        if self.x < 0 or self.y < 0 or self.x + self.w > 100 or self.y + self.h > 100:
            raise ValueError(f"Zone must lie within 0-100%, got {self}")

    def to_pixels(self, width: int, height: int) -> PixelRect:
        return PixelRect(
            (self.x / 100) * width,
            (self.y / 100) * height,
            (self.w / 100) * width,
            (self.h / 100) * height,
        )


BOTTOM_RIGHT_LOGO = Zone(74, 83, 26, 17)
BOTTOM_LEFT_VARIANT = Zone(0, 87, 23, 13)
LAST_PAGE_OUTRO = Zone(25, 78, 50, 22)

BASE_ZONES = (BOTTOM_RIGHT_LOGO, BOTTOM_LEFT_VARIANT)


def zones_for(is_last_page: bool) -> List[Zone]:
    """Zones to scrub on a page, in paint order."""
    zones = list(BASE_ZONES)
    if is_last_page:
        zones.append(LAST_PAGE_OUTRO)
    return zones
