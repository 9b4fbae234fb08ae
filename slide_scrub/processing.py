"""Heuristic branding scrub: sample the background above each zone and paint it over."""

import logging
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFilter, UnidentifiedImageError

from slide_scrub.config import Config
from slide_scrub.models.page_models import PageImage
from slide_scrub.models.zones import PixelRect, Zone, zones_for

config = Config()
log = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


def probe_point(zone: Zone, width: int, height: int) -> Tuple[int, int]:
    """Pixel sampled for a zone: centered horizontally, just above its top edge."""
    rect = zone.to_pixels(width, height)
    x = int(rect.left + rect.width / 2)
    y = int(max(0, rect.top - config.PROBE_OFFSET))
    return min(max(x, 0), width - 1), min(max(y, 0), height - 1)


def sample_background(image: Image.Image, zone: Zone) -> Optional[Color]:
    """Return the RGBA color at the zone's probe point, or None if unusable.

    A None result means "leave this zone alone"; sampling never raises.
    """
    try:
        width, height = image.size
        if width == 0 or height == 0:
            return None
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        pixel = rgba.getpixel(probe_point(zone, width, height))
    except (IndexError, ValueError, OSError) as e:
        log.debug(f"Background sampling skipped for {zone}: {e}")
        return None

    if pixel[3] == 0:
        return None
    return pixel


def _fill(canvas: Image.Image, rect: PixelRect, color: Color) -> None:
    r, g, b, _ = color
    ImageDraw.Draw(canvas).rectangle(
        rect.expanded(config.FILL_MARGIN).box(), fill=(r, g, b, 255)
    )


def _feather(canvas: Image.Image, rect: PixelRect, color: Color) -> None:
    # Feather is composited from its own layer; the canvas is only painted opaque.
    r, g, b, _ = color
    alpha = round(255 * config.FEATHER_OPACITY)
    layer = Image.new("RGBA", canvas.size, (r, g, b, 0))
    ImageDraw.Draw(layer).rectangle(
        rect.expanded(config.FEATHER_MARGIN).box(), fill=(r, g, b, alpha)
    )
    layer = layer.filter(ImageFilter.GaussianBlur(config.FEATHER_BLUR_RADIUS))
    canvas.alpha_composite(layer)


def scrub_image(
    image: Image.Image, zones: Sequence[Zone]
) -> Tuple[Image.Image, int]:
    """Paint over each zone on a fresh RGBA copy of ``image``.

    Returns the new image and the number of zones actually painted. Zones whose
    probe point cannot be sampled are skipped without affecting the others.
    """
    canvas = image.convert("RGBA")
    width, height = canvas.size

    painted = 0
    for zone in zones:
        rect = zone.to_pixels(width, height)
        color = sample_background(canvas, zone)
        if color is None:
            log.debug(f"No usable background sample for {zone}, skipping")
            continue
        _fill(canvas, rect, color)
        _feather(canvas, rect, color)
        painted += 1

    return canvas, painted


def encode_image(image: Image.Image, quality: int) -> bytes:
    buffer = BytesIO()
    image.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def scrub_page(page: PageImage, is_last_page: bool) -> PageImage:
    """Scrub the branding zones of one page and re-encode it as JPEG.

    If the page cannot be decoded, or no zone could be painted, the original
    page is returned untouched.
    """
    try:
        img = Image.open(BytesIO(page.image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        log.warning(f"Could not decode page {page.page_num}, keeping original: {e}")
        return page

    zones: List[Zone] = zones_for(is_last_page)
    cleaned, painted = scrub_image(img, zones)
    log.debug(f"Page {page.page_num}: painted {painted}/{len(zones)} zones")
    if painted == 0:
        return page

    return page.repainted(encode_image(cleaned, config.OUTPUT_QUALITY), cleaned.size)
