from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from PIL import Image
from pdf2image import convert_from_path
from PyPDF2 import PdfReader

from slide_scrub.config import Config
from slide_scrub.models.page_models import PageImage

config = Config()
log = logging.getLogger(__name__)

# Output pages are laid out 1 pixel = 1 point.
PDF_RESOLUTION = 72.0


def count_pages(pdf_path: Path) -> int:
    """Quick count of pages using PDF metadata"""
    try:
        pdf = PdfReader(str(pdf_path))
        return len(pdf.pages)
    except Exception as e:
        log.error(f"Error reading PDF metadata: {e}")
        raise RuntimeError(f"Failed to read PDF metadata for {pdf_path}") from e


def encode_page(img: Image.Image, page_num: int) -> PageImage:
    buffer = BytesIO()
    img.convert("RGB").save(
        buffer, format=config.RENDER_FORMAT, quality=config.RENDER_QUALITY
    )
    return PageImage(page_num, buffer.getvalue(), (img.width, img.height))


def render_page(pdf_path: Path, page_index: int, scale: float) -> PageImage:
    """Rasterize one page (0-based index) at ``scale`` times 72 DPI."""
    page_num = page_index + 1
    pages = convert_from_path(
        str(pdf_path),
        first_page=page_num,
        last_page=page_num,
        dpi=int(config.BASE_DPI * scale),
    )
    if not pages:
        raise ValueError(f"Page {page_num} of {pdf_path} could not be rendered")
    return encode_page(pages[0], page_num)


class PdfRasterizer:
    """Poppler-backed rasterizer used by the page pipeline."""

    def count_pages(self, pdf_path: Path) -> int:
        return count_pages(pdf_path)

    def render_page(self, pdf_path: Path, page_index: int, scale: float) -> PageImage:
        return render_page(pdf_path, page_index, scale)


@dataclass
class PdfLayout:
    """What was written by :func:`build_pdf_from_images`."""

    path: Path
    page_count: int
    page_size: Tuple[int, int]
    orientation: str


def orientation_for(width: int, height: int) -> str:
    return "landscape" if width > height else "portrait"


def build_pdf_from_images(
    images: List[PageImage], output_path: Path
) -> Optional[PdfLayout]:
    """Write one image per page, every page sized like the first image."""
    if not images:
        log.warning(f"No pages to write for {output_path}")
        return None

    pages: List[Image.Image] = []
    for page_image in images:
        img = Image.open(BytesIO(page_image.image_bytes)).convert("RGB")
        if pages and img.size != pages[0].size:
            img = img.resize(pages[0].size, Image.Resampling.LANCZOS)
        pages.append(img)

    width, height = pages[0].size
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pages[0].save(
        output_path,
        "PDF",
        save_all=True,
        append_images=pages[1:],
        resolution=PDF_RESOLUTION,
    )
    log.info(f"Wrote {len(pages)} page(s) to {output_path}")

    return PdfLayout(
        path=output_path,
        page_count=len(pages),
        page_size=(width, height),
        orientation=orientation_for(width, height),
    )
