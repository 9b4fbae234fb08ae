"""Shared fixtures: synthetic pages and a poppler-free rasterizer."""

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from slide_scrub.models.page_models import PageImage
from slide_scrub.pdf_handler import encode_page

BACKGROUND = (240, 240, 240)
LOGO = (20, 20, 20)


def draw_slide(size, background=BACKGROUND, logo=LOGO) -> Image.Image:
    """Uniform slide with a dark logo in the bottom-right corner."""
    width, height = size
    img = Image.new("RGB", size, background)
    ImageDraw.Draw(img).rectangle(
        [int(width * 0.82), int(height * 0.87), int(width * 0.95), int(height * 0.96)],
        fill=logo,
    )
    return img


class FakeRasterizer:
    """Stands in for poppler: every page is a synthetic slide.

    ``page_counts`` maps file names to page counts. ``fail_on`` is an optional
    (file name, page index) pair whose render raises.
    """

    def __init__(self, page_counts, base_size=(200, 150), fail_on=None):
        self.page_counts = page_counts
        self.base_size = base_size
        self.fail_on = fail_on
        self.render_calls = []

    def count_pages(self, pdf_path: Path) -> int:
        return self.page_counts[Path(pdf_path).name]

    def render_page(self, pdf_path: Path, page_index: int, scale: float) -> PageImage:
        name = Path(pdf_path).name
        self.render_calls.append((name, page_index, scale))
        if self.fail_on == (name, page_index):
            raise RuntimeError(f"render failed: {name} page {page_index + 1}")
        width, height = self.base_size
        img = draw_slide((int(width * scale), int(height * scale)))
        return encode_page(img, page_index + 1)


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer


@pytest.fixture
def make_pdf_inputs(tmp_path):
    """Create empty placeholder files; the fake rasterizer never reads them."""

    def _make(*names):
        paths = []
        for name in names:
            path = tmp_path / name
            path.write_bytes(b"%PDF-1.4\n")
            paths.append(path)
        return paths

    return _make


@pytest.fixture
def slide_image():
    return draw_slide


@pytest.fixture
def page_from_image():
    def _page(img: Image.Image, page_num: int = 1, format: str = "PNG") -> PageImage:
        buffer = BytesIO()
        img.save(buffer, format=format)
        return PageImage(page_num, buffer.getvalue(), img.size)

    return _page
