"""DocumentJob: rasterize, scrub and export a single PDF."""

import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Optional

from slide_scrub.config import Config
from slide_scrub.models.page_models import PageImage
from slide_scrub.models.progress import PipelineMode
from slide_scrub.models.slide_models import editable_slide
from slide_scrub.pdf_handler import PdfRasterizer, build_pdf_from_images
from slide_scrub.pptx_handler import build_pptx_from_slides
from slide_scrub.processing import scrub_page

config = Config()
log = logging.getLogger(__name__)


class DocumentJob:
    """Encapsulates the page pipeline for one input document.

    Pages are handled strictly in order. Any failure while rendering, scrubbing
    or exporting propagates to the caller; nothing is caught here. Cleaned
    pages are held only while `run` is exporting them.
    """

    def __init__(
        self,
        pdf_path: Path,
        output_dir: Path,
        mode: PipelineMode,
        rasterizer: Optional[PdfRasterizer] = None,
    ) -> None:
        self.pdf_path = pdf_path
        self.output_dir = output_dir
        self.mode = mode
        self.rasterizer = rasterizer or PdfRasterizer()
        self.page_count: Optional[int] = None

    @property
    def output_path(self) -> Path:
        suffix = (
            config.CLEANED_SUFFIX
            if self.mode is PipelineMode.FLATTEN
            else config.EDITABLE_SUFFIX
        )
        return self.output_dir / f"{self.pdf_path.stem}{suffix}"

    async def count_pages(self) -> int:
        if self.page_count is None:
            self.page_count = await asyncio.to_thread(
                self.rasterizer.count_pages, self.pdf_path
            )
            if self.page_count == 0:
                raise ValueError(f"No pages found in {self.pdf_path.name}")
        return self.page_count

    async def _scrub_pages(
        self, on_page_done: Callable[[int, int], None]
    ) -> List[PageImage]:
        page_count = await self.count_pages()
        cleaned_pages: List[PageImage] = []
        for index in range(page_count):
            page = await asyncio.to_thread(
                self.rasterizer.render_page, self.pdf_path, index, config.RENDER_SCALE
            )
            is_last_page = index == page_count - 1
            cleaned = await asyncio.to_thread(scrub_page, page, is_last_page)
            cleaned_pages.append(cleaned)
            log.debug(f"{self.pdf_path.name}: page {index + 1}/{page_count} scrubbed")
            on_page_done(index + 1, page_count)
        return cleaned_pages

    async def run(self, on_page_done: Callable[[int, int], None]) -> Path:
        """Scrub every page, export, and return the written file."""
        log.info(f"Processing {self.pdf_path} ({self.mode.value})")
        cleaned_pages = await self._scrub_pages(on_page_done)

        output_path = self.output_path
        if self.mode is PipelineMode.FLATTEN:
            await asyncio.to_thread(build_pdf_from_images, cleaned_pages, output_path)
        else:
            slides = [
                editable_slide(page, index)
                for index, page in enumerate(cleaned_pages)
            ]
            await asyncio.to_thread(build_pptx_from_slides, slides, output_path)

        log.info(f"Exported {output_path}")
        return output_path
