"""Batch orchestration: run selected PDFs through the page pipeline."""

import logging
import mimetypes
from pathlib import Path
from typing import Iterable, List, Optional, Union

from slide_scrub.config import Config
from slide_scrub.models.callbacks import ProcessingCallbacks
from slide_scrub.models.document_job import DocumentJob
from slide_scrub.models.progress import (
    PipelineMode,
    ProgressState,
    progress_percent,
)
from slide_scrub.pdf_handler import PdfRasterizer

config = Config()
log = logging.getLogger(__name__)


def _start_message(mode: PipelineMode) -> str:
    if mode is PipelineMode.FLATTEN:
        return config.FLATTEN_START_MESSAGE
    return config.EDITABLE_START_MESSAGE


def _done_message(mode: PipelineMode) -> str:
    if mode is PipelineMode.FLATTEN:
        return config.FLATTEN_DONE_MESSAGE
    return config.EDITABLE_DONE_MESSAGE


def filter_pdf_files(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """Keep only PDF files, in selection order."""
    selected = []
    for path in paths:
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type == config.PDF_MIME_TYPE:
            selected.append(path)
        else:
            log.debug(f"Skipping non-PDF selection: {path}")
    return selected


class BatchJob:
    """Owns the progress state for one session and runs batches sequentially.

    A batch either completes or fails as a whole. Documents exported before a
    failure are left in place.
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        rasterizer: Optional[PdfRasterizer] = None,
        callbacks: Optional[ProcessingCallbacks] = None,
    ) -> None:
        self.output_dir = output_dir
        self.rasterizer = rasterizer or PdfRasterizer()
        self.callbacks = callbacks or ProcessingCallbacks()
        self.state = ProgressState()
        self.exported: List[Path] = []
        self._pages_done = 0
        self._pages_total = 0

    def _output_dir_for(self, pdf_path: Path) -> Path:
        if self.output_dir is not None:
            return self.output_dir
        if config.OUTPUT_DIR:
            return Path(config.OUTPUT_DIR)
        return pdf_path.parent

    def _on_page_done(self, page_num: int, page_count: int) -> None:
        self._pages_done += 1
        self.state.advance(progress_percent(self._pages_done, self._pages_total))
        log.debug(
            f"Progress {self.state.progress}% (page {page_num}/{page_count}, "
            f"{self._pages_done}/{self._pages_total} overall)"
        )
        self.callbacks.on_progress_update(self.state)

    async def run(
        self, paths: Iterable[Union[str, Path]], mode: PipelineMode
    ) -> ProgressState:
        pdf_files = filter_pdf_files(paths)
        if not pdf_files:
            log.info("No PDF files selected")

        self.state.begin(_start_message(mode))
        self.exported = []
        self._pages_done = 0
        self._pages_total = 0
        self.callbacks.on_status_change(self.state)
        log.info(f"Starting {mode.value} batch of {len(pdf_files)} file(s)")

        try:
            jobs = [
                DocumentJob(path, self._output_dir_for(path), mode, self.rasterizer)
                for path in pdf_files
            ]
            for job in jobs:
                self._pages_total += await job.count_pages()

            # Only the running document stays referenced.
            while jobs:
                job = jobs.pop(0)
                output_path = await job.run(self._on_page_done)
                self.exported.append(output_path)
                self.callbacks.on_document_exported(output_path)

            self.state.complete(_done_message(mode))
            log.info(f"Batch complete: {len(self.exported)} file(s) exported")
        except Exception as e:
            log.error(f"Batch failed: {e}", exc_info=True)
            self.state.fail(str(e) or type(e).__name__)

        self.callbacks.on_status_change(self.state)
        return self.state

    def reset(self) -> None:
        """Return to idle after a finished batch."""
        self.state.reset()
        self.callbacks.on_status_change(self.state)
