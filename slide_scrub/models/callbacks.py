"""Callback definitions for processing progress reporting."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from slide_scrub.models.progress import ProgressState


def _ignore(*args) -> None:
    pass


@dataclass
class ProcessingCallbacks:
    """Callbacks the batch job calls to report progress"""

    on_status_change: Callable[[ProgressState], None] = _ignore
    on_progress_update: Callable[[ProgressState], None] = _ignore
    on_document_exported: Callable[[Path], None] = _ignore
