"""Batch status and the transitions allowed between states."""

from dataclasses import dataclass
from enum import Enum


class ProcessingStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class PipelineMode(str, Enum):
    FLATTEN = "flatten"
    EDITABLE = "editable"


class InvalidTransitionError(RuntimeError):
    """Raised when a batch state change is not allowed from the current status."""


ALLOWED_TRANSITIONS = {
    ProcessingStatus.IDLE: {ProcessingStatus.PROCESSING, ProcessingStatus.IDLE},
    ProcessingStatus.PROCESSING: {ProcessingStatus.COMPLETED, ProcessingStatus.ERROR},
    ProcessingStatus.COMPLETED: {ProcessingStatus.IDLE},
    ProcessingStatus.ERROR: {ProcessingStatus.IDLE},
}


def progress_percent(done: int, total: int) -> int:
    """done/total as a whole percentage, halves rounded up."""
    if total <= 0:
        raise ValueError("total must be positive")
    return (200 * done + total) // (2 * total)


@dataclass
class ProgressState:
    status: ProcessingStatus = ProcessingStatus.IDLE
    progress: int = 0
    message: str = ""

    def _move_to(self, status: ProcessingStatus) -> None:
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Cannot go from {self.status.value} to {status.value}"
            )
        self.status = status

    def begin(self, message: str) -> None:
        self._move_to(ProcessingStatus.PROCESSING)
        self.progress = 0
        self.message = message

    def advance(self, percent: int) -> None:
        if self.status is not ProcessingStatus.PROCESSING:
            raise InvalidTransitionError("Progress can only change while processing")
        if not self.progress <= percent <= 100:
            raise ValueError(f"Progress must not go from {self.progress} to {percent}")
        self.progress = percent

    def complete(self, message: str) -> None:
        self._move_to(ProcessingStatus.COMPLETED)
        self.message = message

    def fail(self, message: str) -> None:
        self._move_to(ProcessingStatus.ERROR)
        self.message = message

    def reset(self) -> None:
        self._move_to(ProcessingStatus.IDLE)
        self.progress = 0
        self.message = ""

    @property
    def is_finished(self) -> bool:
        return self.status in (ProcessingStatus.COMPLETED, ProcessingStatus.ERROR)
