"""
customtkinter front end for slide-scrub
"""

import logging
import os
from pathlib import Path
from tkinter import filedialog

import customtkinter as ctk
from async_tkinter_loop import async_handler, async_mainloop

from slide_scrub.batch import BatchJob
from slide_scrub.config import Config
from slide_scrub.models.callbacks import ProcessingCallbacks
from slide_scrub.models.progress import PipelineMode, ProcessingStatus, ProgressState

config = Config()
log = logging.getLogger(__name__)


def configure_logging() -> None:
    log_level = (
        logging.DEBUG
        if os.environ.get("SCRUB_DEBUG", "").lower() == "true"
        else logging.INFO
    )
    log_file = os.environ.get("SCRUB_LOG_FILE")
    if log_file:
        logging.basicConfig(
            level=log_level,
            filename=log_file,
            filemode="w",
            format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        logging.basicConfig(
            level=log_level,
            format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class ScrubApp:
    def __init__(self):
        ctk.set_appearance_mode(config.GUI_THEME)
        self.root = ctk.CTk()
        self.root.title("Slide Scrub")
        self.root.geometry(f"{config.GUI_WINDOW_WIDTH}x{config.GUI_WINDOW_HEIGHT}")

        self.batch = BatchJob(
            callbacks=ProcessingCallbacks(
                on_status_change=self._on_status_change,
                on_progress_update=self._on_progress_update,
                on_document_exported=self._on_document_exported,
            )
        )

        self.setup_ui()

    def setup_ui(self):
        # Main container
        self.main_frame = ctk.CTkFrame(self.root)
        self.main_frame.pack(fill="both", expand=True, padx=20, pady=20)

        self.title_label = ctk.CTkLabel(
            self.main_frame,
            text="Slide Scrub",
            font=ctk.CTkFont(size=24, weight="bold"),
        )
        self.title_label.pack(pady=(0, 5))

        self.subtitle_label = ctk.CTkLabel(
            self.main_frame,
            text="Remove slide branding locally. Nothing leaves your computer.",
        )
        self.subtitle_label.pack(pady=(0, 20))

        # Mode buttons
        self.mode_frame = ctk.CTkFrame(self.main_frame)
        self.mode_frame.pack(fill="x", pady=(0, 10))

        self.flatten_button = ctk.CTkButton(
            self.mode_frame,
            text="Scrub PDF",
            command=async_handler(self._start, PipelineMode.FLATTEN),
        )
        self.flatten_button.pack(side="left", expand=True, padx=10, pady=10)

        self.editable_button = ctk.CTkButton(
            self.mode_frame,
            text="Editable PPTX",
            command=async_handler(self._start, PipelineMode.EDITABLE),
        )
        self.editable_button.pack(side="right", expand=True, padx=10, pady=10)

        # Progress frame
        self.progress_frame = ctk.CTkFrame(self.main_frame)
        self.progress_frame.pack(fill="x", pady=(0, 10))

        self.progress_label = ctk.CTkLabel(self.progress_frame, text="Ready")
        self.progress_label.pack(pady=5)

        self.progress_bar = ctk.CTkProgressBar(self.progress_frame)
        self.progress_bar.pack(fill="x", padx=20, pady=5)
        self.progress_bar.set(0)

        # Status text
        self.status_text = ctk.CTkTextbox(self.main_frame, height=120)
        self.status_text.pack(fill="both", expand=True, pady=(0, 10))

        self.reset_button = ctk.CTkButton(
            self.main_frame,
            text="Start Over",
            command=self._reset,
            state="disabled",
        )
        self.reset_button.pack(pady=(0, 5))

    def _set_mode_buttons(self, state: str):
        self.flatten_button.configure(state=state)
        self.editable_button.configure(state=state)

    async def _start(self, mode: PipelineMode):
        file_paths = filedialog.askopenfilenames(
            title="Select PDF files", filetypes=[("PDF files", "*.pdf")]
        )
        if not file_paths:
            return

        self.status_text.delete("1.0", "end")
        self._set_mode_buttons("disabled")
        await self.batch.run([Path(p) for p in file_paths], mode)

    def _reset(self):
        self.batch.reset()

    # Callback implementations - these close over self

    def _on_status_change(self, state: ProgressState):
        self.progress_label.configure(text=state.message or "Ready")
        self.progress_bar.set(state.progress / 100)
        if state.status is ProcessingStatus.ERROR:
            self.status_text.insert("end", f"ERROR: {state.message}\n")
        if state.is_finished:
            self.reset_button.configure(state="normal")
        elif state.status is ProcessingStatus.IDLE:
            self.reset_button.configure(state="disabled")
            self._set_mode_buttons("normal")
            self.status_text.delete("1.0", "end")

    def _on_progress_update(self, state: ProgressState):
        self.progress_bar.set(state.progress / 100)
        self.progress_label.configure(text=f"{state.message} ({state.progress}%)")

    def _on_document_exported(self, output_path: Path):
        self.status_text.insert("end", f"Saved {output_path}\n")
        self.status_text.see("end")


def main():
    configure_logging()
    config.load()
    app = ScrubApp()
    async_mainloop(app.root)


if __name__ == "__main__":
    main()
