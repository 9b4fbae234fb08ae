"""Configuration singleton for slide-scrub."""

import json
import logging
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)


class Config:
    """Singleton configuration class."""

    _instance: Optional["Config"] = None
    _CONFIG_FILE_PATH = Path.home() / ".config" / "slide-scrub" / "slide-scrub.json"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize all configuration values."""
        # Rasterization
        self.RENDER_SCALE = 2.0
        self.BASE_DPI = 72
        self.RENDER_FORMAT = "JPEG"
        self.RENDER_QUALITY = 85

        # Scrub Configuration
        self.PROBE_OFFSET = 15
        self.FILL_MARGIN = 5
        self.FEATHER_MARGIN = 15
        self.FEATHER_OPACITY = 0.6
        self.FEATHER_BLUR_RADIUS = 12
        self.OUTPUT_QUALITY = 82

        # Output Configuration
        self.OUTPUT_DIR: Optional[str] = None
        self.CLEANED_SUFFIX = "_Cleaned.pdf"
        self.EDITABLE_SUFFIX = "_Editable.pptx"
        self.PDF_MIME_TYPE = "application/pdf"

        # Editable deck layout (16:9, inches)
        self.SLIDE_WIDTH_IN = 10.0
        self.SLIDE_HEIGHT_IN = 5.625
        self.FONT_FACE = "Arial"
        self.TITLE_FONT_SIZE = 32
        self.TEXT_FONT_SIZE = 16
        self.TITLE_PLACEHOLDER_TEXT = "[Title Layer - Edit Me]"
        self.BODY_PLACEHOLDER_TEXT = "[Body Text - Move or Resize]"

        # Status messages
        self.FLATTEN_START_MESSAGE = "Cleaning Branding..."
        self.EDITABLE_START_MESSAGE = "Building Editable Decks..."
        self.FLATTEN_DONE_MESSAGE = "Success! Your branding-free PDF is ready."
        self.EDITABLE_DONE_MESSAGE = "Success! PowerPoint deck is ready for editing."

        # GUI settings
        self.GUI_WINDOW_WIDTH: int = 720
        self.GUI_WINDOW_HEIGHT: int = 420
        self.GUI_THEME: str = "light"

    def load(self) -> None:
        """Load configuration overrides from JSON file."""
        if not self._CONFIG_FILE_PATH.exists():
            return

        with open(self._CONFIG_FILE_PATH, "r") as f:
            data = json.load(f)

        for key, value in data.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)
            else:
                log.warning(f"Ignoring unknown config key: {key}")
