"""Presenter-side state for interactive conversion.

A session owns the current image and settings and recomputes the whole grid
whenever either changes. Image loads are tracked with tokens: starting a new
load makes every earlier token stale, and results delivered for a stale token
are discarded so a slow load can never overwrite a newer one.
"""

import logging
from enum import Enum
from pathlib import Path

from asciiconv.buffer import ImageBuffer, load_image
from asciiconv.converter import convert
from asciiconv.engine import CellGrid
from asciiconv.errors import ConversionError, PixelAccessDenied
from asciiconv.settings import ConversionSettings

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "ascii-art.txt"


class SessionState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ConversionSession:
    def __init__(self, settings: ConversionSettings | None = None):
        self.settings = settings if settings is not None else ConversionSettings()
        self.state = SessionState.IDLE
        self.image: ImageBuffer | None = None
        self.output: CellGrid | None = None
        self.error: ConversionError | None = None
        self._token = 0

    def begin_load(self) -> int:
        self._token += 1
        self.state = SessionState.LOADING
        logger.info("Started image load %d", self._token)
        return self._token

    def _is_current(self, token: int) -> bool:
        if token != self._token or self.state is not SessionState.LOADING:
            logger.info("Discarding result of stale load %d (current is %d)", token, self._token)
            return False
        return True

    def complete_load(self, token: int, image: ImageBuffer) -> bool:
        """Install a loaded image and convert it. Returns False if the load was superseded."""
        if not self._is_current(token):
            return False
        self.image = image
        self._recompute()
        return True

    def fail_load(self, token: int, error: ConversionError) -> bool:
        if not self._is_current(token):
            return False
        self._fail(error)
        return True

    def load_path(self, path: str | Path) -> CellGrid | None:
        token = self.begin_load()
        try:
            image = load_image(path)
        except ConversionError as exc:
            self.fail_load(token, exc)
            return None
        except OSError as exc:
            self.fail_load(token, PixelAccessDenied(f"Failed to read image {path}: {exc}"))
            return None
        self.complete_load(token, image)
        return self.output if self.state is SessionState.READY else None

    def update_settings(self, **changes) -> CellGrid | None:
        """Apply setting changes and recompute from the current image, if any."""
        self.settings = self.settings.replace(**changes)
        if self.image is not None and self.state is not SessionState.LOADING:
            self._recompute()
        return self.output

    def export_text(self, path: str | Path = DEFAULT_EXPORT_NAME) -> Path:
        if self.output is None:
            raise ValueError("No ASCII art to export")
        path = Path(path)
        path.write_text(self.output.text, encoding="utf-8")
        return path

    def _recompute(self) -> None:
        try:
            output = convert(self.image, self.settings)
        except ConversionError as exc:
            self._fail(exc)
            return
        self.output = output
        self.error = None
        self.state = SessionState.READY

    def _fail(self, error: ConversionError) -> None:
        # The last good output stays available to the presenter
        logger.warning("Conversion failed: %s", error)
        self.error = error
        self.state = SessionState.FAILED
